import logging
from typing import List
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload
from sqlalchemy.sql import select

from cinema_backend.core.exceptions import ValidationFailedError
from cinema_backend.core.validation import ensure_valid, validate_movie
from cinema_backend.crud.base import commit, paginate, populate
from cinema_backend.models import utcnow
from cinema_backend.models.Movie import Category, Movie
from cinema_backend.schemas.movie import MoviePayload


logger = logging.getLogger(__name__)


class CRUDMovie:
    async def get_movie(self, db: AsyncSession, movie_id: int) -> Movie | None:
        result = await db.execute(select(Movie)
                                  .where(Movie.id == movie_id)
                                  .options(selectinload(Movie.categories)))
        return result.scalar_one_or_none()

    async def get_movies(self, db: AsyncSession, page: int, page_size: int):
        return await paginate(db,
                              select(Movie)
                              .options(selectinload(Movie.categories))
                              .order_by(Movie.id),
                              page, page_size)

    async def _resolve_categories(self, db: AsyncSession, category_ids: List[int]) -> List[Category]:
        wanted = set(category_ids)
        if not wanted:
            return []
        result = await db.scalars(select(Category)
                                  .where(Category.id.in_(wanted))
                                  .order_by(Category.id))
        categories = list(result.all())
        missing = wanted - {category.id for category in categories}
        if missing:
            unknown = ", ".join(str(category_id) for category_id in sorted(missing))
            raise ValidationFailedError(
                "movie", [("categories", f"references unknown category id(s) {unknown}")])
        return categories

    async def _apply(self, db: AsyncSession, movie: Movie, data: MoviePayload) -> None:
        populate(movie, data, exclude={"categories"})
        if "categories" in data.model_fields_set:
            movie.categories = await self._resolve_categories(db, data.categories or [])
            # onupdate only fires for column changes, not for the association table
            movie.updated_at = utcnow()
        ensure_valid("movie", validate_movie(movie))

    async def create_movie(self, db: AsyncSession, data: MoviePayload) -> Movie:
        movie = Movie(categories=[])
        await self._apply(db, movie, data)
        db.add(movie)
        await commit(db, "create movie")
        logger.info(f"Created movie {movie.id}")
        return movie

    async def update_movie(self, db: AsyncSession, movie_id: int, data: MoviePayload) -> Movie | None:
        movie = await self.get_movie(db, movie_id)
        if movie is None:
            return None
        await self._apply(db, movie, data)
        await commit(db, f"update movie {movie_id}")
        logger.info(f"Updated movie {movie_id}")
        return movie

    async def delete_movie(self, db: AsyncSession, movie_id: int) -> bool:
        movie = await self.get_movie(db, movie_id)
        if movie is None:
            return False
        await db.delete(movie)
        await commit(db, f"delete movie {movie_id}")
        logger.info(f"Deleted movie {movie_id}")
        return True


crud_movie = CRUDMovie()
