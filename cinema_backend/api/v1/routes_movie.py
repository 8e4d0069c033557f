from typing import Annotated
from fastapi import APIRouter, Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_backend.api.v1.pagination import PageParams
from cinema_backend.core.exceptions import NotFoundError
from cinema_backend.core.serialization import api_response, entity_response, list_response
from cinema_backend.crud.movie import crud_movie
from cinema_backend.db.session import getDB_session
from cinema_backend.schemas.common import INT4_MAX
from cinema_backend.schemas.movie import MoviePayload

router = APIRouter(
    prefix="/movie",
    tags=["movie"]
)


@router.get("")
async def list_movies(request: Request, paging: PageParams = Depends(), db: AsyncSession = Depends(getDB_session)):
    movies = await crud_movie.get_movies(db, paging.page, paging.page_size)
    return list_response(request, "movie", movies)


@router.get("/{movie_id}")
async def get_movie(movie_id: Annotated[int, Path(ge=1, le=INT4_MAX)], request: Request, db: AsyncSession = Depends(getDB_session)):
    movie = await crud_movie.get_movie(db, movie_id)
    if movie is None:
        raise NotFoundError("Movie")
    return entity_response(request, "movie", movie)


@router.post("")
async def create_movie(movie: MoviePayload, request: Request, db: AsyncSession = Depends(getDB_session)):
    created = await crud_movie.create_movie(db, movie)
    return entity_response(request, "movie", created, 201, "Movie created successfully")


@router.put("/{movie_id}")
async def update_movie(movie_id: Annotated[int, Path(ge=1, le=INT4_MAX)], movie: MoviePayload, request: Request, db: AsyncSession = Depends(getDB_session)):
    result = await crud_movie.update_movie(db=db, movie_id=movie_id, data=movie)
    if result is None:
        raise NotFoundError("Movie")
    return entity_response(request, "movie", result, message="Movie updated successfully")


@router.delete("/{movie_id}")
async def delete_movie(movie_id: Annotated[int, Path(ge=1, le=INT4_MAX)], request: Request, db: AsyncSession = Depends(getDB_session)):
    if not await crud_movie.delete_movie(db, movie_id):
        raise NotFoundError("Movie")
    return api_response(request, {"message": "Movie deleted successfully"})
