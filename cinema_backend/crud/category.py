import logging
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.sql import select

from cinema_backend.core.validation import ensure_valid, validate_category
from cinema_backend.crud.base import commit, paginate, populate
from cinema_backend.models.Movie import Category
from cinema_backend.schemas.category import CategoryPayload


logger = logging.getLogger(__name__)


class CRUDCategory:
    async def get_category(self, db: AsyncSession, category_id: int) -> Category | None:
        result = await db.execute(select(Category).where(Category.id == category_id))
        return result.scalar_one_or_none()

    async def get_categories(self, db: AsyncSession, page: int, page_size: int):
        return await paginate(db, select(Category).order_by(Category.id), page, page_size)

    async def create_category(self, db: AsyncSession, data: CategoryPayload) -> Category:
        category = Category()
        populate(category, data)
        ensure_valid("category", validate_category(category))
        db.add(category)
        await commit(db, "create category")
        logger.info(f"Created category {category.id}")
        return category

    async def update_category(self, db: AsyncSession, category_id: int, data: CategoryPayload) -> Category | None:
        category = await self.get_category(db, category_id)
        if category is None:
            return None
        populate(category, data)
        ensure_valid("category", validate_category(category))
        await commit(db, f"update category {category_id}")
        logger.info(f"Updated category {category_id}")
        return category

    async def delete_category(self, db: AsyncSession, category_id: int) -> bool:
        category = await self.get_category(db, category_id)
        if category is None:
            return False
        # movie_category rows are removed by the ON DELETE CASCADE
        await db.delete(category)
        await commit(db, f"delete category {category_id}")
        logger.info(f"Deleted category {category_id}")
        return True


crud_category = CRUDCategory()
