import logging
from typing import Any, Sequence, Set
from pydantic import BaseModel
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy import Select


logger = logging.getLogger(__name__)


def populate(entity: Any, data: BaseModel, exclude: Set[str] = frozenset()) -> Set[str]:
    """Copy the fields present in the request body onto ``entity``.

    Fields the client did not send are left untouched. Returns the names of the
    fields that were written.
    """
    changed = set()
    for field, value in data.model_dump(exclude_unset=True).items():
        if field in exclude:
            continue
        setattr(entity, field, value)
        changed.add(field)
    return changed


async def paginate(db: AsyncSession, stmt: Select, page: int, page_size: int) -> Sequence[Any]:
    result = await db.execute(stmt.offset((page - 1) * page_size).limit(page_size))
    return result.scalars().all()


async def commit(db: AsyncSession, action: str) -> None:
    try:
        await db.commit()
    except SQLAlchemyError as e:
        logger.error(f"Failed to {action}: {e}", exc_info=True)
        await db.rollback()
        raise
