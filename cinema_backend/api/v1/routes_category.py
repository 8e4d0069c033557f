from typing import Annotated
from fastapi import APIRouter, Depends, Path, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_backend.api.v1.pagination import PageParams
from cinema_backend.core.exceptions import NotFoundError
from cinema_backend.core.serialization import api_response, entity_response, list_response
from cinema_backend.crud.category import crud_category
from cinema_backend.db.session import getDB_session
from cinema_backend.schemas.category import CategoryPayload
from cinema_backend.schemas.common import INT4_MAX

router = APIRouter(
    prefix="/category",
    tags=["category"]
)


@router.get("")
async def list_categories(request: Request, paging: PageParams = Depends(), db: AsyncSession = Depends(getDB_session)):
    categories = await crud_category.get_categories(db, paging.page, paging.page_size)
    return list_response(request, "category", categories)


@router.get("/{category_id}")
async def get_category(category_id: Annotated[int, Path(ge=1, le=INT4_MAX)], request: Request, db: AsyncSession = Depends(getDB_session)):
    category = await crud_category.get_category(db, category_id)
    if category is None:
        raise NotFoundError("Category")
    return entity_response(request, "category", category)


@router.post("")
async def create_category(category: CategoryPayload, request: Request, db: AsyncSession = Depends(getDB_session)):
    created = await crud_category.create_category(db, category)
    return entity_response(request, "category", created, 201, "Category created successfully")


@router.put("/{category_id}")
async def update_category(category_id: Annotated[int, Path(ge=1, le=INT4_MAX)], category: CategoryPayload, request: Request,
                          db: AsyncSession = Depends(getDB_session)):
    result = await crud_category.update_category(db, category_id, category)
    if result is None:
        raise NotFoundError("Category")
    return entity_response(request, "category", result, message="Category updated successfully")


@router.delete("/{category_id}")
async def delete_category(category_id: Annotated[int, Path(ge=1, le=INT4_MAX)], request: Request, db: AsyncSession = Depends(getDB_session)):
    if not await crud_category.delete_category(db, category_id):
        raise NotFoundError("Category")
    return api_response(request, {"message": "Category deleted successfully"})
