from fastapi import APIRouter, Depends, Request
from sqlalchemy import text
from sqlalchemy.ext.asyncio import AsyncSession

from cinema_backend.core.serialization import api_response
from cinema_backend.db.session import getDB_session


router = APIRouter()


@router.get("/health", summary="Health check endpoint", description="Checks that the database answers a trivial query.")
async def health_check(request: Request, db: AsyncSession = Depends(getDB_session)):
    await db.execute(text("SELECT 1"))
    return api_response(request, {"status": "ok"})
