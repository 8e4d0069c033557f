from fastapi import Query

from cinema_backend.schemas.common import INT4_MAX


class PageParams:
    """``page`` / ``pageSize`` query parameters shared by every listing endpoint."""

    def __init__(self,
                 page: int = Query(1, ge=1, le=INT4_MAX),
                 page_size: int = Query(10, ge=1, le=100, alias="pageSize")):
        self.page = page
        self.page_size = page_size
