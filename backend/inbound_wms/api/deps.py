"""INBOUND WMS - FastAPI dependencies (DB session, service container, pagination)."""
from typing import Annotated

from fastapi import Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from inbound_wms.config import get_settings
from inbound_wms.db.session import get_db
from inbound_wms.services.inbound import InboundServices

settings = get_settings()

DbSession = Annotated[AsyncSession, Depends(get_db)]


def get_inbound_services(request: Request) -> InboundServices:
    """Service container built once in the app lifespan."""
    return request.app.state.inbound_services


Services = Annotated[InboundServices, Depends(get_inbound_services)]


class Pagination:
    """limit/offset query parameters shared by every list endpoint."""

    def __init__(
        self,
        limit: int = Query(settings.DEFAULT_PAGE_SIZE, ge=1, le=settings.MAX_PAGE_SIZE),
        offset: int = Query(0, ge=0),
    ):
        self.limit = limit
        self.offset = offset


Page = Annotated[Pagination, Depends()]
