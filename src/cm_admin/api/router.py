"""Admin reporting REST API. Requires an admin profile.

Both reports answer GET and POST; parameters are read from the query string
either way.
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Query, Request
from sqlalchemy.ext.asyncio import AsyncSession

from config.settings import settings
from src.cm_admin.application.service import AdminService
from src.cm_admin.domain.params import parse_date_range, parse_limit
from src.cm_common.database import get_db_session
from src.cm_common.response import ApiResponse, success_response
from src.cm_gateway.auth.dependencies import require_admin_profile
from src.cm_profile.domain.models import Profile

router = APIRouter(prefix="/admin", tags=["admin"])
_service = AdminService()


@router.api_route("/best-profession", methods=["GET", "POST"])
async def best_profession(
    request: Request,
    admin: Annotated[Profile, Depends(require_admin_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    start: str | None = Query(None, description="ISO-8601 date, inclusive"),
    end: str | None = Query(None, description="ISO-8601 date, inclusive"),
) -> ApiResponse:
    date_range = parse_date_range(start, end)
    result = await _service.best_profession(db, date_range)
    resp = success_response(result.model_dump() if result else None)
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.api_route("/best-clients", methods=["GET", "POST"])
async def best_clients(
    request: Request,
    admin: Annotated[Profile, Depends(require_admin_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
    start: str | None = Query(None, description="ISO-8601 date, inclusive"),
    end: str | None = Query(None, description="ISO-8601 date, inclusive"),
    limit: str | None = Query(None, description="Positive integer, default 2"),
) -> ApiResponse:
    date_range = parse_date_range(start, end)
    size = parse_limit(limit, settings.BEST_CLIENTS_DEFAULT_LIMIT)
    result = await _service.best_clients(db, date_range, size)
    resp = success_response([item.model_dump(by_alias=True) for item in result])
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
