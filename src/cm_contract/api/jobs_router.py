"""Job listing endpoints. Payment lives in cm_ledger."""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.database import get_db_session
from src.cm_common.response import ApiResponse, success_response
from src.cm_contract.application.service import ContractApplicationService
from src.cm_gateway.auth.dependencies import get_current_profile
from src.cm_profile.domain.models import Profile

router = APIRouter(prefix="/jobs", tags=["jobs"])

_service = ContractApplicationService()


@router.get("/unpaid")
async def list_unpaid_jobs(
    request: Request,
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.list_unpaid_jobs(db, current_profile.id)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
