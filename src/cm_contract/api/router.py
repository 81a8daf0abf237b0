"""cm_contract REST endpoints.

GET /contracts                  — caller's non-terminated contracts
GET /contracts/{contract_id}    — one contract, only if the caller is a party
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.database import get_db_session
from src.cm_common.response import ApiResponse, success_response
from src.cm_contract.application.service import ContractApplicationService
from src.cm_gateway.auth.dependencies import get_current_profile
from src.cm_profile.domain.models import Profile

router = APIRouter(prefix="/contracts", tags=["contracts"])

_service = ContractApplicationService()


@router.get("")
async def list_contracts(
    request: Request,
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.list_contracts(db, current_profile.id)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.get("/{contract_id}")
async def get_contract(
    contract_id: int,
    request: Request,
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    result = await _service.get_contract(db, current_profile.id, contract_id)
    resp = success_response(result.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
