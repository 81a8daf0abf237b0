"""cm_ledger REST endpoints.

POST /jobs/{job_id}/pay             — pay an unpaid job from the client's balance
POST /balances/deposit/{user_id}    — deposit into a client's balance
"""

from typing import Annotated

from fastapi import APIRouter, Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.database import get_db_session
from src.cm_common.response import ApiResponse, success_response
from src.cm_gateway.auth.dependencies import get_current_profile
from src.cm_ledger.application.schemas import DepositRequest
from src.cm_ledger.application.service import LedgerApplicationService
from src.cm_profile.domain.models import Profile

router = APIRouter(tags=["ledger"])

_service = LedgerApplicationService()


@router.post("/jobs/{job_id}/pay")
async def pay_job(
    job_id: int,
    request: Request,
    current_profile: Annotated[Profile, Depends(get_current_profile)],
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.pay_job(db, current_profile, job_id)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp


@router.post("/balances/deposit/{user_id}")
async def deposit(
    user_id: int,
    body: DepositRequest,
    request: Request,
    db: Annotated[AsyncSession, Depends(get_db_session)],
) -> ApiResponse:
    data = await _service.deposit(db, user_id, body.amount)
    resp = success_response(data.model_dump())
    resp.request_id = getattr(request.state, "request_id", resp.request_id)
    return resp
