"""FastAPI application entry point.

Run with: uvicorn src.main:app --reload --port 8000
"""

# ruff: noqa: E402  -- uvloop.install() must run before other imports

import uvloop

uvloop.install()

import logging
from collections.abc import AsyncGenerator
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from sqlalchemy import text

from config.settings import settings
from src.cm_admin.api.router import router as admin_router
from src.cm_common.database import engine
from src.cm_common.errors import AppError, RequestValidationFailed
from src.cm_common.response import error_response
from src.cm_contract.api.jobs_router import router as jobs_router
from src.cm_contract.api.router import router as contract_router
from src.cm_gateway.middleware.request_log import RequestLogMiddleware
from src.cm_ledger.api.router import router as ledger_router

logger = logging.getLogger("cm.app")


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncGenerator[None, None]:
    """Startup: verify DB connection. Shutdown: dispose."""
    async with engine.connect() as conn:
        await conn.execute(text("SELECT 1"))
    yield
    await engine.dispose()


app = FastAPI(
    title=settings.APP_NAME,
    version="0.1.0",
    lifespan=lifespan,
)


app.add_middleware(RequestLogMiddleware)


def _with_request_id(request: Request, content: dict) -> dict:
    content["request_id"] = getattr(request.state, "request_id", content["request_id"])
    return content


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError) -> JSONResponse:
    if exc.http_status >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    resp = error_response(exc.code, exc.message)
    return JSONResponse(
        status_code=exc.http_status,
        content=_with_request_id(request, resp.model_dump()),
    )


@app.exception_handler(RequestValidationError)
async def request_validation_handler(
    request: Request, exc: RequestValidationError
) -> JSONResponse:
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()))
    detail = f"{location}: {first.get('msg', 'invalid request')}" if location else "invalid request"
    err = RequestValidationFailed(detail)
    resp = error_response(err.code, err.message)
    return JSONResponse(
        status_code=err.http_status,
        content=_with_request_id(request, resp.model_dump()),
    )


app.include_router(contract_router)
app.include_router(jobs_router)
app.include_router(ledger_router)
app.include_router(admin_router)


@app.get("/health")
async def health() -> dict[str, str]:
    return {"status": "ok", "version": "0.1.0"}
