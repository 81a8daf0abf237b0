"""FastAPI dependencies: get_current_profile, require_admin_profile.

The caller is identified by the `profile_id` request header. Usage in any
protected router:
    from src.cm_gateway.auth.dependencies import get_current_profile

    @router.get("/protected")
    async def protected(profile: Profile = Depends(get_current_profile)):
        ...
"""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from src.cm_common.database import get_db_session
from src.cm_common.enums import ProfileType
from src.cm_common.ids import is_serial_id
from src.cm_profile.domain.models import Profile
from src.cm_profile.infrastructure.db_models import ProfileORM

PROFILE_HEADER = "profile_id"

_UNAUTHORIZED = HTTPException(
    status_code=status.HTTP_401_UNAUTHORIZED,
    detail="Missing or unknown profile_id header",
)


async def get_current_profile(
    request: Request,
    db: AsyncSession = Depends(get_db_session),
) -> Profile:
    """Resolve the `profile_id` header to a Profile.

    Raises HTTP 401 if the header is missing, not an integer, or unknown.
    """
    raw = request.headers.get(PROFILE_HEADER)
    if raw is None:
        raise _UNAUTHORIZED
    try:
        profile_id = int(raw)
    except ValueError:
        raise _UNAUTHORIZED from None
    if not is_serial_id(profile_id):
        raise _UNAUTHORIZED

    result = await db.execute(select(ProfileORM).where(ProfileORM.id == profile_id))
    profile = result.scalar_one_or_none()
    if profile is None:
        raise _UNAUTHORIZED
    return profile.to_domain()


async def require_admin_profile(
    current_profile: Profile = Depends(get_current_profile),
) -> Profile:
    """Verify the caller is an admin profile. Raises HTTP 403 otherwise."""
    if current_profile.type != ProfileType.ADMIN:
        raise HTTPException(
            status_code=status.HTTP_403_FORBIDDEN,
            detail="Admin profile required",
        )
    return current_profile
