"""Current user endpoints."""

from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.dependencies import get_current_identity, validate_token
from app.database import get_db
from app.domains.user.service import UserService
from app.schemas.base import ResponseSchema
from app.schemas.user import UserResponse

router = APIRouter(prefix="/api/auth", tags=["Authentication"])


@router.get("/me", response_model=ResponseSchema)
async def get_me(
    identity: str = Depends(get_current_identity),
    payload: dict = Depends(validate_token),
    db: AsyncSession = Depends(get_db),
):
    """Return the caller's user record, registering it on first sight.

    The identity provider has already vouched for the token; this endpoint
    only mirrors that identity into the local users table.
    """
    user_service = UserService(db)
    user = await user_service.get_or_create_user(identity, payload)

    if not user.is_active:
        raise HTTPException(status_code=status.HTTP_403_FORBIDDEN, detail="User account is inactive")

    return ResponseSchema(
        status="success",
        message="User retrieved successfully",
        data=UserResponse.model_validate(user).model_dump(mode="json"),
    )
