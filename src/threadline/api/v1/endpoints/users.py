# src/threadline/api/v1/endpoints/users.py
"""User account endpoints."""

from fastapi import APIRouter, status

from threadline.api.v1.dependencies import CurrentCallerDep, UserServiceDep
from threadline.schemas.user import UserCreate, UserResponse
from threadline.services.errors import AuthorizationError

router = APIRouter(prefix="/users", tags=["users"])


@router.post("/", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(payload: UserCreate, users: UserServiceDep) -> UserResponse:
    """Register an account. Name, email and avatar are required."""
    user = users.create(
        name=payload.name,
        email=payload.email,
        avatar=payload.avatar,
        role=payload.role,
        membership=payload.membership,
        user_status=payload.user_status,
    )
    return UserResponse.model_validate(user)


@router.get("/email/{email}", response_model=UserResponse)
async def get_user_by_email(
    email: str,
    caller: CurrentCallerDep,
    users: UserServiceDep,
) -> UserResponse:
    """Return the caller's own account record."""
    if caller.email != email:
        raise AuthorizationError("Forbidden")
    return UserResponse.model_validate(users.get_by_email(email))
