"""User Management Endpoints"""

from typing import List
from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.api.deps import RecordId, get_db
from utilbill.core.exceptions import NotFoundError
from utilbill.schemas.responses import DeletedResponse, UpdatedResponse
from utilbill.schemas.user import UserCreate, UserCreated, UserResponse, UserUpdate
from utilbill.services.user_service import UserService

router = APIRouter()


@router.get("", response_model=List[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)) -> List[UserResponse]:
    """List all users ordered by id."""
    users = await UserService.list_users(db)
    return [UserResponse.model_validate(u) for u in users]


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: RecordId, db: AsyncSession = Depends(get_db)) -> UserResponse:
    user = await UserService.get_user_by_id(db, user_id)
    if not user:
        raise NotFoundError("Not found")
    return UserResponse.model_validate(user)


@router.post("", response_model=UserCreated)
async def create_user(user_in: UserCreate, db: AsyncSession = Depends(get_db)) -> UserCreated:
    """Create a user. Fields: name, email, password, optional phone and role."""
    user = await UserService.create_user(db, user_in)
    return UserCreated(user_id=user.user_id, role=user.role)


@router.put("/{user_id}", response_model=UpdatedResponse)
async def update_user(
    user_id: RecordId,
    user_in: UserUpdate,
    db: AsyncSession = Depends(get_db),
) -> UpdatedResponse:
    """Update a user. Role is kept when omitted."""
    updated = await UserService.update_user(db, user_id, user_in)
    return UpdatedResponse(updated=updated)


@router.delete("/{user_id}", response_model=DeletedResponse)
async def delete_user(user_id: RecordId, db: AsyncSession = Depends(get_db)) -> DeletedResponse:
    deleted = await UserService.delete_user(db, user_id)
    return DeletedResponse(deleted=deleted)
