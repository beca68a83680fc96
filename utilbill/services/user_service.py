"""User Service - Business Logic Layer"""

from typing import List, Optional
from sqlalchemy import delete, select, update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from utilbill.core.logging import get_logger
from utilbill.core.security import get_password_hash
from utilbill.models.enums import UserRole
from utilbill.models.user import User
from utilbill.schemas.user import UserCreate, UserUpdate
from utilbill.services.constraints import translate_integrity_error

logger = get_logger(__name__)

_EMAIL_TAKEN = {"*": "Email already exists"}


class UserService:
    """Service layer for user-related operations"""

    @staticmethod
    async def list_users(db: AsyncSession) -> List[User]:
        result = await db.execute(select(User).order_by(User.user_id))
        return list(result.scalars().all())

    @staticmethod
    async def get_user_by_id(db: AsyncSession, user_id: int) -> Optional[User]:
        return await db.get(User, user_id)

    @staticmethod
    async def create_user(db: AsyncSession, data: UserCreate) -> User:
        """
        Create a user with a hashed password.

        Unknown roles are stored as "user".

        Raises:
            ConflictError: Email already registered
        """
        user = User(
            name=data.name,
            email=data.email,
            password=get_password_hash(data.password),
            phone=data.phone,
            role=UserRole.normalize(data.role).value,
        )
        db.add(user)
        try:
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise translate_integrity_error(exc, unique=_EMAIL_TAKEN) from exc
        await db.refresh(user)
        logger.info("User created", extra={"user_id": user.user_id, "role": user.role})
        return user

    @staticmethod
    async def update_user(db: AsyncSession, user_id: int, data: UserUpdate) -> int:
        """Update name/email/phone; role only when provided. Returns rows changed."""
        values = {"name": data.name, "email": data.email, "phone": data.phone}
        if data.role is not None:
            values["role"] = UserRole.normalize(data.role).value
        try:
            result = await db.execute(
                update(User)
                .where(User.user_id == user_id)
                .values(**values)
                .execution_options(synchronize_session=False)
            )
            await db.commit()
        except IntegrityError as exc:
            await db.rollback()
            raise translate_integrity_error(exc, unique=_EMAIL_TAKEN) from exc
        return result.rowcount

    @staticmethod
    async def delete_user(db: AsyncSession, user_id: int) -> int:
        """Delete a user; their meters, bills and payments cascade."""
        result = await db.execute(delete(User).where(User.user_id == user_id))
        await db.commit()
        return result.rowcount
