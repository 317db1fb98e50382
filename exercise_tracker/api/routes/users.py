"""Users — create and list users.

Invariants:
    - Username uniqueness is enforced by the database, not by a pre-check
    - Any persistence failure is reported as a generic 500 (duplicates included)
    - get_user_or_error exported for the exercise log routes

Design Decisions:
    - Malformed ids are "not found", not 422: clients only ever see ids we issued
"""

import logging
from uuid import UUID

from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.request_body import body_of
from exercise_tracker.core.errors import (
    PersistenceError, UserNotFoundError,
)
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.models.user import User
from exercise_tracker.schemas.user import UserCreate, UserResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["users"])


async def get_user_or_error(
    user_id: str, db: AsyncSession, http_status: int = 404,
) -> User:
    """Get user by id or raise UserNotFoundError with the given status."""
    try:
        uid = UUID(user_id)
    except ValueError:
        raise UserNotFoundError(user_id, http_status)
    result = await db.execute(select(User).where(User.id == uid))
    user = result.scalar_one_or_none()
    if user is None:
        raise UserNotFoundError(user_id, http_status)
    return user


@router.post("", response_model=UserResponse)
async def create_user(
    body: UserCreate = Depends(body_of(UserCreate)),
    db: AsyncSession = Depends(get_db),
):
    """Create a new user."""
    try:
        user = User(username=body.username)
        db.add(user)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(f"Failed to create user {body.username!r}: {e}")
        raise PersistenceError("Failed to create user")
    logger.info("User created", extra={"user_id": user.id})
    return UserResponse(username=user.username, id=user.id)


@router.get("", response_model=list[UserResponse])
async def list_users(db: AsyncSession = Depends(get_db)):
    """List all users."""
    try:
        result = await db.execute(
            select(User).order_by(User.created_at, User.username),
        )
        users = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error(f"Failed to fetch users: {e}", exc_info=True)
        raise PersistenceError("Failed to fetch users")
    return [UserResponse(username=u.username, id=u.id) for u in users]
