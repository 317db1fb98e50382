"""Exercise Log — log exercises against a user and read filtered logs.

Invariants:
    - A user lookup always precedes the insert (no orphan exercises)
    - Unknown user: 400 when logging, 404 when reading the log
    - Log entries come back in insertion order; count == len(log)
    - Date bounds are inclusive on both ends
"""

import logging
from datetime import date

from fastapi import APIRouter, Depends, Request
from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from exercise_tracker.api.request_body import body_of, validate_or_raise
from exercise_tracker.api.routes.users import get_user_or_error
from exercise_tracker.core.errors import PersistenceError
from exercise_tracker.core.exercise_log import build_exercise_view, build_log_view
from exercise_tracker.infrastructure.database import get_db
from exercise_tracker.models.exercise import Exercise
from exercise_tracker.schemas.exercise import ExerciseCreate, ExerciseResponse
from exercise_tracker.schemas.log import LogQuery, LogResponse

logger = logging.getLogger(__name__)
router = APIRouter(prefix="/api/users", tags=["exercises"])


def parse_log_query(request: Request) -> LogQuery:
    """FastAPI dependency: validate from/to/limit from the query string."""
    return validate_or_raise(LogQuery, request.query_params, "query")


@router.post("/{user_id}/exercises", response_model=ExerciseResponse)
async def add_exercise(
    user_id: str,
    body: ExerciseCreate = Depends(body_of(ExerciseCreate)),
    db: AsyncSession = Depends(get_db),
):
    """Log an exercise for a user. Date defaults to today."""
    try:
        user = await get_user_or_error(user_id, db, http_status=400)
        exercise = Exercise(
            user_id=user.id,
            description=body.description,
            duration=body.duration,
            date=body.date or date.today(),
        )
        db.add(exercise)
        await db.commit()
    except SQLAlchemyError as e:
        await db.rollback()
        logger.error(
            f"Failed to add exercise: {e}", extra={"user_id": user_id},
        )
        raise PersistenceError("Failed to add exercise")
    logger.info(
        "Exercise logged",
        extra={"user_id": user.id, "exercise_id": exercise.id},
    )
    return build_exercise_view(user, exercise)


@router.get("/{user_id}/logs", response_model=LogResponse)
async def get_logs(
    user_id: str,
    query: LogQuery = Depends(parse_log_query),
    db: AsyncSession = Depends(get_db),
):
    """Return a user's exercise log, optionally date-bounded and capped."""
    try:
        user = await get_user_or_error(user_id, db, http_status=404)
        stmt = select(Exercise).where(Exercise.user_id == user.id)
        if query.from_date is not None:
            stmt = stmt.where(Exercise.date >= query.from_date)
        if query.to_date is not None:
            stmt = stmt.where(Exercise.date <= query.to_date)
        stmt = stmt.order_by(Exercise.id)
        if query.limit is not None:
            stmt = stmt.limit(query.limit)
        result = await db.execute(stmt)
        exercises = result.scalars().all()
    except SQLAlchemyError as e:
        logger.error(
            f"Failed to fetch logs: {e}", extra={"user_id": user_id},
        )
        raise PersistenceError("Failed to fetch logs")
    return build_log_view(user, exercises)
