"""ORM mappings — tables, keys and loader configuration."""

from sqlalchemy import inspect

from exercise_tracker.models import Exercise, User


def test_models_declare_no_relationships():
    assert list(inspect(User).relationships) == []
    assert list(inspect(Exercise).relationships) == []


def test_exercise_references_users_table():
    fks = {fk.target_fullname for fk in Exercise.__table__.c.user_id.foreign_keys}
    assert fks == {"users.id"}


def test_username_is_unique():
    assert User.__table__.c.username.unique is True
