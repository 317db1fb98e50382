"""Domain Types — field limits shared by ORM models and request schemas."""

USERNAME_MAX_LENGTH = 100
DESCRIPTION_MAX_LENGTH = 1000
