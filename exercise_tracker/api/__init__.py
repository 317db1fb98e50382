"""API Layer — FastAPI routes, request parsing and error handlers.

Invariants:
    - Routes registered explicitly in main.py (no auto-discovery)
    - All API endpoints return JSON responses
"""
