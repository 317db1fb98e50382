"""Route Modules — one file per resource/concern.

Invariants:
    - Each module defines its own APIRouter with prefix and tags
    - Pure shaping of responses is delegated to core/

Design Decisions:
    - Explicit registration in main.py over auto-discovery
"""
