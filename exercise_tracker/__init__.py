"""Exercise Tracker — users log timed exercises and read back filtered logs.

Invariants:
    - Package root contains no executable code beyond the version string
"""

__version__ = "1.0.0"
