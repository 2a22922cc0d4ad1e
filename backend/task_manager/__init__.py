"""Task Manager Application Package: user registration and per-user task CRUD.

Invariants:
    - Package root contains no executable code (no import side effects)
"""

__version__ = "1.0.0"
