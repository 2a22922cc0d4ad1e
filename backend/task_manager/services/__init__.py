"""Services: route-facing orchestration over repositories and tokens.

Invariants:
    - Services never import FastAPI or SQLAlchemy; they see only core Protocols
"""
