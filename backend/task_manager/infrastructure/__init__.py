"""Infrastructure Layer: database engine, repositories, tokens, logging.

Invariants:
    - Infrastructure maps driver and library errors to core/errors.py types
"""
