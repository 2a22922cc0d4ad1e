"""Schemas: Pydantic envelopes for responses at the API boundary.

Invariants:
    - Documents stay plain dicts; only fixed-shape envelopes are modelled
    - Field names match the JSON wire names exactly
"""
