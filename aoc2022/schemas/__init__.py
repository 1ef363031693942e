"""Pydantic Schemas - validated report shapes for CLI output.

Invariants:
    - Schemas validate at the system boundary (what the runner hands to the CLI)

Design Decisions:
    - Separate from core: schemas describe reports, core computes answers
"""
