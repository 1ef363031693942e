"""Infrastructure Layer - filesystem access and cross-cutting concerns.

Invariants:
    - Infrastructure never imports day modules from core/
    - File access failures are mapped to typed AocError subclasses

Design Decisions:
    - Thin wrappers over pathlib and logging, no third-party IO clients
"""
