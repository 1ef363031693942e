"""Core Layer - pure puzzle logic, no IO, no logging setup, no config.

Invariants:
    - No module in core/ imports from services/, infrastructure/ or schemas/
    - No day module imports another day module
    - Every solve_* function takes the raw puzzle text and returns an Answer

Design Decisions:
    - Functional core separated from imperative shell: the runner owns file reads
      and timing, days only transform text into answers
"""
