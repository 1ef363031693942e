"""Services Layer - puzzle dispatch and the solve runner.

Invariants:
    - Dispatch uses an explicit dict mapping (no auto-discovery)
    - Runner is the only place that reads inputs and measures time
"""
