"""Services Layer - operation dispatch between the CLI and the pure core.

Invariants:
    - Dispatch uses an explicit dict mapping (no auto-discovery)
    - Typed errors are caught here and nowhere in core/
"""
