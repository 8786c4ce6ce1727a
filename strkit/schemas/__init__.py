"""Pydantic Schemas - request/response validation for the dispatch shell.

Invariants:
    - Schemas validate at the system boundary (CLI input, dispatch envelopes)
"""
