"""Core Layer - pure string operations, no IO beyond the OS random source.

Invariants:
    - No module in core/ imports from services/, schemas/, infrastructure/, config or main
    - All functions are deterministic except hashing.random_string
    - Inputs are never mutated; every call returns a new value

Design Decisions:
    - Functional core separated from the dispatch/CLI shell
    - One module per concern: case_transforms, length_padding, predicates,
      search_extract, cleanup, encoding, hashing, similarity
"""
