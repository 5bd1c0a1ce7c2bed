"""Core Layer: canonicalization, interning and the type registry.

Invariants:
    - No module in core/ imports from infrastructure/ or config
    - Canonicalization is pure; registry and pools are the only shared state

Design Decisions:
    - Settings are passed in by the caller (factory/registry builder), never read here
"""
