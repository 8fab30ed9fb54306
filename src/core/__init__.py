"""
Core entropy extraction, domain models, lookup tables and contracts.

This package is independent of external systems (HTTP, templates, storage).
"""
