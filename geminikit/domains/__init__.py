"""
Domains - Capability handlers.

Each domain is self-contained with:
- models.py: Pydantic data models
- Implementation files
- test_*.py modules alongside the code
"""

__all__ = [
    "generation",
    "embeddings",
]
