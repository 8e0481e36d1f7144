"""
Domains - Provider-independent types and contracts.

Each domain is self-contained with:
- contracts.py: Interfaces (Protocol classes)
- models.py: Pydantic data models
- test_*.py beside the code they cover
"""

__all__ = [
    "llm",
]
