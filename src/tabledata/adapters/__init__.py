"""
Adapters Package - Collaborator Implementations.

Adapters:
    - InMemoryRowRenderer: keeps rendered rows in memory
"""

from tabledata.adapters.memory_renderer import InMemoryRowRenderer

__all__ = ["InMemoryRowRenderer"]
