"""Repositories implementing the board and membership lookups."""

from boardgate.infrastructure.repositories.boards import BoardRepository
from boardgate.infrastructure.repositories.memory import InMemoryBoardStore

__all__ = ["BoardRepository", "InMemoryBoardStore"]
