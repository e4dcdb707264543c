"""Unit of work interface spanning the item and movement repositories."""
from abc import ABC, abstractmethod
from contextlib import AbstractContextManager


class IUnitOfWork(ABC):
    @abstractmethod
    def transaction(self) -> AbstractContextManager[None]:
        """
        Returns a context manager delimiting one transaction.

        Commits when the block exits normally. On an exception, rolls back
        every repository write made inside the block and re-raises.
        """
        pass
