"""Port interface for the static catalog dataset used to seed an empty store."""

from abc import ABC, abstractmethod

from store_locator.domain.entities.store import Store
from store_locator.domain.errors import UnexpectedError


class StoreSource(ABC):
    @abstractmethod
    def load_stores(self) -> list[Store] | UnexpectedError:
        """Parse the whole dataset.

        A single malformed record fails the entire load.
        """
        ...
