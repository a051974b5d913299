# /corpus/repository.py

from abc import ABC, abstractmethod
from typing import Callable, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class Repository(ABC, Generic[T]):
    """Storage abstraction for the auxiliary corpus, fault case and device records."""
    @abstractmethod
    def add(self, item_id: str, item: T) -> T:
        pass

    @abstractmethod
    def get(self, item_id: str) -> Optional[T]:
        pass

    @abstractmethod
    def list(self, predicate: Callable[[T], bool] = None, limit: int = None, offset: int = 0) -> List[T]:
        pass

    @abstractmethod
    def __contains__(self, item_id: str) -> bool:
        pass


class InMemoryRepository(Repository[T]):
    """Keeps records in insertion order for the lifetime of the instance."""
    def __init__(self):
        self._items: Dict[str, T] = {}

    def add(self, item_id: str, item: T) -> T:
        self._items[item_id] = item
        return item

    def get(self, item_id: str) -> Optional[T]:
        return self._items.get(item_id)

    def list(self, predicate: Callable[[T], bool] = None, limit: int = None, offset: int = 0) -> List[T]:
        items = [item for item in self._items.values() if predicate is None or predicate(item)]
        end = None if limit is None else offset + limit
        return items[offset:end]

    def __contains__(self, item_id: str) -> bool:
        return item_id in self._items
