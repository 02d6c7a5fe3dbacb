"""Repository abstraction for theaters, showtimes, prices and discounts."""

import logging
from abc import ABC, abstractmethod
from typing import Generic, Protocol, TypeVar

from moviegem.exceptions import DuplicateRecordError, RecordNotFoundError

logger = logging.getLogger(__name__)


class HasId(Protocol):
    id: str


T = TypeVar("T", bound=HasId)


class Repository(ABC, Generic[T]):
    """Async collection of entities keyed by their id."""

    @abstractmethod
    async def fetch_all(self) -> list[T]:
        """Return every entity in insertion order."""

    @abstractmethod
    async def get(self, entity_id: str) -> T:
        """Return the entity with the given id."""

    @abstractmethod
    async def add(self, entity: T) -> T:
        """Store a new entity and return it."""

    @abstractmethod
    async def update(self, entity: T) -> T:
        """Replace the stored entity that has the same id."""

    @abstractmethod
    async def remove(self, entity_id: str) -> None:
        """Delete the entity with the given id."""


class InMemoryRepository(Repository[T]):
    """Repository held in a dict; iteration follows insertion order."""

    def __init__(self, entities: list[T] | None = None) -> None:
        self._entities: dict[str, T] = {}
        for entity in entities or []:
            self._entities[entity.id] = entity

    async def fetch_all(self) -> list[T]:
        return list(self._entities.values())

    async def get(self, entity_id: str) -> T:
        try:
            return self._entities[entity_id]
        except KeyError:
            raise RecordNotFoundError(f"No record with id '{entity_id}'") from None

    async def add(self, entity: T) -> T:
        if entity.id in self._entities:
            raise DuplicateRecordError(f"Record with id '{entity.id}' already exists")
        self._entities[entity.id] = entity
        logger.debug(f"Added {type(entity).__name__} {entity.id}")
        return entity

    async def update(self, entity: T) -> T:
        if entity.id not in self._entities:
            raise RecordNotFoundError(f"No record with id '{entity.id}'")
        self._entities[entity.id] = entity
        return entity

    async def remove(self, entity_id: str) -> None:
        if self._entities.pop(entity_id, None) is None:
            raise RecordNotFoundError(f"No record with id '{entity_id}'")
        logger.debug(f"Removed record {entity_id}")
