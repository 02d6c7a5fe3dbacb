"""View-model for the theater management screen."""

import logging
import math
import uuid

from moviegem.repositories import Repository
from moviegem.schemas.theater import Theater, TheaterStatus, TheaterType
from moviegem.seed import seat_grid, theater_repository
from moviegem.viewmodels.base import ListViewModel

logger = logging.getLogger(__name__)


class TheaterManagementViewModel(ListViewModel[Theater]):
    def __init__(self, repository: Repository[Theater] | None = None) -> None:
        super().__init__()
        self.repository = repository if repository is not None else theater_repository()

    @property
    def theaters(self) -> list[Theater]:
        return self.items

    async def _fetch(self) -> list[Theater]:
        return await self.repository.fetch_all()

    async def add_theater(self, name: str, capacity: int, type: TheaterType) -> Theater:
        """Create an active theater with a square grid of normal seats."""
        side = math.isqrt(capacity) if capacity > 0 else 0
        theater = Theater(
            id=uuid.uuid4().hex,
            name=name,
            capacity=capacity,
            type=type,
            status=TheaterStatus.ACTIVE,
            seat_layout=seat_grid(side, side),
        )
        await self._mutate(self.repository.add(theater))
        self.items.append(theater)
        self.notify()
        return theater

    async def remove_theater(self, index: int) -> None:
        theater = self.items[index]
        await self._mutate(self.repository.remove(theater.id))
        del self.items[index]
        self.notify()

    async def update_theater_status(self, index: int, status: TheaterStatus) -> None:
        updated = self.items[index].model_copy(update={"status": status})
        await self._mutate(self.repository.update(updated))
        self.items[index] = updated
        logger.info(f"Theater '{updated.name}' is now {status.value}")
        self.notify()
