"""Price and discount management service."""

import logging

from moviegem.repositories import InMemoryRepository, Repository
from moviegem.schemas.showtime import PriceDiscount, ShowtimePrice

logger = logging.getLogger(__name__)


class PriceService:
    """Ticket prices and discounts, stored in two repositories."""

    def __init__(
        self,
        prices: Repository[ShowtimePrice] | None = None,
        discounts: Repository[PriceDiscount] | None = None,
    ) -> None:
        self.prices = prices if prices is not None else InMemoryRepository()
        self.discounts = discounts if discounts is not None else InMemoryRepository()

    async def fetch_prices(self) -> list[ShowtimePrice]:
        return await self.prices.fetch_all()

    async def fetch_discounts(self) -> list[PriceDiscount]:
        return await self.discounts.fetch_all()

    async def add_price(self, price: ShowtimePrice) -> ShowtimePrice:
        logger.info(f"Adding price {price.id} (base {price.base_price})")
        return await self.prices.add(price)

    async def update_price(self, price: ShowtimePrice) -> ShowtimePrice:
        return await self.prices.update(price)

    async def delete_price(self, price: ShowtimePrice) -> None:
        await self.prices.remove(price.id)

    async def add_discount(self, discount: PriceDiscount) -> PriceDiscount:
        logger.info(f"Adding discount '{discount.name}'")
        return await self.discounts.add(discount)

    async def update_discount(self, discount: PriceDiscount) -> PriceDiscount:
        return await self.discounts.update(discount)

    async def delete_discount(self, discount: PriceDiscount) -> None:
        await self.discounts.remove(discount.id)
