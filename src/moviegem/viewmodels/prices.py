"""View-model for the price and discount management screen."""

import asyncio
import logging

from moviegem.repositories import InMemoryRepository
from moviegem.schemas.showtime import PriceDiscount, ShowtimePrice
from moviegem.seed import default_discounts, default_prices
from moviegem.services.price_service import PriceService
from moviegem.viewmodels.base import LoadableViewModel

logger = logging.getLogger(__name__)

PricesAndDiscounts = tuple[list[ShowtimePrice], list[PriceDiscount]]


class PriceManagementViewModel(LoadableViewModel[PricesAndDiscounts]):
    """Prices and discounts, loaded together and edited one at a time."""

    def __init__(self, service: PriceService | None = None) -> None:
        super().__init__()
        self.service = service or PriceService(
            prices=InMemoryRepository(default_prices()),
            discounts=InMemoryRepository(default_discounts()),
        )
        self.prices: list[ShowtimePrice] = []
        self.discounts: list[PriceDiscount] = []

    async def _fetch(self) -> PricesAndDiscounts:
        prices, discounts = await asyncio.gather(
            self.service.fetch_prices(),
            self.service.fetch_discounts(),
        )
        return prices, discounts

    def _apply(self, result: PricesAndDiscounts) -> None:
        prices, discounts = result
        self.prices = list(prices)
        self.discounts = list(discounts)

    async def add_price(self, price: ShowtimePrice) -> None:
        added = await self._mutate(self.service.add_price(price))
        self.prices.append(added)
        self.notify()

    async def update_price(self, price: ShowtimePrice) -> None:
        updated = await self._mutate(self.service.update_price(price))
        self.prices = [updated if p.id == updated.id else p for p in self.prices]
        self.notify()

    async def delete_price(self, index: int) -> None:
        price = self.prices[index]
        await self._mutate(self.service.delete_price(price))
        del self.prices[index]
        self.notify()

    async def add_discount(self, discount: PriceDiscount) -> None:
        added = await self._mutate(self.service.add_discount(discount))
        self.discounts.append(added)
        self.notify()

    async def update_discount(self, discount: PriceDiscount) -> None:
        updated = await self._mutate(self.service.update_discount(discount))
        self.discounts = [updated if d.id == updated.id else d for d in self.discounts]
        self.notify()

    async def delete_discount(self, index: int) -> None:
        discount = self.discounts[index]
        await self._mutate(self.service.delete_discount(discount))
        del self.discounts[index]
        self.notify()

    def calculate_discounted_price(self, price: ShowtimePrice, discount: PriceDiscount) -> float:
        return discount.apply(price.base_price)
