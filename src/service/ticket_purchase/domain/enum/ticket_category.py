"""
Ticket Category Enum - Domain Value Object

Each category carries a fixed unit price and the number of seats one ticket occupies.

|   Category   |   Price   |   Seats   |
| ------------ | --------- | --------- |
|   ADULT      |    20     |     1     |
|   CHILD      |    10     |     1     |
|   INFANT     |     0     |     0     |

Infants sit on an adult's lap, so they neither pay nor take a seat.
"""

from enum import StrEnum
from typing import Final

import attrs


@attrs.frozen
class CategoryTariff:
    price: int
    seats: int


class TicketCategory(StrEnum):
    ADULT = 'adult'
    CHILD = 'child'
    INFANT = 'infant'

    @property
    def price(self) -> int:
        return CATEGORY_TARIFFS[self].price

    @property
    def seats(self) -> int:
        return CATEGORY_TARIFFS[self].seats


CATEGORY_TARIFFS: Final[dict[TicketCategory, CategoryTariff]] = {
    TicketCategory.ADULT: CategoryTariff(price=20, seats=1),
    TicketCategory.CHILD: CategoryTariff(price=10, seats=1),
    TicketCategory.INFANT: CategoryTariff(price=0, seats=0),
}
