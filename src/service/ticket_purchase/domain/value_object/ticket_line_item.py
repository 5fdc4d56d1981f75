import attrs

from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory


@attrs.frozen
class TicketLineItem:
    """A number of tickets of a single category within one purchase request.

    The count is stored as given; range checks belong to the validator.
    """

    category: TicketCategory
    count: int

    @property
    def price(self) -> int:
        return self.count * self.category.price

    @property
    def seats(self) -> int:
        return self.count * self.category.seats
