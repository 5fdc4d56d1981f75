from typing import Iterable, Optional

import attrs

from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory
from src.service.ticket_purchase.domain.value_object.ticket_line_item import TicketLineItem


def _to_line_items(value: Iterable[TicketLineItem]) -> tuple[TicketLineItem, ...]:
    return tuple(value)


@attrs.frozen
class PurchaseRequest:
    """
    A single purchase attempt for one account.

    Nothing is checked on construction - an invalid request (bad account id, too many
    tickets, negative counts) is still representable and is rejected by
    PurchaseRequestValidator instead. Aggregates are recomputed on every call.
    """

    account_id: int
    line_items: tuple[TicketLineItem, ...] = attrs.field(converter=_to_line_items, factory=tuple)

    @classmethod
    def of(cls, account_id: int, *line_items: TicketLineItem) -> 'PurchaseRequest':
        return cls(account_id=account_id, line_items=line_items)

    def total_tickets(self) -> int:
        return self.total_tickets_of(None)

    def total_tickets_of(self, category: Optional[TicketCategory]) -> int:
        """Tickets requested for ``category``, or across every category when None"""
        return sum(
            item.count for item in self.line_items if category is None or item.category == category
        )

    def total_price(self) -> int:
        return sum(item.price for item in self.line_items)

    def total_seats(self) -> int:
        return sum(item.seats for item in self.line_items)
