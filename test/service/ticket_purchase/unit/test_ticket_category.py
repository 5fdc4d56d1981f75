import pytest

from src.service.ticket_purchase.domain.enum.ticket_category import (
    CATEGORY_TARIFFS,
    TicketCategory,
)
from src.service.ticket_purchase.domain.value_object.ticket_line_item import TicketLineItem


@pytest.mark.unit
class TestTicketCategory:
    @pytest.mark.parametrize(
        ('category', 'price', 'seats'),
        [
            (TicketCategory.ADULT, 20, 1),
            (TicketCategory.CHILD, 10, 1),
            (TicketCategory.INFANT, 0, 0),
        ],
    )
    def test_tariff(self, category: TicketCategory, price: int, seats: int) -> None:
        assert category.price == price
        assert category.seats == seats

    def test_every_category_has_a_tariff(self) -> None:
        assert set(CATEGORY_TARIFFS) == set(TicketCategory)


@pytest.mark.unit
class TestTicketLineItem:
    def test_price_and_seats_scale_with_count(self) -> None:
        item = TicketLineItem(TicketCategory.CHILD, 3)

        assert item.price == 30
        assert item.seats == 3

    def test_infants_are_free_and_seatless(self) -> None:
        item = TicketLineItem(TicketCategory.INFANT, 4)

        assert item.price == 0
        assert item.seats == 0

    def test_zero_count(self) -> None:
        item = TicketLineItem(TicketCategory.ADULT, 0)

        assert item.price == 0
        assert item.seats == 0

    def test_is_immutable(self) -> None:
        item = TicketLineItem(TicketCategory.ADULT, 1)

        with pytest.raises(AttributeError):
            item.count = 2  # type: ignore[misc]
