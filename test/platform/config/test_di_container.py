from unittest.mock import Mock

from pydantic import ValidationError
import pytest

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain.entity.purchase_request_entity import PurchaseRequest
from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory
from src.service.ticket_purchase.domain.purchase_error import InvalidTicketCountError
from src.service.ticket_purchase.domain.value_object.ticket_line_item import TicketLineItem
from src.service.ticket_purchase.driven_adapter.payment.mock_ticket_payment_service_impl import (
    MockTicketPaymentServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.seat_reservation.mock_seat_reservation_service_impl import (
    MockSeatReservationServiceImpl,
)


@pytest.fixture
def container() -> Container:
    return Container()


@pytest.mark.unit
class TestSettings:
    def test_defaults(self) -> None:
        assert Settings().MAX_TICKETS_PER_PURCHASE == 20

    def test_reads_environment(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv('MAX_TICKETS_PER_PURCHASE', '6')

        assert Settings().MAX_TICKETS_PER_PURCHASE == 6

    def test_rejects_non_positive_limit(self) -> None:
        with pytest.raises(ValidationError):
            Settings(MAX_TICKETS_PER_PURCHASE=0)


@pytest.mark.unit
class TestContainer:
    def test_wires_default_adapters(self, container: Container) -> None:
        use_case = container.purchase_tickets_use_case()

        assert isinstance(use_case, PurchaseTicketsUseCase)
        assert isinstance(use_case.payment_service, MockTicketPaymentServiceImpl)
        assert isinstance(use_case.seat_reservation_service, MockSeatReservationServiceImpl)
        assert use_case.validator.max_tickets == 20

    def test_default_adapters_accept_instructions(self, container: Container) -> None:
        summary = container.purchase_tickets_use_case().purchase_tickets(
            PurchaseRequest.of(1, TicketLineItem(TicketCategory.ADULT, 2))
        )

        assert summary.total_price == 40

    def test_payment_service_can_be_overridden(self, container: Container) -> None:
        payment_service = Mock(spec=ITicketPaymentService)

        with container.ticket_payment_service.override(payment_service):
            container.purchase_tickets_use_case().purchase_tickets(
                PurchaseRequest.of(
                    8,
                    TicketLineItem(TicketCategory.CHILD, 1),
                    TicketLineItem(TicketCategory.ADULT, 1),
                )
            )

        payment_service.make_payment.assert_called_once_with(8, 30)

    def test_ticket_limit_comes_from_settings(self, container: Container) -> None:
        container.config_service.override(Settings(MAX_TICKETS_PER_PURCHASE=2))

        use_case = container.purchase_tickets_use_case()

        with pytest.raises(InvalidTicketCountError):
            use_case.purchase_tickets(
                PurchaseRequest.of(1, TicketLineItem(TicketCategory.ADULT, 3))
            )
