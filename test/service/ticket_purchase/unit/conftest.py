"""
Unit test configuration for the ticket purchase service.

Collaborators are replaced by Mock(spec=...) doubles that only record calls.
"""

from unittest.mock import Mock

import pytest

from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain.purchase_request_validator import (
    PurchaseRequestValidator,
)


@pytest.fixture
def validator() -> PurchaseRequestValidator:
    return PurchaseRequestValidator(max_tickets=20)


@pytest.fixture
def mock_payment_service() -> Mock:
    return Mock(spec=ITicketPaymentService)


@pytest.fixture
def mock_seat_reservation_service() -> Mock:
    return Mock(spec=ISeatReservationService)


@pytest.fixture
def purchase_tickets_use_case(
    validator: PurchaseRequestValidator,
    mock_payment_service: Mock,
    mock_seat_reservation_service: Mock,
) -> PurchaseTicketsUseCase:
    return PurchaseTicketsUseCase(
        validator=validator,
        payment_service=mock_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
    )
