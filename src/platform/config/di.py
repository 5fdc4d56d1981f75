"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.service.ticket_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.ticket_purchase.domain.purchase_request_validator import (
    PurchaseRequestValidator,
)
from src.service.ticket_purchase.driven_adapter.payment.mock_ticket_payment_service_impl import (
    MockTicketPaymentServiceImpl,
)
from src.service.ticket_purchase.driven_adapter.seat_reservation.mock_seat_reservation_service_impl import (
    MockSeatReservationServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # External collaborators (replace with real provider clients in deployment)
    ticket_payment_service = providers.Singleton(MockTicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(MockSeatReservationServiceImpl)

    # Domain rules
    purchase_request_validator = providers.Singleton(
        PurchaseRequestValidator,
        max_tickets=config_service.provided.MAX_TICKETS_PER_PURCHASE,
    )

    # Use cases
    purchase_tickets_use_case = providers.Factory(
        PurchaseTicketsUseCase,
        validator=purchase_request_validator,
        payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
    )


container = Container()


def setup() -> None:
    container.config_service()


def cleanup() -> None:
    container.reset_singletons()
