from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.dto.purchase_summary import PurchaseSummary
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.ticket_purchase.domain.entity.purchase_request_entity import PurchaseRequest
from src.service.ticket_purchase.domain.purchase_request_validator import (
    PurchaseRequestValidator,
)


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case

    Flow:
    1. Validate the request (Fail Fast - nothing is charged or reserved on rejection)
    2. Take payment for the total price
    3. Reserve the seats that need one (infants excluded)

    Payment always happens before reservation. Both collaborators are assumed to
    succeed, so there is no compensation step.

    Dependencies:
    - validator: Business rules for a purchase request
    - payment_service: External payment provider
    - seat_reservation_service: External seat booking provider
    """

    def __init__(
        self,
        *,
        validator: PurchaseRequestValidator,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
    ) -> None:
        self.validator = validator
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service

    @Logger.io
    def purchase_tickets(self, request: PurchaseRequest) -> PurchaseSummary:
        """
        Args:
            request: The purchase attempt to process

        Returns:
            Totals that were sent to the payment and seat reservation services

        Raises:
            InvalidPurchaseError: Propagated unchanged from the validator
        """
        self.validator.validate(request)

        summary = PurchaseSummary.from_request(request)

        self.payment_service.make_payment(summary.account_id, summary.total_price)
        Logger.base.info(
            f'💳 [PURCHASE] Charged {summary.total_price} to account {summary.account_id}'
        )

        self.seat_reservation_service.reserve_seats(summary.account_id, summary.total_seats)
        Logger.base.info(
            f'💺 [PURCHASE] Reserved {summary.total_seats} seats '
            f'for account {summary.account_id} ({summary.total_tickets} tickets)'
        )

        return summary
