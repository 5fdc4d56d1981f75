from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.domain.entity.purchase_request_entity import PurchaseRequest
from src.service.ticket_purchase.domain.enum.ticket_category import TicketCategory
from src.service.ticket_purchase.domain.purchase_error import (
    InsufficientAdultsForInfantsError,
    InvalidAccountError,
    InvalidTicketCountError,
    NoAdultTicketsError,
)


DEFAULT_MAX_TICKETS_PER_PURCHASE = 20


class PurchaseRequestValidator:
    """
    Business rules a purchase request must satisfy before payment.

    Rules run in a fixed order and the first failure is raised:
    1. account id must be positive
    2. between 1 and max_tickets tickets in total
    3. at least one adult ticket
    4. no more infants than adults (each infant sits on an adult's lap)
    """

    def __init__(self, *, max_tickets: int = DEFAULT_MAX_TICKETS_PER_PURCHASE) -> None:
        self.max_tickets = max_tickets

    @Logger.io
    def validate(self, request: PurchaseRequest) -> None:
        """
        Raises:
            InvalidAccountError: account_id is zero or negative
            InvalidTicketCountError: no tickets, or more than max_tickets
            NoAdultTicketsError: only child and/or infant tickets requested
            InsufficientAdultsForInfantsError: more infant than adult tickets
        """
        if request.account_id <= 0:
            raise InvalidAccountError(request.account_id)

        total_tickets = request.total_tickets()
        if total_tickets < 1 or total_tickets > self.max_tickets:
            raise InvalidTicketCountError(total_tickets)

        adult_tickets = request.total_tickets_of(TicketCategory.ADULT)
        if adult_tickets < 1:
            raise NoAdultTicketsError()

        infant_tickets = request.total_tickets_of(TicketCategory.INFANT)
        if adult_tickets < infant_tickets:
            raise InsufficientAdultsForInfantsError(adult_tickets, infant_tickets)
