"""
Purchase rejection errors

Every rule enforced by PurchaseRequestValidator has its own error type. All of them
share InvalidPurchaseError so callers can catch one type and branch on error_code.
"""

from src.platform.exception.exceptions import DomainError
from src.service.ticket_purchase.domain.enum.purchase_error_code import PurchaseErrorCode


class InvalidPurchaseError(DomainError):
    def __init__(self, error_code: PurchaseErrorCode, message: str) -> None:
        super().__init__(message, 400)
        self.error_code = error_code


class InvalidAccountError(InvalidPurchaseError):
    def __init__(self, account_id: int) -> None:
        super().__init__(PurchaseErrorCode.INVALID_ACCOUNT, f'Invalid account id: {account_id}')
        self.account_id = account_id


class InvalidTicketCountError(InvalidPurchaseError):
    def __init__(self, total_tickets: int) -> None:
        super().__init__(
            PurchaseErrorCode.INVALID_TICKET_COUNT,
            f'Invalid number of tickets requested: {total_tickets}',
        )
        self.total_tickets = total_tickets


class NoAdultTicketsError(InvalidPurchaseError):
    def __init__(self) -> None:
        super().__init__(
            PurchaseErrorCode.NO_ADULT_TICKETS,
            'Cannot purchase child or infant tickets without purchasing an adult ticket',
        )


class InsufficientAdultsForInfantsError(InvalidPurchaseError):
    def __init__(self, adult_tickets: int, infant_tickets: int) -> None:
        super().__init__(
            PurchaseErrorCode.INSUFFICIENT_ADULTS_FOR_INFANTS,
            'Cannot purchase more infant tickets than adult tickets',
        )
        self.adult_tickets = adult_tickets
        self.infant_tickets = infant_tickets
