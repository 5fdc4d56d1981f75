from enum import Enum


class PurchaseErrorCode(Enum):
    """Reason a purchase request was rejected, one per validation rule"""

    INVALID_ACCOUNT = 'invalid_account'
    INVALID_TICKET_COUNT = 'invalid_ticket_count'
    NO_ADULT_TICKETS = 'no_adult_tickets'
    INSUFFICIENT_ADULTS_FOR_INFANTS = 'insufficient_adults_for_infants'
