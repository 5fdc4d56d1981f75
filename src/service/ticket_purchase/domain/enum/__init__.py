"""Ticket Purchase Domain Enums"""

from src.service.ticket_purchase.domain.enum.purchase_error_code import PurchaseErrorCode
from src.service.ticket_purchase.domain.enum.ticket_category import (
    CATEGORY_TARIFFS,
    CategoryTariff,
    TicketCategory,
)

__all__ = ['CATEGORY_TARIFFS', 'CategoryTariff', 'PurchaseErrorCode', 'TicketCategory']
