"""Ticket Purchase Domain Value Objects"""

from src.service.ticket_purchase.domain.value_object.ticket_line_item import TicketLineItem

__all__ = ['TicketLineItem']
