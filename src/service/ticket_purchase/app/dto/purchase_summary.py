import attrs

from src.service.ticket_purchase.domain.entity.purchase_request_entity import PurchaseRequest


@attrs.frozen
class PurchaseSummary:
    """What was forwarded to the payment and seat reservation services"""

    account_id: int
    total_tickets: int
    total_price: int
    total_seats: int

    @classmethod
    def from_request(cls, request: PurchaseRequest) -> 'PurchaseSummary':
        return cls(
            account_id=request.account_id,
            total_tickets=request.total_tickets(),
            total_price=request.total_price(),
            total_seats=request.total_seats(),
        )
