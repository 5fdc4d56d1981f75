from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class MockTicketPaymentServiceImpl(ITicketPaymentService):
    """Stand-in for the payment provider - records the instruction in the log only"""

    @Logger.io
    def make_payment(self, account_id: int, amount: int) -> None:
        Logger.base.info(f'[MOCK-PAYMENT] account={account_id} amount={amount}')
