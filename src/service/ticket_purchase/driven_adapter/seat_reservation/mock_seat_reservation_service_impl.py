from src.platform.logging.loguru_io import Logger
from src.service.ticket_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class MockSeatReservationServiceImpl(ISeatReservationService):
    """Stand-in for the seat booking provider - records the instruction in the log only"""

    @Logger.io
    def reserve_seats(self, account_id: int, seat_count: int) -> None:
        Logger.base.info(f'[MOCK-SEAT-RESERVATION] account={account_id} seats={seat_count}')
