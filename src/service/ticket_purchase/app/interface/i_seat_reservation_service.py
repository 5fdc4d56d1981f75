from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    """Port (interface) for the external seat booking provider."""

    @abstractmethod
    def reserve_seats(self, account_id: int, seat_count: int) -> None:
        """Reserve ``seat_count`` seats for ``account_id``. Always succeeds."""
        pass
