from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    """
    Port (interface) for the external payment provider.

    Payment is treated as always succeeding; nothing is returned to the caller.
    """

    @abstractmethod
    def make_payment(self, account_id: int, amount: int) -> None:
        """
        Charge ``amount`` to ``account_id``.

        Args:
            account_id: Paying account (already validated as positive)
            amount: Total price of the purchase
        """
        pass
