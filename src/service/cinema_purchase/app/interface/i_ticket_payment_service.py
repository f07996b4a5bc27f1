"""
Ticket Payment Service Interface

Port for the external payment gateway. The purchase use case depends on this
interface, not on a concrete gateway client.
"""

from abc import ABC, abstractmethod


class ITicketPaymentService(ABC):
    @abstractmethod
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> bool:
        """
        Charge an account for a purchase.

        Args:
            account_id: Purchasing account
            total_amount_to_pay: Amount in integer currency units

        Returns:
            True when the payment went through. Any falsy result is a decline.

        Raises:
            Exception: On transport or gateway failure
        """
        pass
