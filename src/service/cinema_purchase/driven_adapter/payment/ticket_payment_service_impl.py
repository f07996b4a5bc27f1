"""
In-process ticket payment service.

Stands in for the third-party payment gateway: checks argument types the way
the gateway client does and accepts every well-formed payment.
"""

from src.platform.logging.loguru_io import Logger
from src.service.cinema_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)


class TicketPaymentServiceImpl(ITicketPaymentService):
    @Logger.io
    def make_payment(self, account_id: int, total_amount_to_pay: int) -> bool:
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError('account_id must be an integer')
        if isinstance(total_amount_to_pay, bool) or not isinstance(total_amount_to_pay, int):
            raise TypeError('total_amount_to_pay must be an integer')

        Logger.base.info(f'[PAYMENT] Charged {total_amount_to_pay} to account {account_id}')
        return True
