"""
In-process seat reservation service.

Stands in for the third-party reservation backend: checks argument types and
logs the allocation.
"""

from src.platform.logging.loguru_io import Logger
from src.service.cinema_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)


class SeatReservationServiceImpl(ISeatReservationService):
    @Logger.io
    def reserve_seats(self, account_id: int, total_seats_to_allocate: int) -> None:
        if isinstance(account_id, bool) or not isinstance(account_id, int):
            raise TypeError('account_id must be an integer')
        if isinstance(total_seats_to_allocate, bool) or not isinstance(
            total_seats_to_allocate, int
        ):
            raise TypeError('total_seats_to_allocate must be an integer')

        Logger.base.info(
            f'[RESERVATION] Reserved {total_seats_to_allocate} seats for account {account_id}'
        )
