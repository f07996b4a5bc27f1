"""
Seat Reservation Service Interface

Port for the external seat reservation backend.
"""

from abc import ABC, abstractmethod


class ISeatReservationService(ABC):
    @abstractmethod
    def reserve_seats(self, account_id: int, total_seats_to_allocate: int) -> None:
        """
        Reserve seats for an account that has already paid.

        Args:
            account_id: Purchasing account
            total_seats_to_allocate: Seats to hold, infants excluded

        Raises:
            Exception: On transport or backend failure
        """
        pass
