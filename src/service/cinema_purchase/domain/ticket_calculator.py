"""Price and seat totals for already-validated ticket requests"""

from collections.abc import Iterable

from src.service.cinema_purchase.domain.enum.ticket_type import TicketType
from src.service.cinema_purchase.domain.value_object.purchase_policy import PriceTable
from src.service.cinema_purchase.domain.value_object.ticket_type_request import TicketTypeRequest


class PriceCalculator:
    def __init__(self, *, price_table: PriceTable) -> None:
        self.price_table = price_table

    def calculate_total(self, requests: Iterable[TicketTypeRequest]) -> int:
        return sum(
            self.price_table.price_of(request.ticket_type) * request.quantity
            for request in requests
        )


class SeatCalculator:
    # Infants sit on an adult's lap
    SEATLESS_TYPES = frozenset({TicketType.INFANT})

    def calculate_seats(self, requests: Iterable[TicketTypeRequest]) -> int:
        return sum(
            request.quantity
            for request in requests
            if request.ticket_type not in self.SEATLESS_TYPES
        )
