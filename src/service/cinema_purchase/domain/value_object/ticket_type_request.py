from typing import Any

import attrs

from src.service.cinema_purchase.domain.enum.ticket_type import TicketType
from src.service.cinema_purchase.domain.exception.purchase_exceptions import (
    InvalidTicketTypeRequestError,
)


def _to_ticket_type(value: Any) -> TicketType:
    if isinstance(value, TicketType):
        return value
    allowed = ', '.join(ticket_type.value for ticket_type in TicketType)
    message = f'ticket_type must be one of {allowed}, got {value!r}'
    if not isinstance(value, str):
        raise InvalidTicketTypeRequestError(message)
    try:
        return TicketType(value)
    except ValueError:
        raise InvalidTicketTypeRequestError(message) from None


@attrs.frozen
class TicketTypeRequest:
    """N tickets of one ticket type, validated at construction"""

    ticket_type: TicketType = attrs.field(converter=_to_ticket_type)
    quantity: int = attrs.field()

    @quantity.validator
    def _check_quantity(self, attribute: 'attrs.Attribute[int]', value: Any) -> None:
        # bool is an int subclass, True is not a ticket count
        if isinstance(value, bool) or not isinstance(value, int):
            raise InvalidTicketTypeRequestError(f'quantity must be an integer, got {value!r}')
        if value < 0:
            raise InvalidTicketTypeRequestError(f'quantity cannot be negative, got {value}')

    def get_ticket_type(self) -> TicketType:
        return self.ticket_type

    def get_no_of_tickets(self) -> int:
        return self.quantity
