from enum import StrEnum


class TicketType(StrEnum):
    ADULT = 'ADULT'
    CHILD = 'CHILD'
    INFANT = 'INFANT'
