from collections.abc import Mapping
from types import MappingProxyType
from typing import Any, Self

import attrs

from src.platform.config.core_setting import Settings
from src.service.cinema_purchase.domain.enum.ticket_type import TicketType
from src.service.cinema_purchase.domain.exception.purchase_exceptions import (
    PolicyConfigurationError,
)


DEFAULT_MAX_TICKETS_PER_PURCHASE = 20


def _freeze_prices(prices: Mapping[Any, int]) -> Mapping[TicketType, int]:
    frozen: dict[TicketType, int] = {}
    for ticket_type, price in prices.items():
        try:
            known = TicketType(ticket_type)
        except ValueError:
            raise PolicyConfigurationError(
                f'Unknown ticket type in price table: {ticket_type!r}'
            ) from None
        frozen[known] = price
    return MappingProxyType(frozen)


@attrs.frozen
class PriceTable:
    """Unit price per ticket type, read-only once built"""

    unit_prices: Mapping[TicketType, int] = attrs.field(converter=_freeze_prices, hash=False)

    def __attrs_post_init__(self) -> None:
        missing = [
            ticket_type.value for ticket_type in TicketType if ticket_type not in self.unit_prices
        ]
        if missing:
            raise PolicyConfigurationError(f'No price configured for: {", ".join(missing)}')
        for ticket_type, price in self.unit_prices.items():
            if isinstance(price, bool) or not isinstance(price, int) or price < 0:
                raise PolicyConfigurationError(
                    f'Price for {ticket_type.value} must be a non-negative integer, got {price!r}'
                )

    @classmethod
    def reference(cls) -> Self:
        return cls(
            unit_prices={TicketType.INFANT: 0, TicketType.CHILD: 10, TicketType.ADULT: 20}
        )

    def price_of(self, ticket_type: TicketType) -> int:
        return self.unit_prices[ticket_type]


@attrs.frozen
class PurchasePolicy:
    price_table: PriceTable = attrs.field(factory=PriceTable.reference)
    max_tickets_per_purchase: int = attrs.field(default=DEFAULT_MAX_TICKETS_PER_PURCHASE)

    @max_tickets_per_purchase.validator
    def _check_max_tickets(self, attribute: 'attrs.Attribute[int]', value: int) -> None:
        if isinstance(value, bool) or not isinstance(value, int) or value < 1:
            raise PolicyConfigurationError(
                f'max_tickets_per_purchase must be a positive integer, got {value!r}'
            )

    @classmethod
    def from_settings(cls, settings: Settings) -> Self:
        return cls(
            price_table=PriceTable(
                unit_prices={
                    TicketType.ADULT: settings.ADULT_TICKET_PRICE,
                    TicketType.CHILD: settings.CHILD_TICKET_PRICE,
                    TicketType.INFANT: settings.INFANT_TICKET_PRICE,
                }
            ),
            max_tickets_per_purchase=settings.MAX_TICKETS_PER_PURCHASE,
        )
