"""Cinema Purchase Domain Value Objects"""

from src.service.cinema_purchase.domain.value_object.purchase_policy import (
    PriceTable,
    PurchasePolicy,
)
from src.service.cinema_purchase.domain.value_object.ticket_type_request import TicketTypeRequest

__all__ = ['PriceTable', 'PurchasePolicy', 'TicketTypeRequest']
