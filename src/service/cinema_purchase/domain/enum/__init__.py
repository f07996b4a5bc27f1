"""Cinema Purchase Domain Enums"""

from src.service.cinema_purchase.domain.enum.purchase_status import PurchaseStatus
from src.service.cinema_purchase.domain.enum.rejection_reason import RejectionReason
from src.service.cinema_purchase.domain.enum.ticket_type import TicketType

__all__ = ['PurchaseStatus', 'RejectionReason', 'TicketType']
