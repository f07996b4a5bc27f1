from src.platform.exception.exceptions import DomainError
from src.service.cinema_purchase.domain.enum.rejection_reason import RejectionReason


class InvalidTicketTypeRequestError(DomainError):
    """Raised when a ticket type request is built with a bad type or quantity"""

    def __init__(self, message: str) -> None:
        super().__init__(message, 400)


class InvalidPurchaseError(DomainError):
    """Raised by PurchaseValidator.ensure_valid when the requests break a purchase rule"""

    def __init__(self, message: str, *, reason: RejectionReason) -> None:
        super().__init__(message, 400)
        self.reason = reason


class PolicyConfigurationError(DomainError):
    def __init__(self, message: str) -> None:
        super().__init__(message, 500)
