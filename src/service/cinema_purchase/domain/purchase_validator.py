"""
Purchase Validator
Composition and quantity rules for a ticket purchase, no collaborator calls.

Rules, checked in order:
1. Every item is a TicketTypeRequest
2. At least one ticket is requested
3. Total quantity stays within the purchase cap (infants included)
4. Child and infant tickets need an adult ticket with quantity > 0
"""

from collections.abc import Iterable, Sequence
from typing import Any, cast

import attrs

from src.service.cinema_purchase.domain.enum.rejection_reason import RejectionReason
from src.service.cinema_purchase.domain.enum.ticket_type import TicketType
from src.service.cinema_purchase.domain.exception.purchase_exceptions import (
    InvalidPurchaseError,
)
from src.service.cinema_purchase.domain.value_object.purchase_policy import (
    DEFAULT_MAX_TICKETS_PER_PURCHASE,
)
from src.service.cinema_purchase.domain.value_object.ticket_type_request import TicketTypeRequest


@attrs.frozen
class ValidationResult:
    is_valid: bool
    reason: RejectionReason | None = None
    message: str = ''
    total_quantity: int = 0

    def __bool__(self) -> bool:
        return self.is_valid

    @classmethod
    def reject(
        cls, reason: RejectionReason, message: str, *, total_quantity: int = 0
    ) -> 'ValidationResult':
        return cls(is_valid=False, reason=reason, message=message, total_quantity=total_quantity)


def total_quantity(requests: Iterable[TicketTypeRequest]) -> int:
    return sum(request.quantity for request in requests)


def quantity_of(requests: Iterable[TicketTypeRequest], ticket_type: TicketType) -> int:
    return sum(request.quantity for request in requests if request.ticket_type == ticket_type)


class PurchaseValidator:
    def __init__(self, *, max_tickets_per_purchase: int = DEFAULT_MAX_TICKETS_PER_PURCHASE) -> None:
        self.max_tickets_per_purchase = max_tickets_per_purchase

    def validate(self, requests: Sequence[Any]) -> ValidationResult:
        malformed = [item for item in requests if not isinstance(item, TicketTypeRequest)]
        if malformed:
            return ValidationResult.reject(
                RejectionReason.MALFORMED_REQUEST,
                f'Expected TicketTypeRequest items, got {type(malformed[0]).__name__}',
            )

        total = total_quantity(requests)
        if total == 0:
            return ValidationResult.reject(
                RejectionReason.NO_TICKETS, 'At least one ticket must be purchased'
            )

        if total > self.max_tickets_per_purchase:
            return ValidationResult.reject(
                RejectionReason.EXCEEDS_MAXIMUM_TICKETS,
                f'Maximum {self.max_tickets_per_purchase} tickets per purchase, got {total}',
                total_quantity=total,
            )

        # An ADULT entry with quantity 0 does not count as an accompanying adult
        dependants = quantity_of(requests, TicketType.CHILD) + quantity_of(
            requests, TicketType.INFANT
        )
        if dependants > 0 and quantity_of(requests, TicketType.ADULT) == 0:
            return ValidationResult.reject(
                RejectionReason.CHILD_OR_INFANT_WITHOUT_ADULT,
                'Child and Infant tickets cannot be purchased without an Adult ticket',
                total_quantity=total,
            )

        return ValidationResult(is_valid=True, total_quantity=total)

    def is_valid(self, requests: Sequence[Any]) -> bool:
        return self.validate(requests).is_valid

    def ensure_valid(self, requests: Sequence[Any]) -> None:
        """
        Raising variant of validate()

        Raises:
            InvalidPurchaseError: When any purchase rule is broken
        """
        result = self.validate(requests)
        if not result:
            raise InvalidPurchaseError(result.message, reason=cast(RejectionReason, result.reason))
