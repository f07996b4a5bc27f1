"""Purchase outcome DTO."""

import attrs

from src.service.cinema_purchase.domain.enum.purchase_status import PurchaseStatus
from src.service.cinema_purchase.domain.enum.rejection_reason import RejectionReason


@attrs.define(frozen=True)
class PurchaseOutcome:
    """
    Terminal state of one purchase attempt.

    seats_reserved is 0 for every rejected status. total_amount is what was
    charged, or what would have been charged when payment did not go through.
    """

    status: PurchaseStatus
    seats_reserved: int = 0
    total_amount: int = 0
    rejection_reason: RejectionReason | None = None
    message: str = ''

    @property
    def is_completed(self) -> bool:
        return self.status == PurchaseStatus.COMPLETED
