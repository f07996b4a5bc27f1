from enum import StrEnum


class PurchaseStatus(StrEnum):
    """Terminal states of a single purchase attempt"""

    COMPLETED = 'completed'
    REJECTED_BAD_ACCOUNT = 'rejected_bad_account'
    REJECTED_INVALID_REQUEST = 'rejected_invalid_request'
    REJECTED_PAYMENT_FAILED = 'rejected_payment_failed'
    REJECTED_COLLABORATOR_ERROR = 'rejected_collaborator_error'
