"""
Rejection Reason Enum - Domain Value Object

Why a ticket purchase request fails the business rules.
"""

from enum import StrEnum


class RejectionReason(StrEnum):
    MALFORMED_REQUEST = 'malformed_request'
    NO_TICKETS = 'no_tickets'
    EXCEEDS_MAXIMUM_TICKETS = 'exceeds_maximum_tickets'
    CHILD_OR_INFANT_WITHOUT_ADULT = 'child_or_infant_without_adult'
