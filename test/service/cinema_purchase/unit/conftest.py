"""
Unit test configuration for the cinema purchase service.

Payment and reservation collaborators are replaced with autospec mocks so
call order and arguments can be asserted.
"""

from unittest.mock import Mock, create_autospec

import pytest

from src.service.cinema_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.cinema_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.cinema_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.cinema_purchase.domain.value_object.purchase_policy import PurchasePolicy


@pytest.fixture
def mock_payment_service() -> Mock:
    """Payment gateway that accepts every payment"""
    service = create_autospec(ITicketPaymentService, instance=True)
    service.make_payment.return_value = True
    return service


@pytest.fixture
def mock_seat_reservation_service() -> Mock:
    """Seat reservation backend"""
    service = create_autospec(ISeatReservationService, instance=True)
    service.reserve_seats.return_value = None
    return service


@pytest.fixture
def purchase_policy() -> PurchasePolicy:
    """Reference policy: ADULT=20, CHILD=10, INFANT=0, max 20 tickets"""
    return PurchasePolicy()


@pytest.fixture
def purchase_tickets_use_case(
    mock_payment_service: Mock,
    mock_seat_reservation_service: Mock,
    purchase_policy: PurchasePolicy,
) -> PurchaseTicketsUseCase:
    return PurchaseTicketsUseCase(
        payment_service=mock_payment_service,
        seat_reservation_service=mock_seat_reservation_service,
        policy=purchase_policy,
    )
