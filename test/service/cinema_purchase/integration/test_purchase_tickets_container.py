"""
Integration tests for the purchase flow wired through the DI container

Uses the in-process payment and reservation adapters; collaborators are only
overridden where a test needs to observe or break them.
"""

from collections.abc import Generator
from unittest.mock import Mock

from dependency_injector import providers
import pytest

from src.platform.config.core_setting import Settings
from src.platform.config.di import Container
from src.service.cinema_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.cinema_purchase.domain.enum.purchase_status import PurchaseStatus
from src.service.cinema_purchase.domain.enum.ticket_type import TicketType
from src.service.cinema_purchase.domain.exception.purchase_exceptions import (
    InvalidTicketTypeRequestError,
)
from src.service.cinema_purchase.domain.value_object.purchase_policy import PurchasePolicy
from src.service.cinema_purchase.domain.value_object.ticket_type_request import TicketTypeRequest


@pytest.fixture
def container() -> Generator[Container, None, None]:
    container = Container()
    container.config_service.override(providers.Singleton(Settings))
    yield container
    container.reset_override()


@pytest.mark.integration
class TestContainerWiring:
    def test_use_case_is_built_with_settings_policy(self, container: Container) -> None:
        use_case = container.purchase_tickets_use_case()

        assert isinstance(use_case, PurchaseTicketsUseCase)
        assert use_case.policy == PurchasePolicy.from_settings(container.config_service())

    def test_use_case_factory_shares_singleton_collaborators(self, container: Container) -> None:
        first = container.purchase_tickets_use_case()
        second = container.purchase_tickets_use_case()

        assert first is not second
        assert first.payment_service is second.payment_service
        assert first.policy is second.policy

    def test_settings_drive_policy(self, container: Container) -> None:
        container.config_service.override(
            providers.Singleton(Settings, MAX_TICKETS_PER_PURCHASE=2, ADULT_TICKET_PRICE=50)
        )
        container.purchase_policy.reset()
        payment_service = Mock()
        payment_service.make_payment.return_value = True
        container.ticket_payment_service.override(providers.Object(payment_service))

        use_case = container.purchase_tickets_use_case()

        assert use_case.purchase_tickets(9, TicketTypeRequest(TicketType.ADULT, 3)) == 0
        assert use_case.purchase_tickets(9, TicketTypeRequest(TicketType.ADULT, 2)) == 2
        payment_service.make_payment.assert_called_once_with(9, 100)


@pytest.mark.integration
class TestPurchaseWithInProcessCollaborators:
    def test_family_purchase(self, container: Container) -> None:
        use_case = container.purchase_tickets_use_case()

        outcome = use_case.execute(
            account_id=42,
            requests=[
                TicketTypeRequest('ADULT', 2),
                TicketTypeRequest('CHILD', 2),
                TicketTypeRequest('INFANT', 1),
            ],
        )

        assert outcome.status == PurchaseStatus.COMPLETED
        assert outcome.seats_reserved == 4
        assert outcome.total_amount == 60

    def test_reservation_failure_returns_zero(self, container: Container) -> None:
        reservation_service = Mock()
        reservation_service.reserve_seats.side_effect = RuntimeError('backend down')
        container.seat_reservation_service.override(providers.Object(reservation_service))

        seats = container.purchase_tickets_use_case().purchase_tickets(
            42, [TicketTypeRequest(TicketType.ADULT, 1)]
        )

        assert seats == 0

    def test_construction_error_raised_before_purchase(self, container: Container) -> None:
        payment_service = Mock()
        container.ticket_payment_service.override(providers.Object(payment_service))
        use_case = container.purchase_tickets_use_case()

        with pytest.raises(InvalidTicketTypeRequestError):
            use_case.purchase_tickets(42, TicketTypeRequest(TicketType.ADULT, 1.5))

        payment_service.make_payment.assert_not_called()
