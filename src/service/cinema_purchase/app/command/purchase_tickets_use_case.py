from collections.abc import Iterable, Sequence
from typing import Any

from opentelemetry import trace

from src.platform.logging.loguru_io import Logger
from src.platform.metrics.purchase_metrics import metrics
from src.service.cinema_purchase.app.dto.purchase_outcome import PurchaseOutcome
from src.service.cinema_purchase.app.interface.i_seat_reservation_service import (
    ISeatReservationService,
)
from src.service.cinema_purchase.app.interface.i_ticket_payment_service import (
    ITicketPaymentService,
)
from src.service.cinema_purchase.domain.enum.purchase_status import PurchaseStatus
from src.service.cinema_purchase.domain.enum.ticket_type import TicketType
from src.service.cinema_purchase.domain.purchase_validator import PurchaseValidator, quantity_of
from src.service.cinema_purchase.domain.ticket_calculator import PriceCalculator, SeatCalculator
from src.service.cinema_purchase.domain.value_object.purchase_policy import PurchasePolicy
from src.service.cinema_purchase.domain.value_object.ticket_type_request import TicketTypeRequest


class PurchaseTicketsUseCase:
    """
    Purchase tickets use case - validate, price, pay, then reserve

    Flow:
    1. Reject non-positive account ids
    2. Validate ticket composition and purchase cap (PurchaseValidator)
    3. Price the order (PriceCalculator)
    4. Charge the account (payment_service)
    5. Reserve seats, infants excluded (SeatCalculator + seat_reservation_service)

    Every rejection returns 0 seats. Collaborator exceptions are logged and
    absorbed; only TicketTypeRequest construction errors reach the caller,
    and they are raised before this use case runs.

    Dependencies:
    - payment_service: External payment gateway
    - seat_reservation_service: External seat reservation backend
    - policy: Price table and purchase cap
    """

    def __init__(
        self,
        *,
        payment_service: ITicketPaymentService,
        seat_reservation_service: ISeatReservationService,
        policy: PurchasePolicy | None = None,
        tracer: trace.Tracer | None = None,
    ) -> None:
        self.payment_service = payment_service
        self.seat_reservation_service = seat_reservation_service
        self.policy = policy or PurchasePolicy()
        self.validator = PurchaseValidator(
            max_tickets_per_purchase=self.policy.max_tickets_per_purchase
        )
        self.price_calculator = PriceCalculator(price_table=self.policy.price_table)
        self.seat_calculator = SeatCalculator()
        self.tracer = tracer or trace.get_tracer(__name__)

    def purchase_tickets(self, account_id: int, *ticket_type_requests: Any) -> int:
        """
        Purchase tickets and return the number of seats reserved.

        Accepts the requests either as varargs or as a single iterable.

        Returns:
            Seats reserved, 0 on any rejection
        """
        return self.execute(
            account_id=account_id, requests=_flatten_requests(ticket_type_requests)
        ).seats_reserved

    @Logger.io
    def execute(self, *, account_id: int, requests: Sequence[Any]) -> PurchaseOutcome:
        requests = tuple(requests)
        with self.tracer.start_as_current_span(
            'use_case.purchase_tickets',
            attributes={
                'purchase.account_id': str(account_id),
                'purchase.request_count': len(requests),
            },
        ) as span:
            outcome = self._purchase(account_id=account_id, requests=requests)

            span.set_attribute('purchase.status', outcome.status.value)
            span.set_attribute('purchase.seats_reserved', outcome.seats_reserved)
            metrics.record_purchase(status=outcome.status.value)
            if outcome.is_completed:
                metrics.record_completed_purchase(
                    total_amount=outcome.total_amount,
                    tickets_by_type={
                        ticket_type.value: quantity_of(requests, ticket_type)
                        for ticket_type in TicketType
                    },
                )
            return outcome

    def _purchase(self, *, account_id: int, requests: tuple[Any, ...]) -> PurchaseOutcome:
        # Step 1: Account check
        if isinstance(account_id, bool) or not isinstance(account_id, int) or account_id <= 0:
            Logger.base.warning(f'[PURCHASE] Rejected: invalid account id {account_id!r}')
            return PurchaseOutcome(
                status=PurchaseStatus.REJECTED_BAD_ACCOUNT,
                message='Please provide a valid Account ID',
            )

        # Step 2: Business rules
        validation = self.validator.validate(requests)
        if not validation:
            Logger.base.warning(
                f'[PURCHASE] Rejected for account {account_id}: '
                f'{validation.reason} - {validation.message}'
            )
            return PurchaseOutcome(
                status=PurchaseStatus.REJECTED_INVALID_REQUEST,
                rejection_reason=validation.reason,
                message=validation.message,
            )

        # Step 3: Price
        total_amount = self.price_calculator.calculate_total(requests)

        # Step 4: Pay - must succeed before any seat is reserved
        try:
            payment_result = self.payment_service.make_payment(account_id, total_amount)
        except Exception as e:
            Logger.base.exception(
                f'[PURCHASE] Payment error for account {account_id}: {type(e).__name__}: {e}'
            )
            return PurchaseOutcome(
                status=PurchaseStatus.REJECTED_COLLABORATOR_ERROR,
                total_amount=total_amount,
                message=f'Payment service error: {e}',
            )

        if not payment_result:
            Logger.base.warning(
                f'[PURCHASE] Payment of {total_amount} declined for account {account_id}'
            )
            return PurchaseOutcome(
                status=PurchaseStatus.REJECTED_PAYMENT_FAILED,
                total_amount=total_amount,
                message='Payment failed. Ticket purchase unsuccessful.',
            )

        # Step 5: Reserve
        seats_to_reserve = self.seat_calculator.calculate_seats(requests)
        try:
            self.seat_reservation_service.reserve_seats(account_id, seats_to_reserve)
        except Exception as e:
            # Payment already taken at this point, flag it for reconciliation
            Logger.base.exception(
                f'[PURCHASE] Seat reservation error for account {account_id} after payment '
                f'of {total_amount}: {type(e).__name__}: {e}'
            )
            return PurchaseOutcome(
                status=PurchaseStatus.REJECTED_COLLABORATOR_ERROR,
                total_amount=total_amount,
                message=f'Seat reservation service error: {e}',
            )

        Logger.base.info(
            f'[PURCHASE] Completed for account {account_id}: '
            f'{seats_to_reserve} seats, amount {total_amount}'
        )
        return PurchaseOutcome(
            status=PurchaseStatus.COMPLETED,
            seats_reserved=seats_to_reserve,
            total_amount=total_amount,
            message='Ticket purchase successful!',
        )


def _flatten_requests(ticket_type_requests: tuple[Any, ...]) -> tuple[Any, ...]:
    # A single argument may be any iterable of requests (list, tuple, generator)
    if len(ticket_type_requests) == 1:
        only = ticket_type_requests[0]
        if isinstance(only, Iterable) and not isinstance(only, TicketTypeRequest | str | bytes):
            return tuple(only)
    return ticket_type_requests
