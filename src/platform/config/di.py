"""
https://python-dependency-injector.ets-labs.org/index.html
"""

from dependency_injector import containers, providers

from src.platform.config.core_setting import Settings
from src.platform.observability.tracing import TracingConfig
from src.service.cinema_purchase.app.command.purchase_tickets_use_case import (
    PurchaseTicketsUseCase,
)
from src.service.cinema_purchase.domain.value_object.purchase_policy import PurchasePolicy
from src.service.cinema_purchase.driven_adapter.payment.ticket_payment_service_impl import (
    TicketPaymentServiceImpl,
)
from src.service.cinema_purchase.driven_adapter.reservation.seat_reservation_service_impl import (
    SeatReservationServiceImpl,
)


class Container(containers.DeclarativeContainer):
    # Configuration
    config_service = providers.Singleton(Settings)

    # Price table and purchase cap, read-only after startup
    purchase_policy = providers.Singleton(PurchasePolicy.from_settings, settings=config_service)

    # Observability
    tracing = providers.Singleton(
        TracingConfig, service_name=config_service.provided.PROJECT_NAME
    )

    # External collaborators
    ticket_payment_service = providers.Singleton(TicketPaymentServiceImpl)
    seat_reservation_service = providers.Singleton(SeatReservationServiceImpl)

    # Use cases (stateless per call)
    purchase_tickets_use_case = providers.Factory(
        PurchaseTicketsUseCase,
        payment_service=ticket_payment_service,
        seat_reservation_service=seat_reservation_service,
        policy=purchase_policy,
        tracer=tracing.provided.get_tracer.call(name='cinema_purchase'),
    )
