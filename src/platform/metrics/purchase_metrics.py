from prometheus_client import Counter, Histogram


class PurchaseMetrics:
    """
    Ticket purchase metrics collector

    Tracks purchase outcomes, tickets sold per type and amounts charged
    """

    def __init__(self) -> None:
        self.ticket_purchases = Counter(
            'ticket_purchases_total',
            'Total ticket purchase attempts by terminal status',
            ['status'],
        )

        self.tickets_sold = Counter(
            'tickets_sold_total',
            'Tickets sold on completed purchases',
            ['ticket_type'],
        )

        self.purchase_amount = Histogram(
            'purchase_amount',
            'Amount charged per completed purchase',
            buckets=[0, 10, 20, 50, 100, 200, 400],
        )

    def record_purchase(self, *, status: str) -> None:
        self.ticket_purchases.labels(status=status).inc()

    def record_completed_purchase(
        self, *, total_amount: int, tickets_by_type: dict[str, int]
    ) -> None:
        self.purchase_amount.observe(total_amount)
        for ticket_type, quantity in tickets_by_type.items():
            if quantity:
                self.tickets_sold.labels(ticket_type=ticket_type).inc(quantity)


# Global metrics instance
metrics = PurchaseMetrics()
