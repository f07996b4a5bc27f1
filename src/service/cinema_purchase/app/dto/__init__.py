"""Application layer DTOs"""

from src.service.cinema_purchase.app.dto.purchase_outcome import PurchaseOutcome

__all__ = ['PurchaseOutcome']
