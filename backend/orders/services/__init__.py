"""
Orders services package - service layer for the order lifecycle.

- OrderService: Repository operations (create, find, lock, delete, reset)
- OrderCalculationService: Totals derived from line items, integrity audits
- OrderItemService: Cart validation and line item appends
- KitchenService: Status transitions, kitchen queue and tickets
- OrderPlacementService: Place-or-merge for a table's cart
"""

# Core order operations
from .order_service import OrderService

# Calculation operations
from .calculation_service import OrderCalculationService

# Item management
from .item_service import OrderItemService

# Kitchen operations
from .kitchen_service import KitchenService

# Customer-facing placement
from .placement_service import OrderPlacementService, PlacementResult

__all__ = [
    'OrderService',
    'OrderCalculationService',
    'OrderItemService',
    'KitchenService',
    'OrderPlacementService',
    'PlacementResult',
]
