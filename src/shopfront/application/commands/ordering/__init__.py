from shopfront.application.commands.ordering.place_order_command import (
    PlaceOrderCommand,
)
from shopfront.application.commands.ordering.update_order_status_command import (
    UpdateOrderStatusCommand,
)

__all__ = [
    "PlaceOrderCommand",
    "UpdateOrderStatusCommand",
]
