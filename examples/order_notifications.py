"""Order notifications with wildcard listeners.

Run with trace output:
    EVENT_HUB_LOG_ENABLED=true python examples/order_notifications.py
"""

from enum import Enum

from event_hub import get_default_bus


class OrderEvent(str, Enum):
    CREATED = "order.created"
    PAID = "order.paid"
    SHIPPED = "order.shipped"


def audit(order_id: str) -> str:
    return f"audit {order_id}"


def send_receipt(order_id: str) -> str:
    return f"receipt for {order_id}"


def main() -> None:
    bus = get_default_bus()
    bus.on("order.*", audit)
    bus.once(OrderEvent.PAID, send_receipt)

    for event in OrderEvent:
        outcome = bus.emit(event, "A-1001")
        results = outcome.results if outcome else []
        print(f"{event.value}: {results}")

    # The receipt listener is gone, only the audit remains.
    print(bus.emit(OrderEvent.PAID, "A-1002").results)  # type: ignore[union-attr]
    bus.log_event_map(forced=True)


if __name__ == "__main__":
    main()
