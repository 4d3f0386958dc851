"""Read-side access to placed orders."""

from protean.exceptions import ObjectNotFoundError
from protean.utils.globals import current_domain

from ordering.order.order import Order


def get_order(order_id: str) -> Order:
    return current_domain.repository_for(Order).get(order_id)


def get_order_by_code(code: str) -> Order:
    order = current_domain.repository_for(Order).find_by_code(code)
    if order is None:
        raise ObjectNotFoundError(f"Order with code {code} does not exist")
    return order


def list_orders_for_user(user_id: str) -> list[Order]:
    return current_domain.repository_for(Order).list_by_user(user_id)


def list_orders() -> list[Order]:
    return current_domain.repository_for(Order).list_all()
