"""Read-side access to shopping carts."""

from protean.utils.globals import current_domain

from ordering.cart.cart import Cart, CartItem


def list_cart_items(user_id: str) -> list[CartItem]:
    cart = current_domain.repository_for(Cart).for_user(user_id)
    return cart.lines if cart is not None else []
