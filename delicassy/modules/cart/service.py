"""Cart read-modify-write against the backend.

The backend owns the cart; we only keep its id. Every mutation loads the
cart, edits the item list and PUTs the whole list back (last write wins).
"""

from __future__ import annotations

from typing import Any, Optional

from delicassy.app.api.client import ApiClient
from delicassy.app.common.storage import ClientStore
from delicassy.app.models import Cart, CartItem, OrderSummary


def merge_line_item(items: list[CartItem], product_id: str, quantity: int) -> list[CartItem]:
    """Upsert by product id: bump the existing line or append a new one."""
    merged = [item.model_copy() for item in items]
    for item in merged:
        if item.product_id == str(product_id):
            item.quantity += quantity
            return merged
    merged.append(CartItem(product_id=str(product_id), quantity=quantity))
    return merged


def set_line_quantity(items: list[CartItem], index: int, quantity: int) -> list[CartItem]:
    if index < 0 or index >= len(items):
        raise IndexError(index)
    updated = [item.model_copy() for item in items]
    updated[index].quantity = quantity
    return updated


def fetch_cart(api: ApiClient, cart_id: str) -> Cart:
    return Cart.model_validate(api.get(f"/api/cart/{cart_id}"))


def load_cart(api: ApiClient, store: ClientStore) -> Optional[Cart]:
    """None when this browser never created a cart (no backend call)."""
    cart_id = store.get_cart_id()
    if not cart_id:
        return None
    return fetch_cart(api, cart_id)


def save_cart(api: ApiClient, cart: Cart) -> Cart:
    data = api.put(f"/api/cart/{cart.id}", {"items": cart.items_payload()})
    if data is None:
        return cart
    return Cart.model_validate(data)


def add_to_cart(api: ApiClient, store: ClientStore, product_id: str, quantity: int) -> Cart:
    cart_id = store.get_cart_id()
    if cart_id:
        cart = fetch_cart(api, cart_id)
    else:
        cart = Cart.model_validate(api.post("/api/cart/init", {"items": []}))
        store.set_cart_id(cart.id)

    items = merge_line_item(cart.items, product_id, quantity)
    return save_cart(api, cart.model_copy(update={"items": items}))


def update_quantity(api: ApiClient, cart: Cart, index: int, quantity: int) -> Cart:
    items = set_line_quantity(cart.items, index, quantity)
    return save_cart(api, cart.model_copy(update={"items": items}))


def checkout(
    api: ApiClient,
    cart_id: str,
    shipping_address: dict[str, Any],
    payment: dict[str, Any],
    insured: bool = True,
    premium_packaging: bool = True,
) -> OrderSummary:
    res = api.post(
        "/api/checkout",
        {
            "cart_id": cart_id,
            "shipping_address": shipping_address,
            "payment": payment,
            "insured": insured,
            "premium_packaging": premium_packaging,
        },
    )
    return OrderSummary.model_validate(res)
