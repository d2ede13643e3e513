from __future__ import annotations

from flask import Blueprint, abort, current_app, redirect, render_template, request, url_for

from delicassy.app.extensions import backend
from delicassy.app.common.storage import ClientStore
from delicassy.app.common.validation import parse_flag, parse_quantity
from delicassy.modules.cart import service

bp = Blueprint("cart", __name__)


@bp.get("/cart")
def cart_page():
    cart = service.load_cart(backend.client, ClientStore())
    return render_template("pages/cart.html", cart=cart, summary=None)


@bp.post("/cart/items/<int:index>")
def update_item(index: int):
    """Overwrite one line's quantity and write the whole list back."""
    store = ClientStore()
    cart = service.load_cart(backend.client, store)
    if cart is None or index >= len(cart.items):
        abort(404)

    qty = parse_quantity(request.form.get("quantity"))
    service.update_quantity(backend.client, cart, index, qty)
    return redirect(url_for("cart.cart_page"))


@bp.post("/cart/checkout")
def checkout():
    cart = service.load_cart(backend.client, ClientStore())
    if cart is None:
        return redirect(url_for("cart.cart_page"))

    # Unchecked boxes are absent from the form, so the cart page form always
    # sends an `upgrades` marker. Without it both upgrades stay on.
    if "upgrades" in request.form:
        insured = parse_flag(request.form.get("insured"))
        premium = parse_flag(request.form.get("premium_packaging"))
    else:
        insured = premium = True

    summary = service.checkout(
        backend.client,
        cart.id,
        shipping_address=current_app.config["CHECKOUT_SHIPPING_ADDRESS"],
        payment=current_app.config["CHECKOUT_PAYMENT"],
        insured=insured,
        premium_packaging=premium,
    )
    current_app.logger.info("Order %s placed for cart %s", summary.order_id, cart.id)

    # Summary is shown once and never stored
    return render_template("pages/cart.html", cart=cart, summary=summary)
