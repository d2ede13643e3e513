from __future__ import annotations

from typing import Any, Callable, TypeVar

import requests
from flask import Blueprint, current_app, redirect, render_template, request, url_for
from pydantic import ValidationError

from delicassy.app.extensions import backend
from delicassy.app.common.errors import BackendError
from delicassy.app.common.storage import ClientStore
from delicassy.app.common.validation import parse_quantity
from delicassy.app.models import Category, Product
from delicassy.modules.cart import service as cart_service

bp = Blueprint("catalog", __name__)

T = TypeVar("T")


def _fetch_list(path: str, parse: Callable[[Any], T], params: dict | None = None) -> list[T]:
    """Catalog lists fail soft: any backend or payload problem renders as empty."""
    try:
        data = backend.client.get(path, params=params)
        return [parse(row) for row in data or []]
    except (BackendError, requests.RequestException, ValidationError, TypeError) as exc:
        current_app.logger.warning("Catalog fetch %s failed, showing empty list: %s", path, exc)
        return []


def fetch_categories() -> list[Category]:
    return _fetch_list("/api/categories", Category.model_validate)


def fetch_products(query: str = "", category: str = "") -> list[Product]:
    params = {}
    if query:
        params["q"] = query
    if category:
        params["category"] = category
    return _fetch_list("/api/products", Product.model_validate, params or None)


def fetch_product(slug: str) -> Product:
    return Product.model_validate(backend.client.get(f"/api/products/{slug}"))


@bp.get("/")
def home():
    """Hero + catalog. A new search is simply a new request for this page."""
    query = (request.args.get("q") or "").strip()
    category = (request.args.get("category") or "").strip()

    categories = fetch_categories()
    products = fetch_products(query, category)

    return render_template(
        "pages/home.html",
        categories=categories,
        products=products,
        query=query,
        category=category,
    )


@bp.get("/product/<slug>")
def product_page(slug: str):
    product = fetch_product(slug)
    return render_template("pages/product.html", product=product)


@bp.post("/product/<slug>/cart")
def add_to_cart(slug: str):
    product = fetch_product(slug)
    qty = parse_quantity(request.form.get("quantity"))

    cart = cart_service.add_to_cart(backend.client, ClientStore(), product.id, qty)
    current_app.logger.info("Added %s x%s to cart %s", product.slug, qty, cart.id)
    return redirect(url_for("cart.cart_page"))
