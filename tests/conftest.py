import os
import sys
from copy import deepcopy

import pytest

sys.path.insert(0, os.path.dirname(os.path.dirname(os.path.abspath(__file__))))

from delicassy.app.config import Config
from delicassy.app.extensions import backend
from delicassy.app.factory import create_app
from delicassy.app.common.errors import BackendError


class StorefrontTestConfig(Config):
    TESTING = True
    SECRET_KEY = "test-secret"
    API_BASE_URL = "http://backend.test"


CATEGORIES = [
    {"slug": "glassware", "name": "Glassware"},
    {"slug": "ceramics", "name": "Ceramics"},
    {"slug": "decor", "name": "Luxury Decor"},
]

VASE = {
    "_id": "p-vase",
    "slug": "crystal-vase",
    "title": "Crystal Vase",
    "price": 129.5,
    "fragility_rating": 5,
    "description": "Hand-blown lead-free crystal.",
    "handling_instructions": "Lift from the base only.",
    "reviews": [
        {"rating": 5, "comment": "Arrived perfect", "user_name": "Mira"},
        {"rating": 3, "comment": "Smaller than expected", "user_name": "Jon"},
    ],
}

BOWL = {
    "_id": "p-bowl",
    "slug": "raku-bowl",
    "title": "Raku Bowl",
    "price": 48,
    "fragility_rating": 3,
    "description": "Smoke-fired stoneware.",
    "reviews": [],
}


class FakeBackend:
    """In-memory stand-in for the backend API; records every call."""

    def __init__(self):
        self.calls = []
        self.categories = deepcopy(CATEGORIES)
        self.products = {p["slug"]: deepcopy(p) for p in (VASE, BOWL)}
        self.carts = {}
        self.packaging = [
            {"title": "Multi-layer wrap", "content_md": "1. Tissue\n2. Bubble\n3. Crate"},
            {"title": "Shock indicators", "content_md": "Every crate carries a tilt sensor."},
        ]
        self.about = {
            "headline": "Twenty-five years of careful hands.",
            "story": "We started in a glassblower's garage.",
            "badges": ["Handmade", "Insured shipping"],
        }
        self.fail = {}
        self.next_cart = 1
        self.order_total = "177.50"

    def _check(self, method, path):
        self.calls.append((method, path))
        err = self.fail.get((method, path.split("?")[0]))
        if err is not None:
            raise err

    def calls_to(self, method, path):
        return [c for c in self.calls if c[0] == method and c[1] == path]

    def get(self, path, params=None):
        self._check("GET", path)
        if params:
            self.calls[-1] = ("GET", path, dict(params))
        if path == "/api/categories":
            return deepcopy(self.categories)
        if path == "/api/products":
            q = (params or {}).get("q", "").lower()
            return [deepcopy(p) for p in self.products.values() if q in p["title"].lower()]
        if path.startswith("/api/products/"):
            slug = path.rsplit("/", 1)[1]
            if slug not in self.products:
                raise BackendError(404, "not_found", "Product not found")
            return deepcopy(self.products[slug])
        if path.startswith("/api/cart/"):
            cart_id = path.rsplit("/", 1)[1]
            if cart_id not in self.carts:
                raise BackendError(404, "not_found", "Cart not found")
            return {"_id": cart_id, "items": deepcopy(self.carts[cart_id])}
        if path == "/api/packaging":
            return deepcopy(self.packaging)
        if path == "/api/about":
            return deepcopy(self.about)
        raise BackendError(404, "not_found", path)

    def post(self, path, body):
        self._check("POST", path)
        if path == "/api/cart/init":
            cart_id = f"cart-{self.next_cart}"
            self.next_cart += 1
            self.carts[cart_id] = deepcopy(body.get("items", []))
            return {"id": cart_id, "items": deepcopy(self.carts[cart_id])}
        if path == "/api/checkout":
            self.last_checkout = deepcopy(body)
            return {"order_id": "ORD-1001", "amount_total": self.order_total}
        raise BackendError(404, "not_found", path)

    def put(self, path, body):
        self._check("PUT", path)
        cart_id = path.rsplit("/", 1)[1]
        if cart_id not in self.carts:
            raise BackendError(404, "not_found", "Cart not found")
        self.carts[cart_id] = deepcopy(body["items"])
        return {"_id": cart_id, "items": deepcopy(self.carts[cart_id])}

    def close(self):
        pass


@pytest.fixture()
def fake_backend(monkeypatch):
    fake = FakeBackend()
    monkeypatch.setattr(backend, "make_client", lambda: fake)
    return fake


@pytest.fixture()
def app(fake_backend):
    return create_app(StorefrontTestConfig)


@pytest.fixture()
def client(app):
    with app.test_client() as client:
        yield client
