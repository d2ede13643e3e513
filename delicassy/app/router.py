from flask import Flask

from delicassy.app.ui import ui_bp
from delicassy.modules.catalog.routes import bp as catalog_bp
from delicassy.modules.cart.routes import bp as cart_bp
from delicassy.modules.content.routes import bp as content_bp


def register_views(app: Flask) -> None:
    # /search, /theme
    app.register_blueprint(ui_bp)
    # /, /product/<slug>, /product/<slug>/cart
    app.register_blueprint(catalog_bp)
    # /cart, /cart/items/<index>, /cart/checkout
    app.register_blueprint(cart_bp)
    # /packaging, /about
    app.register_blueprint(content_bp)
