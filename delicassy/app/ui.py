"""Shell chrome shared by every page: header, search, theme toggle, footer."""

from datetime import datetime, timezone
from urllib.parse import urlencode

from flask import Blueprint, g, redirect, request, url_for

from delicassy.app.common.storage import AppSettings, ClientStore
from delicassy.app.common.validation import safe_next

ui_bp = Blueprint("ui", __name__)


@ui_bp.before_app_request
def load_settings():
    g.settings = AppSettings.load(ClientStore())


def _menu_toggle_url(open_menu: bool) -> str:
    """Current page with the menu flag flipped and every other query arg kept."""
    args = request.args.to_dict(flat=False)
    args["menu"] = ["open" if open_menu else "closed"]
    return f"{request.path}?{urlencode(args, doseq=True)}"


@ui_bp.app_context_processor
def inject_shell():
    """Transient chrome state: mobile menu flag and the search box contents."""
    return {
        "settings": getattr(g, "settings", None) or AppSettings(),
        "menu_open": request.args.get("menu") == "open",
        "menu_toggle_url": _menu_toggle_url(request.args.get("menu") != "open"),
        "search_query": (request.args.get("q") or "").strip(),
        "current_year": datetime.now(timezone.utc).year,
    }


@ui_bp.get("/search")
def search():
    query = (request.args.get("q") or "").strip()
    if not query:
        return redirect(url_for("catalog.home"))
    return redirect(url_for("catalog.home", q=query))


@ui_bp.post("/theme")
def toggle_theme():
    settings = g.settings
    settings.toggle(ClientStore())
    return redirect(safe_next(request.form.get("next") or request.args.get("next")))
