from __future__ import annotations

from flask import Blueprint, render_template

from delicassy.app.extensions import backend
from delicassy.app.models import AboutDocument, PackagingGuide

bp = Blueprint("content", __name__)


@bp.get("/packaging")
def packaging_page():
    """Safety & packaging guides, rendered verbatim."""
    guides = [PackagingGuide.model_validate(g) for g in backend.client.get("/api/packaging") or []]
    return render_template("pages/packaging.html", guides=guides)


@bp.get("/about")
def about_page():
    about = AboutDocument.model_validate(backend.client.get("/api/about") or {})
    return render_template("pages/about.html", about=about)
