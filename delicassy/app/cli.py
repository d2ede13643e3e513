from __future__ import annotations

import click
import requests
from flask import Blueprint

from delicassy.app.extensions import backend
from delicassy.app.common.errors import BackendError

cli_bp = Blueprint("cli", __name__, cli_group=None)


@cli_bp.cli.command("check-backend")
def check_backend() -> None:
    """Ping the backend API by listing categories."""
    try:
        categories = backend.client.get("/api/categories") or []
    except (BackendError, requests.RequestException) as exc:
        raise click.ClickException(f"Backend unreachable: {exc}")
    click.echo(f"Backend OK: {len(categories)} categories.")
