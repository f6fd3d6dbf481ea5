"""Flask application package for the advent roulette calendar."""

from __future__ import annotations

from collections.abc import Callable, Mapping
from datetime import date
from typing import Any

from dotenv import load_dotenv
from flask import Flask


def create_app(
    overrides: Mapping[str, Any] | None = None,
    clock: Callable[[], date] | None = None,
) -> Flask:
    """Application factory.

    Args:
        overrides: Config values applied after the environment config.
        clock: Callable returning the local date; defaults to ``date.today``.

    Returns:
        Configured Flask application.
    """
    load_dotenv()

    from advent_roulette.config import get_config
    from advent_roulette.db import init_db
    from advent_roulette.error_handlers import register_error_handlers
    from advent_roulette.logging_config import configure_logging
    from advent_roulette.routes.calendar import calendar_bp
    from advent_roulette.routes.health import health_bp
    from advent_roulette.routes.web import web_bp
    from advent_roulette.utils.clock import init_clock

    app = Flask(__name__)
    app.config.from_object(get_config())
    if overrides:
        app.config.update(overrides)

    configure_logging(app)
    init_db(app)
    init_clock(app, clock)
    register_error_handlers(app)

    app.register_blueprint(health_bp)
    app.register_blueprint(web_bp)
    app.register_blueprint(calendar_bp, url_prefix="/api")

    return app
