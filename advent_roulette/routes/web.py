"""Web page routes."""

from __future__ import annotations

from flask import Blueprint, Response, render_template

from advent_roulette.routes.calendar import get_store
from advent_roulette.services.calendar_service import CalendarService
from advent_roulette.utils.clock import current_day

web_bp = Blueprint("web", __name__)

_service = CalendarService()


@web_bp.get("/")
def index():
    view = _service.view(get_store(), current_day())
    return render_template("index.html", view=view)


@web_bp.get("/favicon.ico")
def favicon() -> Response:
    svg = """<svg xmlns='http://www.w3.org/2000/svg' viewBox='0 0 64 64'>
    <defs>
        <radialGradient id='g' cx='35%' cy='30%' r='80%'>
            <stop offset='0%' stop-color='#f87171'/>
            <stop offset='60%' stop-color='#b91c1c'/>
            <stop offset='100%' stop-color='#14532d'/>
        </radialGradient>
    </defs>
    <rect x='6' y='6' width='52' height='52' rx='10' fill='url(#g)'/>
    <text x='32' y='41' text-anchor='middle' font-family='system-ui,Segoe UI,Arial' font-size='24' font-weight='800' fill='#fef9c3'>24</text>
</svg>"""

    return Response(svg, mimetype="image/svg+xml")
