"""
Web page — Flask UI for looking up the weather in a browser.

Provides:
  - Search form; a query runs only when the form is submitted
  - Result card with icon, details, 7-day forecast and a background
    gradient picked from the weather code and local hour
  - JSON API for programmatic access

Runs in a background thread alongside the Telegram bot, or on its own:
  python dashboard.py
"""

import asyncio
import logging

from flask import Flask, render_template, request, jsonify, redirect, url_for

from abilities.weather_codes import classify, describe, gradient_css
from config import DASHBOARD_SECRET
from formatting import IDLE_PROMPT, error_message
from models import ErrorKind, Failure, Success
from orchestrator import WeatherOrchestrator

log = logging.getLogger(__name__)

DEFAULT_BACKGROUND = "linear-gradient(135deg, #60a5fa, #2563eb)"

# HTTP status per failure kind for the JSON API
ERROR_STATUS = {
    ErrorKind.EMPTY_INPUT: 400,
    ErrorKind.NOT_FOUND: 404,
    ErrorKind.NETWORK_ERROR: 502,
}


def _run(coro):
    loop = asyncio.new_event_loop()
    try:
        return loop.run_until_complete(coro)
    finally:
        loop.close()


def create_app(orchestrator=None):
    orchestrator = orchestrator or WeatherOrchestrator()

    app = Flask(__name__)
    app.secret_key = DASHBOARD_SECRET
    app.config["orchestrator"] = orchestrator
    app.jinja_env.globals["describe"] = describe

    # ── Pages ───────────────────────────────────────────────

    @app.route("/")
    def index():
        state = orchestrator.state
        context = {"state": state, "background": DEFAULT_BACKGROUND, "prompt": IDLE_PROMPT}
        if isinstance(state, Success):
            observed = state.current.observed_at
            look = classify(state.current.weather_code, observed.hour if observed else None)
            context.update(look=look, background=gradient_css(look.gradient))
        elif isinstance(state, Failure):
            context["error"] = error_message(state.kind, state.query)
        return render_template("index.html", **context)

    # ── Form actions ────────────────────────────────────────

    @app.route("/search", methods=["POST"])
    def search():
        city = request.form.get("city", "")
        _run(orchestrator.submit(city))
        return redirect(url_for("index"))

    @app.route("/clear", methods=["POST"])
    def clear():
        orchestrator.reset()
        return redirect(url_for("index"))

    # ── API endpoints ───────────────────────────────────────

    @app.route("/api/weather", methods=["GET"])
    def api_weather():
        city = request.args.get("city", "")
        state = _run(orchestrator.submit(city))
        payload = state.to_dict()
        if isinstance(state, Failure):
            payload["message"] = error_message(state.kind, state.query)
            return jsonify(payload), ERROR_STATUS[state.kind]
        return jsonify(payload)

    @app.route("/api/state", methods=["GET"])
    def api_state():
        return jsonify(orchestrator.state.to_dict())

    return app


if __name__ == "__main__":
    from config import DASHBOARD_HOST, DASHBOARD_PORT, LOG_LEVEL

    logging.basicConfig(
        format="%(asctime)s [%(name)s] %(levelname)s %(message)s",
        level=LOG_LEVEL,
    )
    log.info(f"Web page: http://{DASHBOARD_HOST}:{DASHBOARD_PORT}")
    create_app().run(host=DASHBOARD_HOST, port=DASHBOARD_PORT)
