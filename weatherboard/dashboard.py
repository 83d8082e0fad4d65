"""Weatherboard dashboard: FastAPI app serving the card board + actions."""

from contextlib import asynccontextmanager
from dataclasses import asdict

from fastapi import FastAPI, HTTPException
from fastapi.responses import HTMLResponse

from weatherboard.config.schema import BoardConfig
from weatherboard.ingest.weather_client import WeatherClient
from weatherboard.render.board import CARD, FORECAST_BUTTON
from weatherboard.render.html import render_page
from weatherboard.session import BoardSession

ACTION_TARGETS = {"weather": CARD, "forecast": FORECAST_BUTTON}


def create_app(config: BoardConfig, client: WeatherClient | None = None) -> FastAPI:
    """Build the dashboard app. The scheduler runs for the app's lifetime."""
    owns_client = client is None
    client = client or WeatherClient.from_config(config.api)
    session = BoardSession(config, client)

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        await session.initial_load()
        session.start()
        try:
            yield
        finally:
            await session.stop()
            if owns_client:
                await client.aclose()

    app = FastAPI(title="Weatherboard", version="0.1.0", lifespan=lifespan)
    app.state.session = session

    # ── Data endpoints ──────────────────────────────────────────────

    @app.get("/api/cards")
    def get_cards():
        """One card per enabled city, placeholders included."""
        return [
            {**asdict(card), "trend_arrow": card.trend_arrow}
            for card in session.cards()
        ]

    @app.get("/api/status")
    def get_status():
        state = session.state
        return {
            "line": session.status_line(),
            "label": session.scheduler.status,
            "last_viewed": state.last_viewed,
            "last_refresh_at": (
                state.last_refresh_at.isoformat() if state.last_refresh_at else None
            ),
            "scheduler": session.scheduler.stats(),
        }

    # ── Card actions ────────────────────────────────────────────────

    @app.post("/api/cards/{city}/{action}")
    async def press_card(city: str, action: str):
        """Click a card (weather) or its forecast button (forecast)."""
        target = ACTION_TARGETS.get(action)
        if target is None:
            raise HTTPException(404, f"Unknown action: {action}")
        if session.board.card(city) is None:
            raise HTTPException(404, f"Unknown city: {city}")
        results = await session.click(city, target)
        return [
            {"city": r.city, "ok": r.ok, "message": r.message, "error": r.error}
            for r in results
        ]

    # ── Serve dashboard ─────────────────────────────────────────────

    @app.get("/", response_class=HTMLResponse)
    def serve_dashboard():
        return render_page(session.cards(), session.status_line())

    return app
