"""HTTP endpoints of the game and the command that serves them."""

from __future__ import annotations

import argparse
import functools
import json
import logging
from collections.abc import Callable, Sequence
from typing import Any

import requests
from flask import Flask, Response, make_response, request

from worldle.game import GameNotInitializedError, GameState
from worldle.geocalc import GeoService, maps_url_answer
from worldle.github import GitHubConfigError
from worldle.mapsapi import MapsApiError
from worldle.silhouettes import SilhouetteError
from worldle.territories import TerritoriesError, get_formatted_territory_names

logger = logging.getLogger(__name__)

ALLOWED_ORIGIN = "http://localhost:3000"
DEFAULT_PORT = 8080

_METHODS = ["GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]
_FETCH_ERRORS = (GitHubConfigError, TerritoriesError, SilhouetteError, requests.RequestException)


def _to_json(obj: Any, newline: bool) -> str:
    text = json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False)
    text = (
        text.replace("&", "\\u0026")
        .replace("<", "\\u003c")
        .replace(">", "\\u003e")
        .replace("\u2028", "\\u2028")
        .replace("\u2029", "\\u2029")
    )
    return text + "\n" if newline else text


def _json_response(obj: Any, newline: bool = True) -> Response:
    return Response(_to_json(obj, newline), 200, content_type="application/json")


def _raw_json(body: str) -> Response:
    return Response(body, 200, content_type="application/json")


def _http_error(message: str, status: int) -> Response:
    return Response(
        message + "\n",
        status,
        content_type="text/plain; charset=utf-8",
        headers={"X-Content-Type-Options": "nosniff"},
    )


def _with_cors(view: Callable[[], Response]) -> Callable[[], Response]:
    @functools.wraps(view)
    def wrapper() -> Response:
        if request.method == "OPTIONS":
            response = make_response("", 200)
        else:
            response = make_response(view())
        response.headers["Access-Control-Allow-Origin"] = ALLOWED_ORIGIN
        response.headers["Access-Control-Allow-Methods"] = "GET, POST, OPTIONS"
        response.headers["Access-Control-Allow-Headers"] = "Content-Type, Authorization"
        return response

    return wrapper


def _plain_number(value: float) -> float | int:
    return int(value) if float(value).is_integer() else value


def create_app(
    state: GameState | None = None,
    geo: GeoService | None = None,
    list_territories: Callable[[], list[str]] | None = None,
) -> Flask:
    """Build the web application around a game, a geo service and a territory list."""
    game = state or GameState()
    geo_service = geo or GeoService()
    territories_source = list_territories or get_formatted_territory_names
    app = Flask(__name__)

    def new_game() -> Response:
        try:
            game.start_new_game()
        except _FETCH_ERRORS:
            return _http_error("Failed to start new game", 500)
        return Response("New game started", 200, content_type="text/plain; charset=utf-8")

    def silhouette() -> Response:
        try:
            image = game.current_silhouette()
        except GameNotInitializedError:
            return _http_error("Failed to fetch silhouette", 500)
        return Response(image, 200, content_type="image/png")

    def territories() -> Response:
        try:
            names = territories_source()
        except (GitHubConfigError, TerritoriesError, requests.RequestException):
            return _http_error("Failed to fetch territories", 500)
        return _json_response(names, newline=False)

    def answer() -> Response:
        if request.method != "GET":
            return _raw_json('{"message": "Use GET to retrieve the answer."}')
        answer_country = game.country()
        if not answer_country:
            return _http_error("Game not initialized", 500)
        return _json_response({"answer": answer_country, "url": maps_url_answer(answer_country)})

    def guess() -> Response:
        if request.method != "POST":
            return _raw_json('{"message": "Use POST with a JSON payload to make a guess."}')

        try:
            payload = json.loads(request.get_data(as_text=True))
        except ValueError:
            return _http_error("Invalid request payload", 400)
        if payload is None:
            payload = {}
        if not isinstance(payload, dict):
            return _http_error("Invalid request payload", 400)
        raw_guess = payload.get("guess")
        if raw_guess is None:
            raw_guess = ""
        if not isinstance(raw_guess, str):
            return _http_error("Invalid request payload", 400)
        guessed = raw_guess.replace(" ", "_")

        answer_country = game.country()
        if not answer_country:
            return _http_error("Game not initialized", 500)

        is_correct = guessed.casefold() == answer_country.casefold()

        try:
            distance, direction = geo_service.distance_and_direction(guessed, answer_country)
        except MapsApiError:
            return _http_error("Failed to calculate distance", 500)

        try:
            if is_correct:
                url = geo_service.maps_url(answer_country, answer_country)
                direction = ""
            else:
                url = geo_service.maps_url(guessed, answer_country)
        except MapsApiError:
            return _http_error("Failed to generate maps URL", 500)

        return _json_response(
            {
                "isCorrect": is_correct,
                "distance": _plain_number(distance),
                "direction": direction,
                "url": url,
            }
        )

    routes = {
        "/api/newgame": new_game,
        "/api/silhouette": silhouette,
        "/api/territories": territories,
        "/api/answer": answer,
        "/api/guess": guess,
    }
    for path, view in routes.items():
        app.add_url_rule(path, view.__name__, _with_cors(view), methods=_METHODS)
    return app


def main(argv: Sequence[str] | None = None) -> None:
    """Serve the game over HTTP."""
    parser = argparse.ArgumentParser(prog="worldle", description="Serve the territory guessing game.")
    parser.add_argument("--host", default="0.0.0.0", help="address to listen on")
    parser.add_argument("--port", type=int, default=DEFAULT_PORT, help="port to listen on")
    args = parser.parse_args(argv)

    logging.basicConfig(level=logging.INFO)
    logger.info("Starting server on :%d", args.port)
    create_app().run(host=args.host, port=args.port)