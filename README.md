# worldle

An HTTP backend for a geography guessing game. Each round picks a random
territory, serves its silhouette as a PNG image, and answers every guess
with the distance in whole kilometres to the right answer, a
sixteen-point compass direction, and a Google Maps link.

## Installing

    pip install .

For running the tests:

    pip install ".[test]"
    pytest

## Configuration

Settings come from the environment.

Silhouettes live as `<territory>.png` files in a `silhouettes` directory
of a GitHub repository, read through the GitHub contents API:

- `GITHUB_TOKEN`: token sent as a bearer token
- `GITHUB_OWNER`: owner of the repository
- `GITHUB_REPO`: repository name
- `GITHUB_BRANCH`: branch to read from

If any of these is missing, requests that need GitHub fail
(`worldle.github.GitHubConfigError`), and the endpoints that use them
answer with status 500.

Coordinates come from the Google Maps geocoding service:

- `MAPS_API_KEY`: key for the geocoding service

The key is read when a territory is first geocoded, not at start-up. If
it is missing, guesses answer with status 500 ("Failed to calculate
distance"). Coordinates are cached in memory for the life of the process.

## Running

    worldle [--host HOST] [--port PORT]

The server listens on `0.0.0.0` port 8080 by default, using Flask's
built-in server. Every response carries CORS headers allowing the origin
`http://localhost:3000`; `OPTIONS` requests get an empty 200 answer.

## Endpoints

| Path               | Method | Result                                                       |
|--------------------|--------|--------------------------------------------------------------|
| `/api/newgame`     | any    | starts a new round with a random territory                   |
| `/api/silhouette`  | any    | PNG silhouette of the current territory                      |
| `/api/territories` | any    | JSON list of all territory names, upper case, spaces for `_` |
| `/api/guess`       | POST   | body `{"guess": "FRANCE"}`; correctness, distance, direction |
| `/api/answer`      | GET    | JSON with the current answer and a map link                  |

`/api/guess` called with another method, and `/api/answer` called with
another method, answer 200 with a short JSON `message` saying which
method to use. Both answer 500 "Game not initialized" before the first
`/api/newgame`; `/api/silhouette` likewise answers 500 before then.

A guess response looks like this:

    {"direction":"NE","distance":1054,"isCorrect":false,"url":"https://www.google.com/maps/dir/..."}

Spaces in the guess are replaced with underscores, and the guess is
compared with the answer without regard to case. When the guess is right,
`direction` is empty. A body that is not a JSON object, or whose `guess`
is not a string, gets status 400 "Invalid request payload".

## Using it from Python

    from worldle.api import create_app
    from worldle.game import GameState
    from worldle.geocalc import GeoService

    app = create_app(
        GameState(pick_country=lambda: "france", fetch_image=lambda name: b"..."),
        GeoService(geocoder=lambda name: (46.2, 2.2)),
        list_territories=lambda: ["FRANCE"],
    )

`create_app(state, geo, list_territories)` builds the Flask application;
each argument may be left out to use the GitHub- and Maps-backed
defaults. `GameState` holds the current answer (`country()`) and its
silhouette (`current_silhouette()`, raising `GameNotInitializedError`
before `start_new_game()`). `GeoService` gives `coordinates()`,
`distance_and_direction()` and `maps_url()`; `worldle.geocalc.maps_url_answer`
builds a place link.

Lower-level helpers:

- `worldle.haversine.haversine`: great-circle distance in metres
- `worldle.bearing`: `initial_bearing`, `get_compass`, `degrees_to_compass`
- `worldle.mapsapi`: `geocode`, `maps_api`, `maps_api_key`
- `worldle.territories`: `get_all_territories`, `get_formatted_territory_names`
- `worldle.silhouettes`: `fetch_silhouette`, `get_random_country`

## What it does not do

There is one game at a time, shared by every client, held only in
memory: no per-player sessions, no stored history or scores, and no
limit on the number of guesses. The front end is not part of this
package.