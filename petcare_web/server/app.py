"""
Flask app serving the prebuilt web app with client-side routing support.

Requests are resolved against the assets root first; anything that doesn't
match a file gets the fallback document, so routes handled by the browser
(``/pets/123``) survive a full page load.
"""

import logging

import flask
from flask import current_app, request

from ..config import ServerConfig
from .assets import check_assets_root, guess_mimetype, resolve_asset
from .constants import FALLBACK_DOCUMENT

logger = logging.getLogger(__name__)

# every method gets the same static response
METHODS = ["GET", "HEAD", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"]

spa = flask.Blueprint("spa", __name__)


def send_fallback() -> flask.Response:
    return flask.send_file(
        current_app.config["FALLBACK_DOCUMENT"], mimetype="text/html"
    )


@spa.route("/", defaults={"path": ""}, methods=METHODS)
@spa.route("/<path:path>", methods=METHODS)
def serve(path: str):
    """Serve the file at ``path`` if there is one, else the fallback document."""
    asset = resolve_asset(current_app.config["ASSETS_ROOT"], path)
    if asset is None:
        logger.debug(f"No asset for {request.path!r}, serving fallback document")
        return send_fallback()
    return flask.send_file(asset, mimetype=guess_mimetype(asset))


def create_app(config: ServerConfig | None = None) -> flask.Flask:
    """Create the Flask app.

    Args:
        config: Startup configuration. Resolved from the environment if not given.

    Raises:
        AssetsNotFoundError: if the assets root or its ``index.html`` is missing.
    """
    if config is None:
        config = ServerConfig.from_env()

    root = check_assets_root(config.assets_dir)

    # static_folder=None: the catch-all route below is the only static handler
    app = flask.Flask(__name__, static_folder=None)
    app.config["ASSETS_ROOT"] = root
    app.config["FALLBACK_DOCUMENT"] = root / FALLBACK_DOCUMENT
    app.register_blueprint(spa)

    logger.debug(f"Serving assets from {root}")
    return app
