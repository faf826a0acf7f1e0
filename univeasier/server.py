"""The HTTP server: configuration, database connection, routes and CORS."""

import argparse
import logging
import os
from dataclasses import dataclass
from http import HTTPStatus
from typing import Any

from flask import Flask, Response, request

from .api import create_app
from .config import Config, ServerConfig, read_configuration
from .connection import init_connection

logger = logging.getLogger(__name__)

_ALLOWED_HEADERS = ("X-Requested-With", "Content-Type", "Authorization")
_ALLOWED_METHODS = ("GET", "POST", "PUT", "DELETE")
_DEFAULT_HEADERS = ("Accept", "Accept-Language", "Content-Language", "Origin")
_ALLOWED_ORIGIN = "*"
_LISTEN_HOST = "0.0.0.0"


def _canonical(header):
    return "-".join(part.capitalize() for part in header.strip().split("-"))


def _preflight():
    method = request.headers.get("Access-Control-Request-Method")
    if method is None:
        return Response(status=HTTPStatus.BAD_REQUEST)
    method = method.upper()
    if method not in _ALLOWED_METHODS:
        return Response(status=HTTPStatus.METHOD_NOT_ALLOWED)

    allowed = {_canonical(name) for name in _ALLOWED_HEADERS + _DEFAULT_HEADERS}
    requested = []
    for raw in request.headers.get("Access-Control-Request-Headers", "").split(","):
        header = _canonical(raw)
        if not header or header in _DEFAULT_HEADERS:
            continue
        if header not in allowed:
            return Response(status=HTTPStatus.FORBIDDEN)
        requested.append(header)

    response = Response(status=HTTPStatus.OK)
    if requested:
        response.headers["Access-Control-Allow-Headers"] = ",".join(requested)
    response.headers["Access-Control-Allow-Methods"] = method
    return response


def _install_cors(app):
    """Answer preflight requests and mark responses to cross-origin requests."""

    @app.before_request
    def _check_cors():
        if not request.headers.get("Origin"):
            return None
        if request.method == "OPTIONS":
            return _preflight()
        if request.method not in _ALLOWED_METHODS:
            return Response(status=HTTPStatus.METHOD_NOT_ALLOWED)
        return None

    @app.after_request
    def _allow_origin(response):
        if request.headers.get("Origin"):
            response.headers["Access-Control-Allow-Origin"] = _ALLOWED_ORIGIN
        return response

    return app


def _init_logger():
    logging.basicConfig(
        level=logging.DEBUG,
        format="%(asctime)s %(levelname)s %(name)s %(message)s",
    )


@dataclass
class Server:
    """Ties the configuration, the database connection and the web application."""

    config: Config | None = None
    conn: Any = None
    app: Flask | None = None

    def initialize(self, config_path):
        """Read the configuration, connect to the database and build the routes."""
        _init_logger()
        logger.info("Reading the configuration file")
        self.config = read_configuration(config_path)
        logger.info("Initializing database connection")
        self.conn = init_connection(self.config)
        logger.info("Configuring the router")
        self.app = _install_cors(create_app(self.conn))
        return self

    def run(self):
        """Serve the application until it stops; close the connection afterwards."""
        if self.app is None or self.config is None:
            raise RuntimeError("the server is not initialized")
        settings = self.config.server or ServerConfig()
        logger.info("Server listening on http://%s:%s", settings.host, settings.port)
        try:
            port = int(settings.port)
            self.app.run(host=_LISTEN_HOST, port=port)
        except (OSError, ValueError) as exc:
            logger.error("Cannot initialize server info=%s", exc)
        else:
            self.conn.close()


def main(argv=None):
    """Start the server with the configuration file named by CONFIG."""
    parser = argparse.ArgumentParser(prog="univeasier", description="Run the API server.")
    parser.add_argument(
        "--config",
        default=os.environ.get("CONFIG", ""),
        help="path of the JSON configuration file (default: $CONFIG)",
    )
    args = parser.parse_args(argv)

    server = Server()
    try:
        server.initialize(args.config)
    except Exception as exc:
        logger.error("Cannot start the server info=%s", exc)
        return 1
    server.run()
    return 0