import os
import typing
from logging.config import dictConfig


FLASK_ENV = os.getenv("FLASK_ENV", "development")
TESTING = FLASK_ENV == "test"

MAX_RESULTS = int(os.getenv("TRIEDEX_MAX_RESULTS", 10))
NUM_ENTITIES = int(os.getenv("TRIEDEX_NUM_ENTITIES", 20))
DELIMITER = os.getenv("TRIEDEX_DELIMITER", "_")
CACHE_TIMEOUT = int(os.getenv("TRIEDEX_CACHE_TIMEOUT", 300))


# Init logging before doing anything else.
LOGGING_CONFIG: typing.Dict[str, typing.Any] = {
    "version": 1,
    "disable_existing_loggers": True,
    "formatters": {
        "default": {
            "format": "[%(asctime)s] %(levelname)s in %(module)s: %(message)s",
        }
    },
    "handlers": {
        "wsgi": {
            "class": "logging.StreamHandler",
            "stream": "ext://flask.logging.wsgi_errors_stream",
            "formatter": "default",
        },
    },
    "root": {
        "level": "ERROR" if TESTING else "INFO",
        "handlers": ["wsgi"],
    },
}
dictConfig(LOGGING_CONFIG)

import flask
from triedex import cache
from triedex import middleware

app = flask.Flask(__name__)

# We have to use this `setattr` hack here or Mypy gets really confused.
# See https://github.com/python/mypy/issues/2427 for details.
setattr(app, "wsgi_app", middleware.LoggingMiddleware(app.wsgi_app))
config = {
    "TESTING": TESTING,
    "CACHE_TYPE": "SimpleCache",
    "CACHE_DEFAULT_TIMEOUT": CACHE_TIMEOUT,
    "TRIEDEX_MAX_RESULTS": MAX_RESULTS,
    "TRIEDEX_NUM_ENTITIES": NUM_ENTITIES,
    "TRIEDEX_DELIMITER": DELIMITER,
}
app.config.from_mapping(config)
cache.init(app)
