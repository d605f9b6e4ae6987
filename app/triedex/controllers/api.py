import logging
import typing

from flask import Response
from flask import jsonify
from flask import request

from triedex.index import INDEX_CODEC
from triedex.index import get_index
from triedex.lib.errors import TriedexError


logger = logging.getLogger(__name__)


def healthcheck() -> str:
    return "OK"


def search() -> typing.Union[Response, typing.Tuple[Response, int]]:
    query = request.args.get("q")
    if query is None:
        return jsonify({"error": "Missing query parameter 'q'"}), 400
    query = query.strip()
    results = get_index().search(query)
    return jsonify(
        {"query": query, "results": [entity.to_dict() for entity in results]}
    )


def index_dump() -> Response:
    return Response(INDEX_CODEC.encode(get_index()), mimetype="application/json")


def handle_triedex_error(e: TriedexError) -> typing.Tuple[Response, int]:
    logger.warning("Request failed: %s", e)
    return jsonify({"error": str(e)}), 400
