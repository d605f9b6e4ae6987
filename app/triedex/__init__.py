from triedex import config  # Do this first, it initializes everything

from triedex import management
from triedex.controllers import api
from triedex.lib.errors import TriedexError


app = config.app

# Register management commands
app.cli.command("generate")(management.generate)
app.cli.command("build-index")(management.build_index)
app.cli.command("query")(management.query)

# Register routes
app.route("/", methods=["GET"])(api.healthcheck)
app.route("/healthcheck", methods=["GET"])(api.healthcheck)
app.route("/search", methods=["GET"])(api.search)
app.route("/index", methods=["GET"])(api.index_dump)

app.register_error_handler(TriedexError, api.handle_triedex_error)
