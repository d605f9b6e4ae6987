import typing
import unittest

from click.testing import Result

from triedex import app
from triedex.cache import CACHE


class BaseTestCase(unittest.TestCase):
    app = app
    client = app.test_client()
    maxDiff = None

    def setUp(self):
        super().setUp()
        with self.app.app_context():
            CACHE.clear()

    def invoke(self, *args: str) -> Result:
        return self.app.test_cli_runner().invoke(args=list(args))

    def assert_names(
        self, expected: typing.List[str], entities: typing.Iterable[typing.Any]
    ):
        self.assertListEqual(expected, [e.name for e in entities])
