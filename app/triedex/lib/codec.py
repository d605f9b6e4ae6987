import json
import typing

from triedex.lib.errors import DeserializationError


T = typing.TypeVar("T")


class JsonCodec(typing.Generic[T]):
    """Encodes objects of a single type to JSON and back.

    `to_data` turns an object into JSON-compatible data; `from_data` does
    the inverse and should raise `DeserializationError` (or `TypeError`,
    `KeyError`, `ValueError`) on data it can't handle.
    """

    def __init__(
        self,
        to_data: typing.Callable[[T], typing.Any],
        from_data: typing.Callable[[typing.Any], T],
    ):
        self._to_data = to_data
        self._from_data = from_data

    def encode(self, obj: T) -> str:
        return json.dumps(self._to_data(obj))

    def decode(self, text: typing.Union[str, bytes]) -> T:
        try:
            data = json.loads(text)
        except ValueError as e:
            raise DeserializationError(f"Malformed JSON: {e}") from e
        try:
            return self._from_data(data)
        except DeserializationError:
            raise
        except (TypeError, KeyError, ValueError) as e:
            raise DeserializationError(f"Unexpected data: {e}") from e
