import typing

from triedex.lib.codec import JsonCodec
from triedex.lib.errors import DeserializationError
from triedex.lib.errors import InvalidArgument


T = typing.TypeVar("T")


class TrieRecord(typing.TypedDict):
    maxResults: int
    values: typing.List[typing.Any]
    edges: typing.Dict[str, "TrieRecord"]


class PrefixTrie(typing.Generic[T]):
    """A prefix trie which keeps a bounded list of values at every node.

    Each node stores at most `max_results` values, in insertion order.
    A value equal to the last one stored at a node is not stored again,
    so a run of insertions of the same value keeps a single entry.
    The root stands for the empty prefix and never receives values.
    """

    def __init__(self, max_results: int):
        if isinstance(max_results, bool) or not isinstance(max_results, int):
            raise InvalidArgument(
                f"max_results must be an int, got {type(max_results).__name__}"
            )
        if max_results < 0:
            raise InvalidArgument(f"max_results must be >= 0, got {max_results}")
        self._max_results = max_results
        self.values: typing.List[T] = []
        self.edges: typing.Dict[str, PrefixTrie[T]] = {}

    @property
    def max_results(self) -> int:
        return self._max_results

    def _offer(self, value: T):
        if len(self.values) >= self._max_results:
            return
        if self.values and self.values[-1] == value:
            return
        self.values.append(value)

    def insert(self, key: str, value: T) -> "PrefixTrie[T]":
        if not key:
            raise InvalidArgument("Cannot insert an empty key")
        curr = self
        for c in key:
            child = curr.edges.get(c)
            if child is None:
                child = PrefixTrie(curr._max_results)
                curr.edges[c] = child
            curr = child
            curr._offer(value)
        return self

    def retrieve(self, prefix: str) -> typing.List[T]:
        curr = self
        for c in prefix:
            child = curr.edges.get(c)
            if child is None:
                return []
            curr = child
        return curr.values

    def __contains__(self, prefix: object) -> bool:
        if not isinstance(prefix, str):
            return False
        curr = self
        for c in prefix:
            child = curr.edges.get(c)
            if child is None:
                return False
            curr = child
        return True

    def __len__(self) -> int:
        count = 0
        stack = list(self.edges.values())
        while stack:
            curr = stack.pop()
            count += 1
            stack.extend(curr.edges.values())
        return count

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, PrefixTrie):
            return NotImplemented
        return self.to_dict() == other.to_dict()

    def __repr__(self) -> str:
        return f"PrefixTrie(max_results={self._max_results}, nodes={len(self)})"

    def to_dict(self) -> TrieRecord:
        return {
            "maxResults": self._max_results,
            "values": list(self.values),
            "edges": {c: child.to_dict() for c, child in self.edges.items()},
        }

    @classmethod
    def from_dict(
        cls,
        record: typing.Any,
        value_type: typing.Optional[typing.Type[T]] = None,
    ) -> "PrefixTrie[T]":
        return cls._from_dict(record, value_type, "")

    @classmethod
    def _from_dict(
        cls,
        record: typing.Any,
        value_type: typing.Optional[typing.Type[T]],
        path: str,
        parent_max_results: typing.Optional[int] = None,
    ) -> "PrefixTrie[T]":
        where = f"node {path!r}"
        if not isinstance(record, dict):
            raise DeserializationError(
                f"{where}: expected an object, got {type(record).__name__}"
            )
        for field in ("maxResults", "values", "edges"):
            if field not in record:
                raise DeserializationError(f"{where}: missing field {field!r}")

        max_results = record["maxResults"]
        values = record["values"]
        edges = record["edges"]
        if isinstance(max_results, bool) or not isinstance(max_results, int):
            raise DeserializationError(f"{where}: maxResults must be an int")
        if max_results < 0:
            raise DeserializationError(f"{where}: maxResults must be >= 0")
        if parent_max_results is not None and max_results != parent_max_results:
            raise DeserializationError(
                f"{where}: maxResults={max_results} differs from parent's "
                f"maxResults={parent_max_results}"
            )
        if not isinstance(values, list):
            raise DeserializationError(f"{where}: values must be a list")
        if len(values) > max_results:
            raise DeserializationError(
                f"{where}: {len(values)} values exceed maxResults={max_results}"
            )
        if value_type is not None:
            for value in values:
                # bool passes isinstance checks against int
                if not isinstance(value, value_type) or (
                    isinstance(value, bool) and not issubclass(value_type, bool)
                ):
                    raise DeserializationError(
                        f"{where}: value {value!r} is not a {value_type.__name__}"
                    )
        if not isinstance(edges, dict):
            raise DeserializationError(f"{where}: edges must be an object")

        node: PrefixTrie[T] = cls(max_results)
        node.values = list(values)
        for c, child in edges.items():
            if not isinstance(c, str) or len(c) != 1:
                raise DeserializationError(
                    f"{where}: edge key {c!r} is not a single character"
                )
            node.edges[c] = cls._from_dict(child, value_type, path + c, max_results)
        return node

    def to_json(self) -> str:
        return TRIE_CODEC.encode(self)

    @classmethod
    def from_json(cls, text: str) -> "PrefixTrie[typing.Any]":
        return TRIE_CODEC.decode(text)


TRIE_CODEC: JsonCodec[PrefixTrie[typing.Any]] = JsonCodec(
    PrefixTrie.to_dict, PrefixTrie.from_dict
)
