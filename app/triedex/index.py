import logging
import typing

from flask import current_app

from triedex.cache import Cache
from triedex.lib.codec import JsonCodec
from triedex.lib.entities import ENTITY_LIST_CODEC
from triedex.lib.entities import ScoredEntity
from triedex.lib.entities import generate_entities
from triedex.lib.entities import sort_entities
from triedex.lib.errors import DeserializationError
from triedex.lib.errors import InvalidArgument
from triedex.lib.trie import PrefixTrie


logger = logging.getLogger(__name__)


DEFAULT_DELIMITER = "_"


class EntityIndex:
    """Prefix search over the name tokens of a list of scored entities.

    Entities are kept sorted by score (lowest first); the trie maps each
    lowercased name token to positions in that list.
    """

    def __init__(self, entities: typing.List[ScoredEntity], trie: PrefixTrie[int]):
        self.entities = entities
        self.trie = trie

    @classmethod
    def build(
        cls,
        entities: typing.Iterable[ScoredEntity],
        max_results: int,
        delimiter: str = DEFAULT_DELIMITER,
    ) -> "EntityIndex":
        if not delimiter:
            raise InvalidArgument("delimiter must be non-empty")
        sorted_entities = typing.cast(
            typing.List[ScoredEntity],
            [e for e in sort_entities(entities) if e is not None],
        )
        trie: PrefixTrie[int] = PrefixTrie(max_results)
        for i, entity in enumerate(sorted_entities):
            for token in entity.name.lower().split(delimiter):
                if not token:
                    logger.warning(
                        "Skipping empty token in entity name %r", entity.name
                    )
                    continue
                trie.insert(token, i)
        logger.info(
            "Indexed %s entities into %s trie nodes", len(sorted_entities), len(trie)
        )
        return cls(sorted_entities, trie)

    @property
    def max_results(self) -> int:
        return self.trie.max_results

    def search(self, prefix: str) -> typing.List[ScoredEntity]:
        return [self.entities[i] for i in self.trie.retrieve(prefix.lower())]

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        return {
            "entities": [e.to_dict() for e in self.entities],
            "trie": self.trie.to_dict(),
        }

    @classmethod
    def from_dict(cls, data: typing.Any) -> "EntityIndex":
        if not isinstance(data, dict):
            raise DeserializationError(
                f"Expected an index object, got {type(data).__name__}"
            )
        if "entities" not in data or "trie" not in data:
            raise DeserializationError("Index must have 'entities' and 'trie'")
        if not isinstance(data["entities"], list):
            raise DeserializationError("Index entities must be a list")
        entities = [ScoredEntity.from_dict(d) for d in data["entities"]]
        trie: PrefixTrie[int] = PrefixTrie.from_dict(data["trie"], value_type=int)

        stack = [trie]
        while stack:
            node = stack.pop()
            for i in node.values:
                if not 0 <= i < len(entities):
                    raise DeserializationError(
                        f"Index {i} out of range for {len(entities)} entities"
                    )
            stack.extend(node.edges.values())
        return cls(entities, trie)


INDEX_CODEC: JsonCodec[EntityIndex] = JsonCodec(
    EntityIndex.to_dict, EntityIndex.from_dict
)


_INDEX_CACHE: Cache[str, str] = Cache(prefix="index-")


def get_index() -> EntityIndex:
    """Returns the index over the generated sample entities.

    The index is kept in the cache in its serialized form and rebuilt
    when missing.
    """
    num_entities = current_app.config["TRIEDEX_NUM_ENTITIES"]
    max_results = current_app.config["TRIEDEX_MAX_RESULTS"]
    delimiter = current_app.config["TRIEDEX_DELIMITER"]
    key = f"{num_entities}:{max_results}:{delimiter}"

    encoded = _INDEX_CACHE.get(key)
    if encoded is not None:
        return INDEX_CODEC.decode(encoded)

    logger.info("Building index for %s generated entities", num_entities)
    index = EntityIndex.build(
        generate_entities(num_entities), max_results, delimiter
    )
    _INDEX_CACHE.set(key, INDEX_CODEC.encode(index))
    return index


def load_index(path: str) -> EntityIndex:
    with open(path, "rb") as f:
        return INDEX_CODEC.decode(f.read())


def dump_index(index: EntityIndex, path: str):
    with open(path, "w") as f:
        f.write(INDEX_CODEC.encode(index))


def load_entities(path: str) -> typing.List[ScoredEntity]:
    with open(path, "rb") as f:
        return ENTITY_LIST_CODEC.decode(f.read())
