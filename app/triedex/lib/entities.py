import dataclasses
import functools
import typing

from triedex.lib.codec import JsonCodec
from triedex.lib.errors import DeserializationError
from triedex.lib.errors import InvalidArgument


MAX_GENERATED_ENTITIES = 26


@dataclasses.dataclass
class ScoredEntity:
    name: str = ""
    score: int = 0

    def to_dict(self) -> typing.Dict[str, typing.Any]:
        return dataclasses.asdict(self)

    @classmethod
    def from_dict(cls, data: typing.Any) -> "ScoredEntity":
        if not isinstance(data, dict):
            raise DeserializationError(
                f"Expected an entity object, got {type(data).__name__}"
            )
        name = data.get("name")
        score = data.get("score")
        if not isinstance(name, str):
            raise DeserializationError(f"Entity name must be a str: {data}")
        if isinstance(score, bool) or not isinstance(score, int):
            raise DeserializationError(f"Entity score must be an int: {data}")
        return cls(name=name, score=score)


def compare_entities_by_score(
    x: typing.Optional[ScoredEntity], y: typing.Optional[ScoredEntity]
) -> int:
    """Three-way comparison where a missing entity sorts before any entity."""
    if x is None:
        return 0 if y is None else -1
    if y is None:
        return 1
    return (x.score > y.score) - (x.score < y.score)


@functools.total_ordering
class ScoreKey:
    """Sort key over an optional entity, ordered by `compare_entities_by_score`."""

    __slots__ = ("entity",)

    def __init__(self, entity: typing.Optional[ScoredEntity]):
        self.entity = entity

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, ScoreKey):
            return NotImplemented
        return compare_entities_by_score(self.entity, other.entity) == 0

    def __lt__(self, other: "ScoreKey") -> bool:
        return compare_entities_by_score(self.entity, other.entity) < 0

    def __hash__(self) -> int:
        return hash(None if self.entity is None else self.entity.score)


def sort_entities(
    entities: typing.Iterable[typing.Optional[ScoredEntity]],
) -> typing.List[typing.Optional[ScoredEntity]]:
    return sorted(entities, key=ScoreKey)


def generate_entities(length: int) -> typing.List[ScoredEntity]:
    """Builds `length` sample entities with two-part names.

    Entity `i` is named from letters walking inwards from both ends of the
    alphabet (e.g. "Az_Za", "By_Yb") and scores `length - i`.
    """
    if length < 0 or length > MAX_GENERATED_ENTITIES:
        raise InvalidArgument(
            f"length must be between 0 and {MAX_GENERATED_ENTITIES}, got {length}"
        )
    entities = []
    for i in range(length):
        name = "".join(
            [
                chr(ord("A") + i),
                chr(ord("z") - i),
                "_",
                chr(ord("Z") - i),
                chr(ord("a") + i),
            ]
        )
        entities.append(ScoredEntity(name=name, score=length - i))
    return entities


def format_entity(entity: ScoredEntity) -> str:
    return f"name={entity.name}, score={entity.score}"


def print_entities(
    entities: typing.Iterable[ScoredEntity],
    echo: typing.Callable[[str], None] = print,
):
    for entity in entities:
        echo(format_entity(entity))


def _entity_list_from_data(data: typing.Any) -> typing.List[ScoredEntity]:
    if not isinstance(data, list):
        raise DeserializationError(
            f"Expected a list of entities, got {type(data).__name__}"
        )
    return [ScoredEntity.from_dict(d) for d in data]


ENTITY_LIST_CODEC: JsonCodec[typing.List[ScoredEntity]] = JsonCodec(
    lambda entities: [e.to_dict() for e in entities], _entity_list_from_data
)
