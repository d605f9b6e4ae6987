from triedex.lib.entities import ENTITY_LIST_CODEC
from triedex.lib.entities import ScoreKey
from triedex.lib.entities import ScoredEntity
from triedex.lib.entities import compare_entities_by_score
from triedex.lib.entities import format_entity
from triedex.lib.entities import generate_entities
from triedex.lib.entities import print_entities
from triedex.lib.entities import sort_entities
from triedex.lib.errors import DeserializationError
from triedex.lib.errors import InvalidArgument
from tests.base import BaseTestCase


class CompareEntitiesByScoreTestCase(BaseTestCase):
    def test_both_none(self):
        self.assertEqual(0, compare_entities_by_score(None, None))

    def test_first_none(self):
        self.assertEqual(-1, compare_entities_by_score(None, ScoredEntity()))

    def test_second_none(self):
        self.assertEqual(1, compare_entities_by_score(ScoredEntity(), None))

    def test_equal(self):
        self.assertEqual(0, compare_entities_by_score(ScoredEntity(), ScoredEntity()))

    def test_first_greater(self):
        self.assertEqual(
            1, compare_entities_by_score(ScoredEntity(score=2), ScoredEntity(score=1))
        )

    def test_second_greater(self):
        self.assertEqual(
            -1, compare_entities_by_score(ScoredEntity(score=1), ScoredEntity(score=2))
        )

    def test_score_key(self):
        self.assertEqual(ScoreKey(None), ScoreKey(None))
        self.assertLess(ScoreKey(None), ScoreKey(ScoredEntity(score=-5)))
        self.assertGreater(ScoreKey(ScoredEntity(score=3)), ScoreKey(None))
        self.assertEqual(
            ScoreKey(ScoredEntity(name="a", score=3)),
            ScoreKey(ScoredEntity(name="b", score=3)),
        )
        self.assertLessEqual(
            ScoreKey(ScoredEntity(score=1)), ScoreKey(ScoredEntity(score=2))
        )


class EntitiesTestCase(BaseTestCase):
    def test_generate_entities(self):
        entities = generate_entities(20)
        self.assertEqual(20, len(entities))
        self.assertEqual(ScoredEntity(name="Az_Za", score=20), entities[0])
        self.assertEqual(ScoredEntity(name="Hs_Sh", score=13), entities[7])
        self.assertEqual(ScoredEntity(name="Sh_Hs", score=2), entities[18])
        self.assertEqual(ScoredEntity(name="Tg_Gt", score=1), entities[19])

    def test_generate_entities_limits(self):
        self.assertListEqual([], generate_entities(0))
        self.assertEqual("Za_Az", generate_entities(26)[-1].name)
        for length in [-1, 27]:
            with self.subTest(length=length):
                with self.assertRaises(InvalidArgument):
                    generate_entities(length)

    def test_sort_entities(self):
        a = ScoredEntity(name="a", score=3)
        b = ScoredEntity(name="b", score=1)
        c = ScoredEntity(name="c", score=3)
        self.assertListEqual([None, b, a, c], sort_entities([a, None, b, c]))

    def test_sort_generated_entities(self):
        entities = sort_entities(generate_entities(5))
        self.assert_names(["Ev_Ve", "Dw_Wd", "Cx_Xc", "By_Yb", "Az_Za"], entities)

    def test_format_entity(self):
        self.assertEqual(
            "name=Az_Za, score=20", format_entity(ScoredEntity("Az_Za", 20))
        )

    def test_print_entities(self):
        lines = []
        print_entities(generate_entities(2), echo=lines.append)
        self.assertListEqual(["name=Az_Za, score=2", "name=By_Yb, score=1"], lines)

    def test_codec_round_trip(self):
        entities = generate_entities(20)
        decoded = ENTITY_LIST_CODEC.decode(ENTITY_LIST_CODEC.encode(entities))
        self.assertListEqual(entities, decoded)

    def test_codec_errors(self):
        test_cases = [
            "",
            '{"name": "a", "score": 1}',
            '[{"name": "a"}]',
            '[{"name": 1, "score": 1}]',
            '[{"name": "a", "score": 1.5}]',
            '[{"name": "a", "score": true}]',
            "[1]",
        ]
        for text in test_cases:
            with self.subTest(text=text):
                with self.assertRaises(DeserializationError):
                    ENTITY_LIST_CODEC.decode(text)
