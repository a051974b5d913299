import unittest
from unittest.mock import MagicMock

# Adjust the path to import from the project root
import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from graph_fakes import FakeNode, FakeResult, make_db
from netops_graph.errors import ValidationError
from netops_graph.search import SEARCH_QUERY, SearchIndex


class TestSearchIndex(unittest.TestCase):

    def setUp(self):
        self.tx = MagicMock()
        self.db = make_db(self.tx)
        self.index = SearchIndex(self.db, limit=20)

    def test_blank_keyword_matches_nothing_without_querying(self):
        for keyword in ("", "   ", None):
            with self.subTest(keyword=keyword):
                self.assertEqual(self.index.search_entities(keyword), [])
        self.db.execute_read.assert_not_called()

    def test_results_carry_full_label_set(self):
        # --- Arrange ---
        self.tx.run.return_value = FakeResult([
            {"n": FakeNode("4:db:1", ["Fault", "Alarm"], name="LinkDown", type="link")},
            {"n": FakeNode("4:db:7", ["Solution"], name="Relink", description="Bring the link up")},
        ])

        # --- Act ---
        results = self.index.search_entities("Link")

        # --- Assert ---
        self.tx.run.assert_called_once_with(SEARCH_QUERY, keyword="Link", limit=20)
        self.assertEqual([entity.id for entity in results], ["4:db:1", "4:db:7"])
        self.assertEqual(results[0].labels, ["Alarm", "Fault"])
        self.assertEqual(results[0].label, "Alarm")
        self.assertEqual(results[0].type, "link")
        self.assertEqual(results[1].properties["description"], "Bring the link up")
        self.db.execute_read.assert_called_once()
        self.db.execute_write.assert_not_called()

    def test_query_matches_name_and_description_with_limit(self):
        self.assertIn("n.name CONTAINS $keyword", SEARCH_QUERY)
        self.assertIn("n.description CONTAINS $keyword", SEARCH_QUERY)
        self.assertIn("LIMIT $limit", SEARCH_QUERY)

    def test_non_string_keyword_is_rejected(self):
        with self.assertRaises(ValidationError):
            self.index.search_entities(42)


if __name__ == '__main__':
    unittest.main()
