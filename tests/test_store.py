import unittest
from unittest.mock import MagicMock

# Adjust the path to import from the project root
import sys
import os
sys.path.append(os.path.abspath(os.path.join(os.path.dirname(__file__), '..')))
sys.path.append(os.path.dirname(os.path.abspath(__file__)))

from graph_fakes import FakeNode, FakeRelationship, FakeResult, make_db
from netops_graph.errors import ConnectivityError, NotFoundError, ValidationError
from netops_graph.models import Entity, Relation
from netops_graph.store import CAUSED_BY_REACHES_QUERY, RESOLVE_ENDPOINTS_QUERY, EntityStore, RelationStore


def created_node_tx(element_id="4:db:1"):
    """A transaction whose CREATE echoes the written properties back as a node."""
    tx = MagicMock()

    def run(query, props=None, entity_type=None, **kwargs):
        label = query.split("`")[1]
        return FakeResult([{"n": FakeNode(element_id, [label], type=entity_type, **props)}])

    tx.run.side_effect = run
    return tx


class TestEntityStore(unittest.TestCase):

    def test_create_entity_sets_timestamps_and_returns_id(self):
        # --- Arrange ---
        tx = created_node_tx()
        db = make_db(tx)
        store = EntityStore(db)

        # --- Act ---
        created = store.create_entity(Entity(label="Fault", type="link", properties={"name": "LinkDown"}))

        # --- Assert ---
        self.assertEqual(created.id, "4:db:1")
        self.assertEqual(created.label, "Fault")
        self.assertEqual(created.labels, ["Fault"])
        self.assertEqual(created.type, "link")
        self.assertEqual(created.properties["name"], "LinkDown")
        self.assertIn("createdAt", created.properties)
        self.assertEqual(created.properties["createdAt"], created.properties["updatedAt"])
        db.execute_write.assert_called_once()
        db.execute_read.assert_not_called()
        query = tx.run.call_args[0][0]
        self.assertIn("CREATE (n:`Fault` $props)", query)

    def test_existing_created_at_is_kept(self):
        store = EntityStore(make_db(created_node_tx()))

        created = store.create_entity(Entity(
            label="Device", properties={"name": "core-r1", "createdAt": "2020-01-01T00:00:00+00:00"}
        ))

        self.assertEqual(created.properties["createdAt"], "2020-01-01T00:00:00+00:00")
        self.assertNotEqual(created.properties["updatedAt"], "2020-01-01T00:00:00+00:00")

    def test_caller_entity_is_not_mutated(self):
        store = EntityStore(make_db(created_node_tx()))
        entity = Entity(label="Device", properties={"name": "core-r1"})

        store.create_entity(entity)

        self.assertEqual(entity.properties, {"name": "core-r1"})

    def test_invalid_entities_are_rejected_before_any_store_call(self):
        cases = [
            Entity(label="Unknown", properties={"name": "x"}),
            Entity(label="Fault`) DETACH DELETE (m", properties={"name": "x"}),
            Entity(label="Fault", properties={}),
            Entity(label="Fault", properties={"name": "   "}),
            Entity(label="Fault", properties={"name": "x", "type": "shadow"}),
            Entity(label="Fault", properties={"name": "x", "nested": {"a": 1}}),
        ]
        for entity in cases:
            with self.subTest(entity=entity):
                db = make_db(MagicMock())
                with self.assertRaises(ValidationError):
                    EntityStore(db).create_entity(entity)
                db.execute_write.assert_not_called()

    def test_missing_node_in_result_is_a_connectivity_error(self):
        tx = MagicMock()
        tx.run.return_value = FakeResult([])
        with self.assertRaises(ConnectivityError):
            EntityStore(make_db(tx)).create_entity(Entity(label="Fault", properties={"name": "LinkDown"}))


class TestRelationStore(unittest.TestCase):

    def setUp(self):
        self.fault = FakeNode("4:db:1", ["Fault"], name="LinkDown")
        self.cause = FakeNode("4:db:2", ["RootCause"], name="FiberCut")
        self.existing_ids = {"4:db:1", "4:db:2"}
        self.reaches = False
        self.tx = MagicMock()
        self.tx.run.side_effect = self._run
        self.db = make_db(self.tx)
        self.store = RelationStore(self.db)

    def _run(self, query, **params):
        if query == RESOLVE_ENDPOINTS_QUERY:
            return FakeResult([{"id": node_id} for node_id in params["ids"] if node_id in self.existing_ids])
        if query == CAUSED_BY_REACHES_QUERY:
            return FakeResult([{"reaches": self.reaches}])
        rel_type = query.split("`")[1]
        rel = FakeRelationship("5:db:9", rel_type, self.fault, self.cause, **params["props"])
        return FakeResult([{"r": rel, "start": self.fault, "end": self.cause}])

    def _create_queries(self):
        return [c[0][0] for c in self.tx.run.call_args_list if "CREATE" in c[0][0]]

    def test_create_relation_returns_resolved_endpoints(self):
        created = self.store.create_relation(
            Relation(type="CAUSED_BY", startNode="4:db:1", endNode="4:db:2", properties={"weight": 0.8})
        )

        self.assertEqual(created.id, "5:db:9")
        self.assertEqual(created.type, "CAUSED_BY")
        self.assertEqual((created.start_node, created.end_node), ("4:db:1", "4:db:2"))
        self.assertEqual(created.properties["weight"], 0.8)
        self.assertIn("timestamp", created.properties)
        self.assertEqual(len(self._create_queries()), 1)
        self.assertIn("-[r:`CAUSED_BY` $props]->", self._create_queries()[0])

    def test_given_timestamp_is_kept(self):
        created = self.store.create_relation(Relation(
            type="SOLVED_BY", start_node="4:db:1", end_node="4:db:2", properties={"timestamp": "2024-05-01T00:00:00+00:00"}
        ))
        self.assertEqual(created.properties["timestamp"], "2024-05-01T00:00:00+00:00")

    def test_missing_start_node_fails_without_writing(self):
        with self.assertRaises(NotFoundError) as ctx:
            self.store.create_relation(Relation(type="CAUSED_BY", start_node="4:db:404", end_node="4:db:2"))

        self.assertEqual(ctx.exception.missing_ids, ["4:db:404"])
        self.assertEqual(self._create_queries(), [])

    def test_both_endpoints_missing_are_reported(self):
        self.existing_ids = set()
        with self.assertRaises(NotFoundError) as ctx:
            self.store.create_relation(Relation(type="CONTAINS", start_node="a", end_node="b"))
        self.assertEqual(ctx.exception.missing_ids, ["a", "b"])

    def test_caused_by_edge_closing_a_cycle_is_rejected(self):
        self.reaches = True
        with self.assertRaises(ValidationError):
            self.store.create_relation(Relation(type="CAUSED_BY", start_node="4:db:1", end_node="4:db:2"))
        self.assertEqual(self._create_queries(), [])

    def test_caused_by_self_loop_is_rejected(self):
        with self.assertRaises(ValidationError):
            self.store.create_relation(Relation(type="CAUSED_BY", start_node="4:db:1", end_node="4:db:1"))
        self.assertEqual(self._create_queries(), [])

    def test_cycle_check_only_applies_to_caused_by(self):
        self.reaches = True
        self.store.create_relation(Relation(type="CONNECTED_TO", start_node="4:db:1", end_node="4:db:2"))
        queries = [c[0][0] for c in self.tx.run.call_args_list]
        self.assertNotIn(CAUSED_BY_REACHES_QUERY, queries)

    def test_invalid_relations_are_rejected_before_any_store_call(self):
        cases = [
            Relation(type="DESTROYS", start_node="4:db:1", end_node="4:db:2"),
            Relation(type="CAUSED_BY]->() DELETE (x", start_node="4:db:1", end_node="4:db:2"),
            Relation(type="CAUSED_BY", start_node="4:db:1", end_node="4:db:2", properties={"weight": "high"}),
        ]
        for relation in cases:
            with self.subTest(relation=relation):
                with self.assertRaises(ValidationError):
                    self.store.create_relation(relation)
        self.db.execute_write.assert_not_called()


if __name__ == '__main__':
    unittest.main()
