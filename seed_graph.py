# /seed_graph.py

from dotenv import load_dotenv

from netops_graph.database import Neo4jDatabase
from netops_graph.models import Entity, Relation
from netops_graph.service import KnowledgeGraphService


def seed(service: KnowledgeGraphService):
    """
    Writes a minimal fault scenario: a link-down fault caused by a fiber cut, solved by a splice.
    Returns the created fault entity.
    """
    fault = service.create_entity(Entity(
        label="Fault", type="link",
        properties={"name": "LinkDown", "description": "Optical link between core routers is down"},
    ))
    root_cause = service.create_entity(Entity(
        label="RootCause", type="physical",
        properties={"name": "FiberCut", "description": "Fiber cut on the metro ring"},
    ))
    solution = service.create_entity(Entity(
        label="Solution", type="field-work",
        properties={"name": "FiberSplice", "description": "Dispatch a crew to splice the fiber"},
    ))

    service.create_relation(Relation(type="CAUSED_BY", start_node=fault.id, end_node=root_cause.id,
                                     properties={"weight": 0.9}))
    service.create_relation(Relation(type="SOLVED_BY", start_node=root_cause.id, end_node=solution.id))
    return fault


def main():
    """
    Seeds the knowledge graph with a sample scenario and prints its fault chain.
    """
    load_dotenv()
    db_client = Neo4jDatabase()
    try:
        service = KnowledgeGraphService(db_client)
        fault = seed(service)

        graph = service.analyze_fault_path(fault.id)
        print("\n--- Fault Path ---")
        for edge in graph.edges:
            print(f"  {edge.source} -[{edge.type}]-> {edge.target}")

        related = service.query_related_entities(fault.id, 2)
        print(f"\nEntities within 2 hops: {[node.name for node in related.nodes]}")
    finally:
        db_client.close()
        print("Database connection closed.")


if __name__ == '__main__':
    main()
