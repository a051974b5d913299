from dotenv import load_dotenv

from netops_graph.database import Neo4jDatabase


def check_neo4j_connection():
    """
    A simple script to check that the configured Neo4j database is reachable.
    """
    load_dotenv()
    try:
        db_client = Neo4jDatabase()
    except ValueError as e:
        print(f"Error: {e}")
        return False

    try:
        print("Attempting to connect to Neo4j...")
        connected = db_client.verify_connectivity()
    finally:
        db_client.close()

    if connected:
        print("\nSuccess! Connected to Neo4j.")
    else:
        print("\nError: Could not connect to Neo4j. Check that the database is running and NEO4J_URI / credentials are correct.")
    return connected


if __name__ == "__main__":
    check_neo4j_connection()
