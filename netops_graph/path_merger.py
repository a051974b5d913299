# /netops_graph/path_merger.py

from typing import Dict, Iterable

from netops_graph.models import Entity, GraphData, GraphEdge, PathSegment


def merge_paths(paths: Iterable[Iterable[PathSegment]]) -> GraphData:
    """
    Folds raw traversal paths into a single deduplicated GraphData.

    Nodes and edges are keyed by id and kept in first-seen order (path order, then segment
    order, start node before end node). The first snapshot observed for an id wins; later
    ones are ignored even if their properties differ. Path boundaries are not preserved.

    Args:
        paths: An iterable of paths, each an iterable of PathSegment.

    Returns:
        A GraphData whose edges only reference ids present in its nodes. No paths gives an
        empty GraphData.
    """
    nodes: Dict[str, Entity] = {}
    edges: Dict[str, GraphEdge] = {}

    for path in paths:
        for segment in path:
            start, relation, end = segment.start, segment.relation, segment.end
            if start.id is None or end.id is None:
                raise ValueError(f"Segment of relation '{relation.id}' contains an unpersisted node.")
            if {relation.source, relation.target} != {start.id, end.id}:
                raise ValueError(
                    f"Relation '{relation.id}' does not connect its segment nodes {start.id} and {end.id}."
                )

            if start.id not in nodes:
                nodes[start.id] = start
            if end.id not in nodes:
                nodes[end.id] = end
            if relation.id not in edges:
                edges[relation.id] = relation

    # GraphData re-checks that every edge endpoint is a recorded node
    return GraphData(nodes=list(nodes.values()), edges=list(edges.values()))
