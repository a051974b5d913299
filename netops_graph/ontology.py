# /netops_graph/ontology.py

import re

from netops_graph.config import settings
from netops_graph.errors import ValidationError
from netops_graph.models import Ontology

IDENTIFIER_PATTERN = re.compile(r"^[A-Za-z_][A-Za-z0-9_]*$")

FAULT_LABEL = "Fault"
CAUSED_BY = "CAUSED_BY"


def get_default_ontology() -> Ontology:
    """Builds the label / relation-type registry from the configured settings."""
    return Ontology(
        node_types=list(settings.ALLOWED_LABELS),
        edge_labels=list(settings.ALLOWED_RELATION_TYPES),
    )


def _check_identifier(value, kind: str, allowed) -> str:
    if not isinstance(value, str) or not IDENTIFIER_PATTERN.match(value):
        raise ValidationError(f"Malformed {kind} {value!r}: must match {IDENTIFIER_PATTERN.pattern}.")
    if value not in allowed:
        raise ValidationError(f"Unknown {kind} '{value}'. Allowed: {', '.join(allowed)}.")
    return value


def validate_label(label, ontology: Ontology) -> str:
    return _check_identifier(label, "label", ontology.node_types)


def validate_relation_type(relation_type, ontology: Ontology) -> str:
    return _check_identifier(relation_type, "relation type", ontology.edge_labels)


def validate_depth(depth, maximum: int) -> int:
    # bool is an int subclass; reject it explicitly
    if isinstance(depth, bool) or not isinstance(depth, int):
        raise ValidationError(f"Depth must be an integer, got {depth!r}.")
    if depth < 1:
        raise ValidationError(f"Depth must be at least 1, got {depth}.")
    if depth > maximum:
        raise ValidationError(f"Depth {depth} exceeds the maximum of {maximum}.")
    return depth


def primary_label(labels, ontology: Ontology) -> str:
    """
    Picks the label used for rendering when a node carries several.
    Store label sets are unordered, so registered labels win and ties are broken alphabetically.
    """
    ordered = sorted(labels)
    for label in ordered:
        if label in ontology.node_types:
            return label
    return ordered[0] if ordered else ""
