"""
Relationship augmentation package.
"""

from .descriptor import (
    MutationAction,
    RelationshipDescriptor,
    SchemaRegistries,
    auth_verb,
    mutation_label,
)
from .mutation import (
    augment_relationship_mutation_api,
    build_relationship_mutation_name,
)
from .query import RelationshipDirectionField, build_node_output_fields

__all__ = [
    "MutationAction",
    "RelationshipDescriptor",
    "SchemaRegistries",
    "auth_verb",
    "mutation_label",
    "augment_relationship_mutation_api",
    "build_relationship_mutation_name",
    "RelationshipDirectionField",
    "build_node_output_fields",
]
