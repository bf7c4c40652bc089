"""
Relationship descriptors, mutation actions and the registries threaded
through augmentation passes.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, NamedTuple, Optional, Tuple

from graphql.language import (
    FieldDefinitionNode,
    InputValueDefinitionNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
)


class MutationAction(Enum):
    CREATE = "create"
    DELETE = "delete"


_MUTATION_LABELS = {
    MutationAction.CREATE: "Add",
    MutationAction.DELETE: "Remove",
}

_AUTH_VERBS = {
    MutationAction.CREATE: "Create",
    MutationAction.DELETE: "Delete",
}


def mutation_label(action: MutationAction) -> str:
    """Verb prefixed to generated mutation field names."""
    return _MUTATION_LABELS[action]


def auth_verb(action: MutationAction) -> Optional[str]:
    """Verb used in auth scopes, or None when the action has no scope."""
    return _AUTH_VERBS.get(action)


@dataclass(frozen=True)
class RelationshipDescriptor:
    """One use of a relationship type as a field on a node type."""

    type_name: str
    field_name: str
    output_type: str
    from_type: str
    to_type: str
    relationship_name: str
    property_input_values: Tuple[InputValueDefinitionNode, ...] = field(
        default_factory=tuple
    )
    property_output_fields: Tuple[FieldDefinitionNode, ...] = field(
        default_factory=tuple
    )

    def __post_init__(self):
        object.__setattr__(
            self, "property_input_values", tuple(self.property_input_values)
        )
        object.__setattr__(
            self, "property_output_fields", tuple(self.property_output_fields)
        )


class SchemaRegistries(NamedTuple):
    type_definition_map: Dict[str, TypeDefinitionNode]
    generated_type_map: Dict[str, TypeDefinitionNode]
    operation_type_map: Dict[str, ObjectTypeDefinitionNode]
