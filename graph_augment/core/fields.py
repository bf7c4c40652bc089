"""
Helpers for reading and rewriting field definitions.
"""

from typing import Iterable, Optional, Union

from graphql.language import (
    FieldDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    NonNullTypeNode,
    TypeNode,
)

from .ast import build_input_value

FieldNode = Union[FieldDefinitionNode, InputValueDefinitionNode]


def get_field_definition(
    fields: Optional[Iterable[FieldNode]], name: str
) -> Optional[FieldNode]:
    for field in fields or ():
        if field.name.value == name:
            return field
    return None


def unwrap_named_type(type_node: TypeNode) -> str:
    """Return the name of the named type inside any list/non-null wrappers."""
    while isinstance(type_node, (NonNullTypeNode, ListTypeNode)):
        type_node = type_node.type
    return type_node.name.value


def strip_field_arguments(field: FieldDefinitionNode) -> FieldDefinitionNode:
    return FieldDefinitionNode(
        name=field.name,
        type=field.type,
        arguments=(),
        directives=tuple(field.directives or ()),
        description=field.description,
    )


def field_to_input_value(field: FieldDefinitionNode) -> InputValueDefinitionNode:
    """
    Convert an output field into an input value of the same name and type.

    Directives are kept so callers can still tell computed fields apart.
    """
    return build_input_value(
        field.name.value, field.type, directives=field.directives or ()
    )
