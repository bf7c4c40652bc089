"""
Query-side fields shared by relationship payload types.
"""

from typing import List, Mapping, Optional

from graphql.language import FieldDefinitionNode

from ...core.ast import TypeWrappers, build_field, build_named_type


class RelationshipDirectionField:
    FROM = "from"
    TO = "to"


def build_node_output_fields(
    from_type: str,
    to_type: str,
    wrappers: Optional[Mapping[TypeWrappers, bool]] = None,
) -> List[FieldDefinitionNode]:
    """Build the ``from`` and ``to`` fields selecting both relationship endpoints."""
    return [
        build_field(
            RelationshipDirectionField.FROM, build_named_type(from_type, wrappers)
        ),
        build_field(
            RelationshipDirectionField.TO, build_named_type(to_type, wrappers)
        ),
    ]
