"""
Builders for graphql-core language AST nodes.

Every builder returns a fresh node and never mutates its inputs. Sequences
are stored as tuples so that built nodes compare equal to parsed ones.
"""

from enum import Enum
from typing import Iterable, Mapping, Optional

from graphql.language import (
    ArgumentNode,
    DirectiveNode,
    DocumentNode,
    EnumValueNode,
    FieldDefinitionNode,
    InputObjectTypeDefinitionNode,
    InputValueDefinitionNode,
    ListTypeNode,
    ListValueNode,
    NamedTypeNode,
    NameNode,
    NonNullTypeNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    StringValueNode,
    TypeNode,
)


class TypeWrappers(Enum):
    """Wrappers applied around a named type, innermost first."""

    NON_NULL_NAMED_TYPE = "non_null_named_type"
    LIST_TYPE = "list_type"
    NON_NULL_LIST_TYPE = "non_null_list_type"


def build_name(name: str) -> NameNode:
    return NameNode(value=name)


def build_named_type(
    name: str, wrappers: Optional[Mapping[TypeWrappers, bool]] = None
) -> TypeNode:
    """
    Build a type reference for ``name``.

    Example: ``build_named_type("Person", {TypeWrappers.NON_NULL_NAMED_TYPE: True})``
    is ``Person!``; adding ``LIST_TYPE`` and ``NON_NULL_LIST_TYPE`` gives
    ``[Person!]!``.
    """
    wrappers = wrappers or {}
    type_node: TypeNode = NamedTypeNode(name=build_name(name))
    if wrappers.get(TypeWrappers.NON_NULL_NAMED_TYPE):
        type_node = NonNullTypeNode(type=type_node)
    if wrappers.get(TypeWrappers.LIST_TYPE):
        type_node = ListTypeNode(type=type_node)
        if wrappers.get(TypeWrappers.NON_NULL_LIST_TYPE):
            type_node = NonNullTypeNode(type=type_node)
    return type_node


def build_string_value(value: str) -> StringValueNode:
    return StringValueNode(value=value, block=False)


def build_list_value(values: Iterable) -> ListValueNode:
    return ListValueNode(values=tuple(values))


def build_enum_value(value: str) -> EnumValueNode:
    return EnumValueNode(value=value)


def build_directive_argument(name: str, value) -> ArgumentNode:
    return ArgumentNode(name=build_name(name), value=value)


def build_directive(
    name: str, args: Iterable[ArgumentNode] = ()
) -> DirectiveNode:
    return DirectiveNode(name=build_name(name), arguments=tuple(args))


def build_input_value(
    name: str,
    type_node: TypeNode,
    directives: Iterable[DirectiveNode] = (),
    description: Optional[StringValueNode] = None,
) -> InputValueDefinitionNode:
    return InputValueDefinitionNode(
        name=build_name(name),
        type=type_node,
        default_value=None,
        directives=tuple(directives),
        description=description,
    )


def build_field(
    name: str,
    type_node: TypeNode,
    args: Iterable[InputValueDefinitionNode] = (),
    directives: Iterable[DirectiveNode] = (),
    description: Optional[StringValueNode] = None,
) -> FieldDefinitionNode:
    return FieldDefinitionNode(
        name=build_name(name),
        type=type_node,
        arguments=tuple(args),
        directives=tuple(directives),
        description=description,
    )


def build_object_type(
    name: str,
    fields: Iterable[FieldDefinitionNode] = (),
    directives: Iterable[DirectiveNode] = (),
    interfaces: Iterable[NamedTypeNode] = (),
    description: Optional[StringValueNode] = None,
) -> ObjectTypeDefinitionNode:
    return ObjectTypeDefinitionNode(
        name=build_name(name),
        interfaces=tuple(interfaces),
        directives=tuple(directives),
        fields=tuple(fields),
        description=description,
    )


def build_input_object_type(
    name: str,
    fields: Iterable[InputValueDefinitionNode] = (),
    directives: Iterable[DirectiveNode] = (),
    description: Optional[StringValueNode] = None,
) -> InputObjectTypeDefinitionNode:
    return InputObjectTypeDefinitionNode(
        name=build_name(name),
        directives=tuple(directives),
        fields=tuple(fields),
        description=description,
    )


def append_field(
    object_type: ObjectTypeDefinitionNode, field: FieldDefinitionNode
) -> ObjectTypeDefinitionNode:
    """Return a copy of ``object_type`` with ``field`` added after its own fields."""
    return ObjectTypeDefinitionNode(
        name=object_type.name,
        interfaces=tuple(object_type.interfaces or ()),
        directives=tuple(object_type.directives or ()),
        fields=tuple(object_type.fields or ()) + (field,),
        description=object_type.description,
    )


def merge_object_type_extension(
    object_type: ObjectTypeDefinitionNode, extension: ObjectTypeExtensionNode
) -> ObjectTypeDefinitionNode:
    """Fold an ``extend type`` node into the definition it extends."""
    return ObjectTypeDefinitionNode(
        name=object_type.name,
        interfaces=tuple(object_type.interfaces or ())
        + tuple(extension.interfaces or ()),
        directives=tuple(object_type.directives or ())
        + tuple(extension.directives or ()),
        fields=tuple(object_type.fields or ()) + tuple(extension.fields or ()),
        description=object_type.description,
    )


def build_document(definitions: Iterable) -> DocumentNode:
    return DocumentNode(definitions=tuple(definitions))
