"""
Schema driver for relationship mutation augmentation.

Reads SDL type definitions into registries, finds every relationship field
use-site on node types, and folds the resulting descriptors through the
relationship mutation pass one at a time.

Example:
    type Person {
        name: String
        knows: [Knows]
    }

    type Knows @relation(name: "KNOWS") {
        from: Person
        to: Person
        since: Int
    }

    type Mutation {
        noop: Boolean
    }

gains ``AddPersonKnows``/``RemovePersonKnows`` on ``Mutation`` together with
``_KnowsInput``, ``_AddPersonKnowsPayload`` and ``_RemovePersonKnowsPayload``.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from graphql import GraphQLSyntaxError, parse, print_ast
from graphql.language import (
    DocumentNode,
    FieldDefinitionNode,
    ObjectTypeDefinitionNode,
    ObjectTypeExtensionNode,
    SchemaDefinitionNode,
    TypeDefinitionNode,
)

from ..generators.augment import OperationType
from ..generators.relationships import (
    RelationshipDescriptor,
    RelationshipDirectionField,
    SchemaRegistries,
    augment_relationship_mutation_api,
)
from .ast import build_document, merge_object_type_extension
from .directives import (
    DirectiveKind,
    RelationDirective,
    get_directive,
    is_cypher_field,
)
from .exceptions import SchemaDocumentError
from .fields import field_to_input_value, get_field_definition, unwrap_named_type
from .settings import AugmentationSettings

logger = logging.getLogger(__name__)

DIRECTION_IN = "IN"
_ENDPOINT_FIELDS = (RelationshipDirectionField.FROM, RelationshipDirectionField.TO)


def _parse(type_defs: str) -> DocumentNode:
    try:
        return parse(type_defs)
    except GraphQLSyntaxError as e:
        raise SchemaDocumentError(
            f"Could not parse type definitions: {e.message}"
        ) from e


def _operation_type_names(document: DocumentNode) -> Dict[str, str]:
    """Map declared root type names to their OperationType value."""
    names = {operation.value: operation.value for operation in OperationType}
    for definition in document.definitions:
        if isinstance(definition, SchemaDefinitionNode):
            names = {}
            for operation_type in definition.operation_types:
                operation = operation_type.operation.value.capitalize()
                names[operation_type.type.name.value] = operation
    return names


def _object_type_extensions(
    document: DocumentNode,
) -> Dict[str, List[ObjectTypeExtensionNode]]:
    """Group ``extend type`` nodes whose base type is defined in ``document``."""
    defined = {
        definition.name.value
        for definition in document.definitions
        if isinstance(definition, ObjectTypeDefinitionNode)
    }
    extensions: Dict[str, List[ObjectTypeExtensionNode]] = {}
    for definition in document.definitions:
        if not isinstance(definition, ObjectTypeExtensionNode):
            continue
        name = definition.name.value
        if name in defined:
            extensions.setdefault(name, []).append(definition)
    return extensions


def build_registries(document: DocumentNode) -> SchemaRegistries:
    """
    Split a document into type definitions and operation types.

    Object type extensions are folded into the definitions they extend.
    """
    root_names = _operation_type_names(document)
    extensions = _object_type_extensions(document)
    for definition in document.definitions:
        if (
            isinstance(definition, ObjectTypeExtensionNode)
            and definition.name.value not in extensions
        ):
            logger.warning(
                f"extend type {definition.name.value} has no base definition, "
                f"its fields are not augmented"
            )
    type_definition_map: Dict[str, TypeDefinitionNode] = {}
    operation_type_map: Dict[str, ObjectTypeDefinitionNode] = {}
    for definition in document.definitions:
        if not isinstance(definition, TypeDefinitionNode):
            continue
        name = definition.name.value
        if isinstance(definition, ObjectTypeDefinitionNode):
            for extension in extensions.get(name, ()):
                definition = merge_object_type_extension(definition, extension)
            if name in root_names:
                operation_type_map[root_names[name]] = definition
                continue
        type_definition_map[name] = definition
    return SchemaRegistries(type_definition_map, {}, operation_type_map)


def _relationship_types(
    type_definition_map: Mapping[str, TypeDefinitionNode]
) -> Dict[str, ObjectTypeDefinitionNode]:
    relationship_types = {}
    for name, definition in type_definition_map.items():
        if not isinstance(definition, ObjectTypeDefinitionNode):
            continue
        directive = get_directive(definition.directives, DirectiveKind.RELATION)
        if directive is None:
            continue
        if not RelationDirective.from_node(directive).relationship_name:
            raise SchemaDocumentError(
                f"@relation on relationship type {name} requires a name",
                type_name=name,
            )
        for endpoint in _ENDPOINT_FIELDS:
            if not get_field_definition(definition.fields, endpoint):
                raise SchemaDocumentError(
                    f"Relationship type {name} must define a '{endpoint}' field",
                    type_name=name,
                )
        relationship_types[name] = definition
    return relationship_types


def _relationship_type_descriptor(
    type_name: str,
    field: FieldDefinitionNode,
    relationship_type: ObjectTypeDefinitionNode,
) -> RelationshipDescriptor:
    relation = RelationDirective.from_node(
        get_directive(relationship_type.directives, DirectiveKind.RELATION)
    )
    properties = [
        property_field
        for property_field in relationship_type.fields
        if property_field.name.value not in _ENDPOINT_FIELDS
    ]
    return RelationshipDescriptor(
        type_name=type_name,
        field_name=field.name.value,
        output_type=relationship_type.name.value,
        from_type=unwrap_named_type(
            get_field_definition(relationship_type.fields, "from").type
        ),
        to_type=unwrap_named_type(
            get_field_definition(relationship_type.fields, "to").type
        ),
        relationship_name=relation.relationship_name,
        property_input_values=[field_to_input_value(p) for p in properties],
        property_output_fields=properties,
    )


def _relation_field_descriptor(
    type_name: str, field: FieldDefinitionNode
) -> Optional[RelationshipDescriptor]:
    directive = get_directive(field.directives, DirectiveKind.RELATION)
    if directive is None:
        return None
    relation = RelationDirective.from_node(directive)
    relationship_name = relation.relationship_name
    if not relationship_name:
        raise SchemaDocumentError(
            f"@relation on {type_name}.{field.name.value} requires a name",
            type_name=type_name,
        )
    related_type = unwrap_named_type(field.type)
    direction = (relation.direction or "OUT").upper()
    if direction == DIRECTION_IN:
        from_type, to_type = related_type, type_name
    else:
        from_type, to_type = type_name, related_type
    return RelationshipDescriptor(
        type_name=type_name,
        field_name=field.name.value,
        output_type=related_type,
        from_type=from_type,
        to_type=to_type,
        relationship_name=relationship_name,
    )


def collect_relationship_descriptors(
    type_definition_map: Mapping[str, TypeDefinitionNode]
) -> List[RelationshipDescriptor]:
    """Return descriptors for every relationship field on a node type, in order."""
    relationship_types = _relationship_types(type_definition_map)
    descriptors = []
    for type_name, definition in type_definition_map.items():
        if not isinstance(definition, ObjectTypeDefinitionNode):
            continue
        if type_name in relationship_types:
            continue
        for field in definition.fields or ():
            if is_cypher_field(field.directives):
                continue
            named_type = unwrap_named_type(field.type)
            if named_type in relationship_types:
                descriptors.append(
                    _relationship_type_descriptor(
                        type_name, field, relationship_types[named_type]
                    )
                )
                continue
            related = type_definition_map.get(named_type)
            if isinstance(related, ObjectTypeDefinitionNode):
                descriptor = _relation_field_descriptor(type_name, field)
                if descriptor is not None:
                    descriptors.append(descriptor)
    return descriptors


def augment_registries(
    registries: SchemaRegistries,
    config: Union[None, Mapping[str, Any], AugmentationSettings] = None,
) -> SchemaRegistries:
    settings = AugmentationSettings.coerce(config)
    descriptors = collect_relationship_descriptors(registries.type_definition_map)
    logger.debug(f"Found {len(descriptors)} relationship fields to augment")
    for descriptor in descriptors:
        registries = augment_relationship_mutation_api(
            descriptor,
            registries.type_definition_map,
            registries.generated_type_map,
            registries.operation_type_map,
            settings,
        )
    return registries


def _rebuild_document(
    document: DocumentNode, registries: SchemaRegistries
) -> DocumentNode:
    root_names = _operation_type_names(document)
    merged = _object_type_extensions(document)
    definitions = []
    for definition in document.definitions:
        if isinstance(definition, ObjectTypeDefinitionNode):
            name = definition.name.value
            operation = root_names.get(name)
            if operation in registries.operation_type_map:
                definitions.append(registries.operation_type_map[operation])
            else:
                definitions.append(
                    registries.type_definition_map.get(name, definition)
                )
        elif (
            isinstance(definition, ObjectTypeExtensionNode)
            and definition.name.value in merged
        ):
            continue
        else:
            definitions.append(definition)
    definitions.extend(registries.generated_type_map.values())
    return build_document(definitions)


def augment_type_definitions(
    type_defs: str,
    config: Union[None, Mapping[str, Any], AugmentationSettings] = None,
) -> DocumentNode:
    """Parse ``type_defs`` and return the document with relationship mutations added."""
    document = _parse(type_defs)
    registries = augment_registries(build_registries(document), config)
    return _rebuild_document(document, registries)


def augment_schema_sdl(
    type_defs: str,
    config: Union[None, Mapping[str, Any], AugmentationSettings] = None,
) -> str:
    return print_ast(augment_type_definitions(type_defs, config))

