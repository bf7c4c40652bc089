"""
Relationship mutation generation.

Given one relationship field use-site, builds the ``Add<Type><Field>`` and
``Remove<Type><Field>`` Mutation fields, their payload object types and the
relationship property input type. Registries are never mutated in place:
each call returns new maps that callers thread into the next pass.
"""

import logging
from typing import Any, Dict, List, Mapping, Optional, Union

from graphql.language import (
    DirectiveNode,
    FieldDefinitionNode,
    InputValueDefinitionNode,
    ObjectTypeDefinitionNode,
    TypeDefinitionNode,
)

from ...core.ast import (
    TypeWrappers,
    append_field,
    build_field,
    build_input_object_type,
    build_input_value,
    build_named_type,
    build_object_type,
)
from ...core.directives import (
    AuthScope,
    DirectiveKind,
    build_auth_scope_directive,
    build_mutation_meta_directive,
    build_relation_directive,
    is_cypher_field,
    use_auth_directive,
)
from ...core.exceptions import InvalidRelationshipDescriptor
from ...core.fields import get_field_definition, strip_field_arguments
from ...core.settings import AugmentationSettings
from ..augment import OperationType, should_augment_relationship_field
from .descriptor import (
    MutationAction,
    RelationshipDescriptor,
    SchemaRegistries,
    auth_verb,
    mutation_label,
)
from .query import RelationshipDirectionField, build_node_output_fields

logger = logging.getLogger(__name__)

REQUIRED = {TypeWrappers.NON_NULL_NAMED_TYPE: True}
DATA_ARGUMENT = "data"


def build_relationship_mutation_name(
    action: MutationAction, type_name: str, field_name: str
) -> str:
    """Build the Mutation field name, e.g. ``AddPersonKnows``."""
    if not field_name:
        raise InvalidRelationshipDescriptor(
            "Relationship field name must not be empty",
            type_name=type_name,
            field_name=field_name,
        )
    field_label = field_name[0].upper() + field_name[1:]
    return f"{mutation_label(action)}{type_name}{field_label}"


def build_payload_type_name(mutation_name: str) -> str:
    return f"_{mutation_name}Payload"


def build_input_type_name(type_name: str) -> str:
    return f"_{type_name}Input"


def augment_relationship_mutation_api(
    descriptor: RelationshipDescriptor,
    type_definition_map: Dict[str, TypeDefinitionNode],
    generated_type_map: Dict[str, TypeDefinitionNode],
    operation_type_map: Dict[str, ObjectTypeDefinitionNode],
    config: Union[None, Mapping[str, Any], AugmentationSettings] = None,
) -> SchemaRegistries:
    """
    Add the relationship mutation API for one relationship field.

    Actions run in ``MutationAction`` order. An action is skipped when its
    Mutation field already exists, so repeated calls for the same use-site
    (or for another direction that yields the same name) are no-ops.

    Returns:
        SchemaRegistries with ``type_definition_map`` passed through
        unchanged and new generated/operation type maps.
    """
    settings = AugmentationSettings.coerce(config)
    generated_type_map = dict(generated_type_map)
    operation_type_map = dict(operation_type_map)

    mutation_type_name = OperationType.MUTATION.value
    if mutation_type_name not in operation_type_map:
        logger.debug(
            f"No {mutation_type_name} type, skipping relationship mutations for "
            f"{descriptor.type_name}.{descriptor.field_name}"
        )
        return SchemaRegistries(
            type_definition_map, generated_type_map, operation_type_map
        )
    if not should_augment_relationship_field(
        settings,
        mutation_type_name.lower(),
        descriptor.from_type,
        descriptor.to_type,
    ):
        logger.debug(
            f"Mutations disabled for {descriptor.from_type} -> "
            f"{descriptor.to_type}, skipping {descriptor.relationship_name}"
        )
        return SchemaRegistries(
            type_definition_map, generated_type_map, operation_type_map
        )

    for action in MutationAction:
        mutation_name = build_relationship_mutation_name(
            action, descriptor.type_name, descriptor.field_name
        )
        mutation_type = operation_type_map[mutation_type_name]
        if get_field_definition(mutation_type.fields, mutation_name):
            logger.debug(f"Mutation field {mutation_name} already exists, skipping")
            continue
        operation_type_map, generated_type_map = _build_relationship_mutation_api(
            action,
            mutation_name,
            descriptor,
            generated_type_map,
            operation_type_map,
            settings,
        )
    return SchemaRegistries(type_definition_map, generated_type_map, operation_type_map)


def _build_relationship_mutation_api(
    action: MutationAction,
    mutation_name: str,
    descriptor: RelationshipDescriptor,
    generated_type_map: Dict[str, TypeDefinitionNode],
    operation_type_map: Dict[str, ObjectTypeDefinitionNode],
    settings: AugmentationSettings,
):
    payload_type_name = build_payload_type_name(mutation_name)
    operation_type_map = _build_relationship_mutation_field(
        action,
        mutation_name,
        payload_type_name,
        descriptor,
        operation_type_map,
        settings,
    )
    generated_type_map = _build_relationship_property_input_type(
        action, descriptor, generated_type_map
    )
    generated_type_map = _build_relationship_mutation_payload_type(
        action, payload_type_name, descriptor, generated_type_map
    )
    logger.debug(
        f"Generated {mutation_name} for relationship {descriptor.relationship_name}"
    )
    return operation_type_map, generated_type_map


def _build_relationship_mutation_field(
    action: MutationAction,
    mutation_name: str,
    payload_type_name: str,
    descriptor: RelationshipDescriptor,
    operation_type_map: Dict[str, ObjectTypeDefinitionNode],
    settings: AugmentationSettings,
) -> Dict[str, ObjectTypeDefinitionNode]:
    if action not in (MutationAction.CREATE, MutationAction.DELETE):
        return operation_type_map
    mutation_type_name = OperationType.MUTATION.value
    field = build_field(
        mutation_name,
        build_named_type(payload_type_name),
        args=_build_relationship_mutation_arguments(action, descriptor),
        directives=_build_relationship_mutation_directives(
            action, descriptor, settings
        ),
    )
    operation_type_map[mutation_type_name] = append_field(
        operation_type_map[mutation_type_name], field
    )
    return operation_type_map


def _build_node_selection_arguments(
    from_type: str, to_type: str
) -> List[InputValueDefinitionNode]:
    return [
        build_input_value(
            RelationshipDirectionField.FROM,
            build_named_type(build_input_type_name(from_type), REQUIRED),
        ),
        build_input_value(
            RelationshipDirectionField.TO,
            build_named_type(build_input_type_name(to_type), REQUIRED),
        ),
    ]


def _build_relationship_mutation_arguments(
    action: MutationAction, descriptor: RelationshipDescriptor
) -> List[InputValueDefinitionNode]:
    arguments = _build_node_selection_arguments(
        descriptor.from_type, descriptor.to_type
    )
    # Relationship properties are irrelevant when deleting.
    if action is MutationAction.CREATE and descriptor.property_output_fields:
        arguments.append(
            build_input_value(
                DATA_ARGUMENT,
                build_named_type(
                    build_input_type_name(descriptor.output_type), REQUIRED
                ),
            )
        )
    return arguments


def _build_relationship_mutation_directives(
    action: MutationAction,
    descriptor: RelationshipDescriptor,
    settings: AugmentationSettings,
) -> List[DirectiveNode]:
    directives = [
        build_mutation_meta_directive(
            descriptor.relationship_name, descriptor.from_type, descriptor.to_type
        )
    ]
    if use_auth_directive(settings, DirectiveKind.HAS_SCOPE):
        verb = auth_verb(action)
        if verb:
            directives.append(
                build_auth_scope_directive(
                    [
                        AuthScope(descriptor.from_type, verb),
                        AuthScope(descriptor.to_type, verb),
                    ]
                )
            )
    return directives


def _build_relationship_property_input_type(
    action: MutationAction,
    descriptor: RelationshipDescriptor,
    generated_type_map: Dict[str, TypeDefinitionNode],
) -> Dict[str, TypeDefinitionNode]:
    if action is not MutationAction.CREATE or not descriptor.property_input_values:
        return generated_type_map
    # Computed fields cannot be supplied by a caller.
    input_values = [
        build_input_value(input_value.name.value, input_value.type)
        for input_value in descriptor.property_input_values
        if not is_cypher_field(input_value.directives)
    ]
    input_type_name = build_input_type_name(descriptor.output_type)
    return _register_generated_type(
        generated_type_map,
        build_input_object_type(input_type_name, input_values),
    )


def _build_relationship_mutation_payload_type(
    action: MutationAction,
    payload_type_name: str,
    descriptor: RelationshipDescriptor,
    generated_type_map: Dict[str, TypeDefinitionNode],
) -> Dict[str, TypeDefinitionNode]:
    if action not in (MutationAction.CREATE, MutationAction.DELETE):
        return generated_type_map
    fields: List[FieldDefinitionNode] = build_node_output_fields(
        descriptor.from_type, descriptor.to_type
    )
    if action is MutationAction.CREATE:
        # TODO: keep cypher field arguments once payload translation handles them
        fields.extend(
            strip_field_arguments(field) if is_cypher_field(field.directives) else field
            for field in descriptor.property_output_fields
        )
    payload_type = build_object_type(
        payload_type_name,
        fields,
        directives=[
            build_relation_directive(
                descriptor.relationship_name,
                descriptor.from_type,
                descriptor.to_type,
            )
        ],
    )
    return _register_generated_type(generated_type_map, payload_type)


def _register_generated_type(
    generated_type_map: Dict[str, TypeDefinitionNode],
    definition: TypeDefinitionNode,
) -> Dict[str, TypeDefinitionNode]:
    name = definition.name.value
    existing: Optional[TypeDefinitionNode] = generated_type_map.get(name)
    if existing is not None and existing != definition:
        # Last write wins; distinct relationships mapping to one name are not rejected.
        logger.warning(f"Generated type {name} replaced with a different definition")
    generated_type_map[name] = definition
    return generated_type_map
