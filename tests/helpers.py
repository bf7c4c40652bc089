from graphql import parse, print_ast

from graph_augment.core.ast import build_object_type
from graph_augment.core.fields import field_to_input_value
from graph_augment.generators.relationships import RelationshipDescriptor


def parse_fields(sdl):
    """Return the fields of the first type in ``sdl``."""
    return tuple(parse(sdl).definitions[0].fields)


def make_descriptor(sdl="type Knows { since: Int }", **overrides):
    fields = parse_fields(sdl) if sdl else ()
    values = dict(
        type_name="Person",
        field_name="knows",
        output_type="Knows",
        from_type="Person",
        to_type="Person",
        relationship_name="KNOWS",
        property_input_values=[field_to_input_value(f) for f in fields],
        property_output_fields=fields,
    )
    values.update(overrides)
    return RelationshipDescriptor(**values)


def mutation_registry():
    return {"Mutation": build_object_type("Mutation")}


def field_names(definition):
    return [field.name.value for field in definition.fields]


def argument_signature(field):
    return [(arg.name.value, print_ast(arg.type)) for arg in field.arguments]


def find_field(definition, name):
    for field in definition.fields:
        if field.name.value == name:
            return field
    raise AssertionError(f"{name} not found on {definition.name.value}")
