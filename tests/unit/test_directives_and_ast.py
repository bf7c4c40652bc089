import pytest
from graphql import parse, print_ast

from graph_augment.core.ast import (
    TypeWrappers,
    append_field,
    build_field,
    build_named_type,
    build_object_type,
)
from graph_augment.core.directives import (
    AuthScope,
    AuthScopeDirective,
    DirectiveKind,
    MutationMetaDirective,
    RelationDirective,
    build_auth_scope_directive,
    build_mutation_meta_directive,
    build_relation_directive,
    get_directive,
    is_cypher_field,
    read_directive,
    use_auth_directive,
)
from graph_augment.core.fields import (
    get_field_definition,
    strip_field_arguments,
    unwrap_named_type,
)
from graph_augment.core.settings import AugmentationSettings

pytestmark = pytest.mark.unit


class TestAstBuilders:
    @pytest.mark.parametrize(
        "wrappers, expected",
        [
            (None, "Person"),
            ({TypeWrappers.NON_NULL_NAMED_TYPE: True}, "Person!"),
            ({TypeWrappers.LIST_TYPE: True}, "[Person]"),
            (
                {
                    TypeWrappers.NON_NULL_NAMED_TYPE: True,
                    TypeWrappers.LIST_TYPE: True,
                    TypeWrappers.NON_NULL_LIST_TYPE: True,
                },
                "[Person!]!",
            ),
        ],
    )
    def test_build_named_type(self, wrappers, expected):
        assert print_ast(build_named_type("Person", wrappers)) == expected

    def test_append_field_returns_new_node(self):
        mutation = build_object_type("Mutation")
        field = build_field("ping", build_named_type("Boolean"))

        extended = append_field(mutation, field)

        assert extended is not mutation
        assert mutation.fields == ()
        assert [f.name.value for f in extended.fields] == ["ping"]
        assert print_ast(extended) == "type Mutation {\n  ping: Boolean\n}"

    def test_field_helpers(self):
        person = parse(
            'type Person { friends(first: Int): [Person!]! @cypher(statement: "x") name: String }'
        ).definitions[0]

        friends = get_field_definition(person.fields, "friends")
        assert unwrap_named_type(friends.type) == "Person"
        assert get_field_definition(person.fields, "missing") is None

        stripped = strip_field_arguments(friends)
        assert tuple(stripped.arguments) == ()
        assert is_cypher_field(stripped.directives)
        assert len(friends.arguments) == 1


class TestDirectiveModel:
    def test_relation_directive_prints_and_reads_back(self):
        node = build_relation_directive("KNOWS", "Person", "Movie")

        assert print_ast(node) == '@relation(name: "KNOWS", from: "Person", to: "Movie")'
        assert read_directive(node) == RelationDirective("KNOWS", "Person", "Movie")

    def test_mutation_meta_directive(self):
        node = build_mutation_meta_directive("KNOWS", "Person", "Movie")

        assert (
            print_ast(node)
            == '@MutationMeta(relationship: "KNOWS", from: "Person", to: "Movie")'
        )
        assert read_directive(node) == MutationMetaDirective("KNOWS", "Person", "Movie")

    def test_auth_scope_directive(self):
        node = build_auth_scope_directive(
            [AuthScope("Person", "Create"), AuthScope("Movie", "Create")]
        )

        assert print_ast(node) == '@hasScope(scopes: ["Person: Create", "Movie: Create"])'
        assert read_directive(node) == AuthScopeDirective(
            (AuthScope("Person", "Create"), AuthScope("Movie", "Create"))
        )

    def test_relation_field_directive_with_direction(self):
        field = parse(
            'type Movie { actors: [Person] @relation(name: "ACTED_IN", direction: IN) }'
        ).definitions[0].fields[0]

        relation = read_directive(field.directives[0])
        assert relation.relationship_name == "ACTED_IN"
        assert relation.direction == "IN"
        assert relation.from_type is None

    def test_unknown_directives_are_ignored(self):
        field = parse('type T { a: Int @deprecated(reason: "no") }').definitions[0].fields[0]

        assert read_directive(field.directives[0]) is None
        assert get_directive(field.directives, DirectiveKind.CYPHER) is None
        assert not is_cypher_field(field.directives)
        assert not is_cypher_field(None)

    @pytest.mark.parametrize(
        "auth, expected",
        [
            (False, False),
            (True, True),
            ({"hasScope": True}, True),
            ({"hasScope": False}, False),
            ({"hasRole": True}, False),
            ("yes", False),
        ],
    )
    def test_use_auth_directive(self, auth, expected):
        settings = AugmentationSettings(auth=auth)
        assert use_auth_directive(settings, DirectiveKind.HAS_SCOPE) is expected
