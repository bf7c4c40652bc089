"""
Directive model for generated schema artifacts.

Directives are described by a closed set of kinds. The kinds this package
writes have a typed variant that knows how to render itself as a
``DirectiveNode`` and how to be read back from one, so callers match on
``DirectiveKind`` and typed fields instead of raw argument lists.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional, Tuple, Union

from graphql.language import DirectiveNode, ListValueNode, StringValueNode

from .ast import (
    build_directive,
    build_directive_argument,
    build_enum_value,
    build_list_value,
    build_string_value,
)


class DirectiveKind(Enum):
    CYPHER = "cypher"
    RELATION = "relation"
    MUTATION_META = "MutationMeta"
    HAS_SCOPE = "hasScope"
    HAS_ROLE = "hasRole"
    IS_AUTHENTICATED = "isAuthenticated"


def _argument_value(node: DirectiveNode, name: str):
    for argument in node.arguments or ():
        if argument.name.value == name:
            return argument.value
    return None


def _string_argument(node: DirectiveNode, name: str) -> Optional[str]:
    value = _argument_value(node, name)
    if value is None or not hasattr(value, "value"):
        return None
    return value.value


@dataclass(frozen=True)
class RelationDirective:
    """``@relation(name:, from:, to:)`` binding a type back to a relationship."""

    relationship_name: str
    from_type: Optional[str] = None
    to_type: Optional[str] = None
    direction: Optional[str] = None

    kind = DirectiveKind.RELATION

    def to_node(self) -> DirectiveNode:
        args = [
            build_directive_argument(
                "name", build_string_value(self.relationship_name)
            )
        ]
        if self.from_type:
            args.append(
                build_directive_argument("from", build_string_value(self.from_type))
            )
        if self.to_type:
            args.append(
                build_directive_argument("to", build_string_value(self.to_type))
            )
        if self.direction:
            args.append(
                build_directive_argument("direction", build_enum_value(self.direction))
            )
        return build_directive(self.kind.value, args)

    @classmethod
    def from_node(cls, node: DirectiveNode) -> "RelationDirective":
        return cls(
            relationship_name=_string_argument(node, "name"),
            from_type=_string_argument(node, "from"),
            to_type=_string_argument(node, "to"),
            direction=_string_argument(node, "direction"),
        )

    @property
    def triple(self) -> Tuple[str, Optional[str], Optional[str]]:
        return (self.relationship_name, self.from_type, self.to_type)


@dataclass(frozen=True)
class MutationMetaDirective:
    """``@MutationMeta(relationship:, from:, to:)`` on generated mutation fields."""

    relationship_name: str
    from_type: str
    to_type: str

    kind = DirectiveKind.MUTATION_META

    def to_node(self) -> DirectiveNode:
        return build_directive(
            self.kind.value,
            [
                build_directive_argument(
                    "relationship", build_string_value(self.relationship_name)
                ),
                build_directive_argument("from", build_string_value(self.from_type)),
                build_directive_argument("to", build_string_value(self.to_type)),
            ],
        )

    @classmethod
    def from_node(cls, node: DirectiveNode) -> "MutationMetaDirective":
        return cls(
            relationship_name=_string_argument(node, "relationship"),
            from_type=_string_argument(node, "from"),
            to_type=_string_argument(node, "to"),
        )

    @property
    def triple(self) -> Tuple[str, str, str]:
        return (self.relationship_name, self.from_type, self.to_type)


@dataclass(frozen=True)
class AuthScope:
    type_name: str
    verb: str

    def __str__(self) -> str:
        return f"{self.type_name}: {self.verb}"

    @classmethod
    def parse(cls, value: str) -> "AuthScope":
        type_name, _, verb = value.partition(":")
        return cls(type_name=type_name.strip(), verb=verb.strip())


@dataclass(frozen=True)
class AuthScopeDirective:
    """``@hasScope(scopes: ["Person: Create", ...])``."""

    scopes: Tuple[AuthScope, ...]

    kind = DirectiveKind.HAS_SCOPE

    def to_node(self) -> DirectiveNode:
        return build_directive(
            self.kind.value,
            [
                build_directive_argument(
                    "scopes",
                    build_list_value(
                        build_string_value(str(scope)) for scope in self.scopes
                    ),
                )
            ],
        )

    @classmethod
    def from_node(cls, node: DirectiveNode) -> "AuthScopeDirective":
        value = _argument_value(node, "scopes")
        if isinstance(value, ListValueNode):
            raw = [item.value for item in value.values]
        elif isinstance(value, StringValueNode):
            raw = [value.value]
        else:
            raw = []
        return cls(scopes=tuple(AuthScope.parse(item) for item in raw))


TypedDirective = Union[RelationDirective, MutationMetaDirective, AuthScopeDirective]

_TYPED_DIRECTIVES = {
    DirectiveKind.RELATION: RelationDirective,
    DirectiveKind.MUTATION_META: MutationMetaDirective,
    DirectiveKind.HAS_SCOPE: AuthScopeDirective,
}


def directive_kind(node: DirectiveNode) -> Optional[DirectiveKind]:
    try:
        return DirectiveKind(node.name.value)
    except ValueError:
        return None


def read_directive(node: DirectiveNode) -> Optional[TypedDirective]:
    """Decode ``node`` into its typed variant, or None when it has none."""
    variant = _TYPED_DIRECTIVES.get(directive_kind(node))
    if variant is None:
        return None
    return variant.from_node(node)


def get_directive(
    directives: Optional[Iterable[DirectiveNode]], kind: DirectiveKind
) -> Optional[DirectiveNode]:
    for directive in directives or ():
        if directive_kind(directive) is kind:
            return directive
    return None


def is_cypher_field(directives: Optional[Iterable[DirectiveNode]]) -> bool:
    return get_directive(directives, DirectiveKind.CYPHER) is not None


def use_auth_directive(settings, kind: DirectiveKind) -> bool:
    """
    Whether generated fields should carry the auth directive ``kind``.

    ``auth = True`` enables every auth directive; a mapping enables only
    the directive names mapped to ``True``.
    """
    auth = getattr(settings, "auth", False)
    if auth is True:
        return True
    if isinstance(auth, dict):
        return auth.get(kind.value) is True
    return False


def build_mutation_meta_directive(
    relationship_name: str, from_type: str, to_type: str
) -> DirectiveNode:
    return MutationMetaDirective(relationship_name, from_type, to_type).to_node()


def build_relation_directive(
    relationship_name: str, from_type: str, to_type: str
) -> DirectiveNode:
    return RelationDirective(relationship_name, from_type, to_type).to_node()


def build_auth_scope_directive(scopes: Iterable[AuthScope]) -> DirectiveNode:
    return AuthScopeDirective(scopes=tuple(scopes)).to_node()
