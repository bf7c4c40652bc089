from io import StringIO

import pytest
from django.core.management import call_command
from django.core.management.base import CommandError
from django.test import override_settings

pytestmark = pytest.mark.integration

TYPE_DEFS = """
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
  ping: Boolean
}
"""


@pytest.fixture
def schema_file(tmp_path):
    path = tmp_path / "schema.graphql"
    path.write_text(TYPE_DEFS, encoding="utf-8")
    return path


def test_augment_schema_command_prints_sdl(schema_file):
    out = StringIO()
    call_command("augment_schema", str(schema_file), stdout=out)
    output = out.getvalue()

    assert "AddPersonKnows(" in output
    assert "type _AddPersonKnowsPayload" in output
    assert "input _KnowsInput" in output
    assert "@hasScope" not in output


def test_augment_schema_command_writes_file(schema_file, tmp_path):
    target = tmp_path / "augmented.graphql"
    out = StringIO()
    call_command("augment_schema", str(schema_file), out=str(target), stdout=out)

    assert "Schema written to" in out.getvalue()
    assert "RemovePersonKnows" in target.read_text(encoding="utf-8")


@override_settings(
    GRAPH_AUGMENT={"secured": {"augmentation_settings": {"auth": True}}}
)
def test_augment_schema_command_uses_schema_settings(schema_file):
    out = StringIO()
    call_command("augment_schema", str(schema_file), schema="secured", stdout=out)

    assert '@hasScope(scopes: ["Person: Delete", "Person: Delete"])' in out.getvalue()


def test_augment_schema_command_missing_file(tmp_path):
    with pytest.raises(CommandError):
        call_command("augment_schema", str(tmp_path / "missing.graphql"))


def test_augment_schema_command_invalid_sdl(tmp_path):
    path = tmp_path / "broken.graphql"
    path.write_text("type {", encoding="utf-8")

    with pytest.raises(CommandError):
        call_command("augment_schema", str(path))
