# -*- coding: utf-8 -*-

from typer.testing import CliRunner

from py_dgschema import compile_schema, print_schema
from py_dgschema.cli import app
from py_dgschema.utilities import print_storage_schema

runner = CliRunner()


def test_generate_graphql(fixture_file, fixture_path):
    result = runner.invoke(app, ["--source", fixture_path("people.graphql")])
    assert result.exit_code == 0
    assert result.stdout == print_schema(
        compile_schema(fixture_file("people.graphql"))
    )


def test_generate_dgraph(fixture_file, fixture_path):
    result = runner.invoke(
        app,
        ["--source", fixture_path("people.graphql"), "--generate", "dgraph"],
    )
    assert result.exit_code == 0
    assert result.stdout == print_storage_schema(
        compile_schema(fixture_file("people.graphql"))
    )


def test_missing_source():
    result = runner.invoke(app, [])
    assert result.exit_code != 0
    assert "--source" in result.output


def test_invalid_mode(fixture_path):
    result = runner.invoke(
        app, ["--source", fixture_path("people.graphql"), "--generate", "sql"]
    )
    assert result.exit_code == 2


def test_unreadable_source(fixture_path):
    result = runner.invoke(app, ["--source", fixture_path("missing.graphql")])
    assert result.exit_code == 1
    assert "Failed to read source" in result.output


def test_invalid_schema(fixture_path):
    result = runner.invoke(
        app, ["--source", fixture_path("invalid_syntax.graphql")]
    )
    assert result.exit_code == 1
    assert "(syntax)" in result.output
    assert "(3:10)" in result.output


def test_rule_violations_are_located(tmp_path):
    source = tmp_path / "schema.graphql"
    source.write_text("type Query { id: ID! }\n")
    result = runner.invoke(app, ["--source", str(source)])
    assert result.exit_code == 1
    assert "Query is a reserved word" in result.output
    assert "(1:6)" in result.output
