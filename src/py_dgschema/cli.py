# -*- coding: utf-8 -*-
""" Command line interface: ``dgschema --source schema.graphql``. """

import enum
import os

import typer

from .compiler import compile_schema
from .exc import (
    InternalInvariantError,
    SchemaCompilationError,
    SchemaSyntaxError,
)
from .schema import print_schema
from .utilities import print_storage_schema

app = typer.Typer(
    help="Generate a complete GraphQL API schema from an input schema.",
    add_completion=False,
)


class OutputMode(str, enum.Enum):
    graphql = "graphql"
    dgraph = "dgraph"


def _format_error(err: Exception) -> str:
    if isinstance(err, SchemaSyntaxError):
        return err.highlighted
    locations = getattr(err, "locations", None)
    if locations:
        return "%s (%s)" % (
            err,
            ", ".join("%d:%d" % loc for loc in locations),
        )
    return str(err)


@app.command()
def run(
    source: str = typer.Option(..., help="Path to the input schema."),
    generate: OutputMode = typer.Option(
        OutputMode.graphql,
        help="Output type: the API schema (graphql) or the storage schema "
        "(dgraph).",
        case_sensitive=False,
    ),
):
    """Compile the input schema and print the generated schema."""
    try:
        with open(source, encoding="utf-8") as f:
            text = f.read()
    except OSError as err:
        typer.echo(
            "Failed to read source %s (from %s): %s"
            % (source, os.getcwd(), err),
            err=True,
        )
        raise typer.Exit(1)

    try:
        schema = compile_schema(text)
    except SchemaCompilationError as err:
        typer.echo(
            "Invalid schema in %s (%s):" % (source, err.stage), err=True
        )
        for error in err.errors:
            typer.echo(_format_error(error), err=True)
        raise typer.Exit(1)
    except InternalInvariantError as err:
        typer.echo("Failed to generate schema: %s" % err, err=True)
        raise typer.Exit(1)

    if generate == OutputMode.dgraph:
        typer.echo(print_storage_schema(schema), nl=False)
    else:
        typer.echo(print_schema(schema), nl=False)


def main() -> None:
    app(prog_name="dgschema")
