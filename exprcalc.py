import logging
import shutil
import sys
from typing import Optional

import click

from expr.ast import print_ast
from expr.error import CompileError, format_error
from expr.parser import parse, parse_source
from expr.scanner import Scanner


def read_source(expression: Optional[str], file: Optional[str]) -> str:
    if file is not None and expression is not None:
        raise click.UsageError("EXPRESSION and --file are mutually exclusive")
    if file is not None:
        with open(file, "r", errors="replace") as f:
            return f.read()
    if expression is None:
        raise click.UsageError("either EXPRESSION or --file is required")
    return expression


def rule():
    click.echo("-" * shutil.get_terminal_size().columns)


@click.command()
@click.argument("expression", required=False)
@click.option("--file", "file", type=click.Path(exists=True, dir_okay=False), help="Read the expression from a file.")
def scan(expression: Optional[str], file: Optional[str]) -> None:
    source = read_source(expression, file)
    try:
        for token in Scanner(source):
            click.echo(token)
    except CompileError as e:
        e.source = source
        click.echo(format_error(e))
        sys.exit(1)


@click.command()
@click.argument("expression", required=False)
@click.option("--file", "file", type=click.Path(exists=True, dir_okay=False), help="Read the expression from a file.")
@click.option(
    "--print-tokens/--no-print-tokens",
    default=False,
    help="Whether or not to print the tokens before the tree.",
)
def parse_command(expression: Optional[str], file: Optional[str], print_tokens: bool) -> None:
    source = read_source(expression, file)
    try:
        if print_tokens:
            tokens = list(Scanner(source))
            for token in tokens:
                click.echo(token)
            rule()
            print_ast(parse(tokens))
        else:
            print_ast(parse_source(source))
    except CompileError as e:
        e.source = source
        click.echo(format_error(e))
        sys.exit(1)


@click.command()
@click.option("--prompt", default=">", show_default=True, help="Prompt shown before each line.")
def repl(prompt: str) -> None:
    while True:
        click.echo(prompt, nl=False)
        line = sys.stdin.readline()
        if not line:
            break

        line = line.rstrip("\n")
        if not line.strip():
            continue

        try:
            print_ast(parse_source(line))
        except CompileError as e:
            click.echo(format_error(e))


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log scanner and parser steps.")
def cli(verbose: bool) -> None:
    logging.basicConfig(level=logging.DEBUG if verbose else logging.INFO)


cli.add_command(scan)
cli.add_command(parse_command, "parse")
cli.add_command(repl)


if __name__ == "__main__":
    cli()
