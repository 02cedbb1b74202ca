"""
Main CLI module for conlluedit.
"""

from typing import Optional
import click
from conlluedit.application.services.alignment import align_sentence, unalign_sentence
from conlluedit.application.services.navigator import (
    head_line_offset,
    resolve_head,
    sentence_at,
)
from conlluedit.application.services.validation_service import ValidationService
from conlluedit.cli.config_cmd import config
from conlluedit.config import get_settings
from conlluedit.domain.exceptions import ConlluError
from conlluedit.domain.models import ROOT, Document, TokenLine
from conlluedit.infrastructure.logging_config import configure_logging
from conlluedit.infrastructure.parsing.serializer import serialize
from conlluedit.infrastructure.parsing.tokenizer import parse


def _load(path: str) -> Document:
    try:
        with open(path, "r", encoding="utf-8-sig") as f:
            content = f.read()
        return parse(content)
    except (ConlluError, UnicodeDecodeError) as e:
        click.echo(f"❌ {path}: {e}", err=True)
        raise SystemExit(1)


@click.group()
def cli():
    """Tools for reading and editing CoNLL-U files."""
    settings = get_settings()
    configure_logging(settings.LOG_LEVEL, settings.LOG_FILE)


cli.add_command(config, name="config")


@cli.command()
def version():
    """Show conlluedit version information."""
    from conlluedit import __version__

    click.echo(f"conlluedit version {__version__}")


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option(
    "--check-heads/--no-check-heads",
    default=None,
    help="Report HEAD values that point to a missing ID",
)
def validate(path: str, check_heads: Optional[bool]):
    """Report every problem found in a CoNLL-U file."""
    if check_heads is None:
        check_heads = get_settings().CHECK_HEADS

    try:
        report = ValidationService(check_heads=check_heads).validate_file(path)
    except UnicodeDecodeError as e:
        click.echo(f"❌ {path}: {e}", err=True)
        raise SystemExit(1)
    if report.is_valid:
        click.echo(f"✅ {path}: no problems found")
        return

    for diagnostic in report.errors:
        click.echo(f"{path}:{diagnostic}")
    click.echo(f"❌ {len(report.errors)} problem(s) found")
    raise SystemExit(1)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.option("--padding", type=int, default=None, help="Extra spaces after each column")
def align(path: str, padding: Optional[int]):
    """Print the file with its columns padded to equal width."""
    if padding is None:
        padding = get_settings().ALIGN_PADDING
    doc = _load(path)
    aligned = Document(tuple(align_sentence(s, padding) for s in doc.sentences))
    click.echo(serialize(aligned), nl=False)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
def unalign(path: str):
    """Print the file with column padding removed."""
    doc = _load(path)
    plain = Document(tuple(unalign_sentence(s) for s in doc.sentences))
    click.echo(serialize(plain), nl=False)


@cli.command()
@click.argument("path", type=click.Path(exists=True, dir_okay=False))
@click.argument("line", type=int)
def head(path: str, line: int):
    """Show the head of the token on a 1-based LINE of the file."""
    doc = _load(path)
    sentence = sentence_at(doc, line - 1)
    token = None
    if sentence is not None:
        token = sentence.lines[line - 1 - sentence.start_line]
    if not isinstance(token, TokenLine):
        click.echo(f"❌ Line {line} is not a token line")
        raise SystemExit(1)

    try:
        governor = resolve_head(sentence, token)
    except ConlluError as e:
        click.echo(f"❌ {e}")
        raise SystemExit(1)

    if governor is ROOT:
        click.echo("ROOT")
    elif governor is None:
        click.echo("HEAD is unspecified")
    else:
        offset = head_line_offset(sentence, token)
        click.echo(f"{sentence.start_line + offset + 1}: {governor.text}")


if __name__ == "__main__":
    cli()
