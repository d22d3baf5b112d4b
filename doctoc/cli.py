import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Optional

import click
from dotenv import load_dotenv

from doctoc.exceptions import SchemaError
from doctoc.json_utils import json_dumps
from doctoc.toc import (
    TableOfContents,
    dump_toc,
    find_node,
    iter_nodes,
    load_toc,
    max_depth,
    node_to_dict,
    render_outline,
)
from doctoc.xlsx import write_workbook

try:
    __version__ = version("doctoc")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

TOC_FILE_TYPE = click.Path(exists=True, file_okay=True, dir_okay=False)


def _load(toc_file: str, strict: bool = False) -> TableOfContents:
    """Load ``toc_file`` turning schema problems into CLI errors.

    Args:
        toc_file: Path of the JSON or YAML table of contents.
        strict: Reject unknown node fields.

    Returns:
        The validated table of contents.

    Throws:
        click.ClickException: If the file does not match the schema.
    """

    try:
        return load_toc(Path(toc_file), strict=strict)
    except SchemaError as exc:
        raise click.ClickException(str(exc)) from exc


def _echo(text: str) -> None:
    """Write ``text`` to stdout, ignoring a reader that went away."""

    try:
        click.echo(text)
    except BrokenPipeError:
        logging.debug("Output pipe closed")


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="DOCTOC_LOG_FILE",
)
@click.version_option(__version__, prog_name="doctoc")
def cli(debug: bool, trace: bool, log_file: Optional[str] = None) -> None:
    """Configure logging and load environment variables.

    Args:
        debug: Toggle debug logging.
        trace: Toggle trace logging.
        log_file: Optional path to the log file.
    """
    if trace:
        level = 1
    elif debug:
        level = logging.DEBUG
    else:
        level = logging.INFO

    logging.basicConfig(
        filename=log_file,
        level=level,
        format="[%(levelname)s] %(message)s",
        datefmt="%Y-%m-%d %H:%M:%S",
    )
    if trace:
        logging.debug("Trace mode is on")
    if debug:
        logging.debug("Debug mode is on")
    load_dotenv()


@cli.command()
@click.argument("toc_file", type=TOC_FILE_TYPE, envvar="DOCTOC_TOC_FILE")
@click.option(
    "--strict/--no-strict",
    default=False,
    help="Reject unknown fields instead of ignoring them.",
)
def validate(toc_file: str, strict: bool = False) -> None:
    """Check that a table of contents file is well formed.

    Args:
        toc_file: Path of the JSON or YAML table of contents.
        strict: Reject unknown node fields.
    """

    toc = _load(toc_file, strict=strict)
    entries = sum(1 for _ in iter_nodes(toc))
    click.echo(
        f"OK: {len(toc)} sections, {entries} entries, "
        f"depth {max_depth(toc)}"
    )


@cli.command()
@click.argument("toc_file", type=TOC_FILE_TYPE, envvar="DOCTOC_TOC_FILE")
@click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
@click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml", "xlsx"]),
    default="json",
    help="Output format.",
)
@click.option(
    "--compact/--no-compact",
    default=False,
    help="Write leaf entries as bare strings.",
)
def convert(
    toc_file: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
    compact: bool = False,
) -> None:
    """Normalize a table of contents and write it in another format.

    Args:
        toc_file: Path of the JSON or YAML table of contents.
        output_path: Optional file or directory path for the converted data.
            If a directory is provided, the file name is derived from the
            input file name.
        output_format: Format of the converted data.
        compact: Use the bare-string shorthand for leaf entries.
    """

    toc = _load(toc_file)

    # Determine the output file path if one was provided. When the user
    # passes a directory, reuse the input file stem with the extension of
    # the chosen format.
    final_path: Optional[Path] = None
    if output_path:
        final_path = Path(output_path)
        extensions = {"json": ".json", "yaml": ".yaml", "xlsx": ".xlsx"}
        if final_path.is_dir():
            file_name = Path(toc_file).stem + extensions[output_format]
            final_path = final_path / file_name

    if output_format == "xlsx":
        if final_path is None:
            raise click.UsageError("Output file is required for xlsx format.")
        write_workbook(toc, final_path)
        return

    content = dump_toc(toc, fmt=output_format, compact=compact)
    if final_path:
        final_path.write_text(content, encoding="utf-8")
    else:
        _echo(content)


@cli.command()
@click.argument("toc_file", type=TOC_FILE_TYPE, envvar="DOCTOC_TOC_FILE")
@click.option("--keys", "show_keys", is_flag=True, help="Show entry slugs.")
def tree(toc_file: str, show_keys: bool = False) -> None:
    """Print the table of contents as an indented outline."""

    _echo(render_outline(_load(toc_file), show_keys=show_keys))


@cli.command()
@click.argument("slug_path")
@click.argument("toc_file", type=TOC_FILE_TYPE, envvar="DOCTOC_TOC_FILE")
def show(slug_path: str, toc_file: str) -> None:
    """Print the entry at SLUG_PATH (for example ``start/install``)."""

    toc = _load(toc_file)
    try:
        node = find_node(toc, slug_path)
    except KeyError as exc:
        raise click.ClickException(exc.args[0]) from exc

    _echo(json_dumps({node.key: node_to_dict(node)}, indent=2))
