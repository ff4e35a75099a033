import logging
from importlib.metadata import PackageNotFoundError, version
from pathlib import Path
from typing import Any, Optional

import click
import yaml  # type: ignore
from dotenv import load_dotenv

from chatfmt.components import BaseComponent
from chatfmt.json_utils import json_dumps
from chatfmt.loader import load_component
from chatfmt.style import LEGACY_MARKER

try:
    __version__ = version("chatfmt")
except PackageNotFoundError:
    __version__ = "0.0.1-dev"

# Mapping from output format names to file extensions.
EXTENSIONS = {"json": ".json", "yaml": ".yaml"}

input_argument = click.argument(
    "input_file", type=click.Path(exists=True, dir_okay=False)
)
output_option = click.option(
    "--output",
    "output_path",
    type=click.Path(file_okay=True, dir_okay=True),
    default=None,
    help="Write output to FILE or DIRECTORY instead of the console.",
)
format_option = click.option(
    "--format",
    "output_format",
    type=click.Choice(["json", "yaml"]),
    default="json",
    help="Output format.",
)


@click.group()
@click.option("--debug/--no-debug", default=False)
@click.option("--trace/--no-trace", default=False)
@click.option(
    "--log-file",
    type=click.Path(file_okay=True, dir_okay=False),
    envvar="CHATFMT_LOG_FILE",
)
@click.version_option(__version__, prog_name="chatfmt")
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


def _load(input_file: str) -> BaseComponent:
    """Load the component in ``input_file`` or abort with a clear message."""

    try:
        return load_component(Path(input_file))
    except (ValueError, yaml.YAMLError) as exc:
        raise click.ClickException(f"{input_file}: {exc}") from exc


def _emit(
    data: Any,  # noqa: ANN401
    input_file: str,
    output_path: Optional[str],
    output_format: str,
) -> None:
    """Write ``data`` in ``output_format`` to the console or a file.

    Args:
        data: Structured data to serialize.
        input_file: Source file; its stem names files written to a directory.
        output_path: Optional file or directory path for the output.
        output_format: Either ``"json"`` or ``"yaml"``.
    """

    if output_format == "json":
        content = json_dumps(data, indent=True)
    else:
        content = yaml.safe_dump(data, allow_unicode=True, sort_keys=False)

    if not output_path:
        click.echo(content)
        return

    # When the user passes a directory, generate the file name from the
    # input file and the chosen format extension.
    final_path = Path(output_path)
    if final_path.is_dir():
        stem = Path(input_file).stem
        final_path = final_path / f"{stem}{EXTENSIONS[output_format]}"
    final_path.write_text(content, encoding="utf-8")
    logging.debug("Wrote %s", final_path)


@cli.command()
@input_argument
@click.option(
    "--marker",
    default=LEGACY_MARKER,
    show_default=True,
    envvar="CHATFMT_MARKER",
    help="Character introducing each formatting code.",
)
def legacy(input_file: str, marker: str = LEGACY_MARKER) -> None:
    """Print a component file as a legacy formatted string.

    Args:
        input_file: JSON or YAML file holding the component.
        marker: Single character placed before each formatting code.
    """

    if len(marker) != 1:
        raise click.UsageError("The marker must be a single character.")

    component = _load(input_file)
    click.echo(component.to_legacy_string(marker))


@cli.command()
@input_argument
def plain(input_file: str) -> None:
    """Print the text of a component file without formatting."""

    click.echo(_load(input_file).to_plain_string())


@cli.command()
@input_argument
@output_option
@format_option
def flatten(
    input_file: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Resolve inheritance and output the flat list of components.

    Args:
        input_file: JSON or YAML file holding the component.
        output_path: Optional file or directory for the result.
        output_format: Format of the result.
    """

    component = _load(input_file)
    parts = [part.as_map() for part in component.to_flat_list()]
    _emit(parts, input_file, output_path, output_format)


@cli.command()
@input_argument
@output_option
@format_option
def normalize(
    input_file: str,
    output_path: Optional[str] = None,
    output_format: str = "json",
) -> None:
    """Re-emit a component file in canonical map form.

    Args:
        input_file: JSON or YAML file holding the component.
        output_path: Optional file or directory for the result.
        output_format: Format of the result.
    """

    component = _load(input_file)
    _emit(component.as_map(), input_file, output_path, output_format)
