#!/usr/bin/env python3
"""
md_to_mdx.cli.cli

Typer-based CLI converting Markdown front matter into MDX metadata exports.

The option grammar is declared once on the typer command below. The installed
``md-to-mdx`` entry point runs :func:`main`, which parses tokens through
:func:`parse_cli_args` so that malformed arguments print the error followed by
the usage text.

Examples
--------
Convert every Markdown file below ``docs`` into ``build``:

    md-to-mdx docs --deep --out build

Rename the ``draft`` field while converting one file:

    md-to-mdx notes.md -a draft:isDraft
"""

from __future__ import annotations

import logging
import os
import sys
import traceback
from collections.abc import Callable, Sequence
from pathlib import Path

import typer

from md_to_mdx.application import (
    ConversionResult,
    build_conversion_options,
    convert_path,
)
from md_to_mdx.errors import ArgumentError, MdxConversionError
from md_to_mdx.schemas import AdapterMapping, CliOptions
from md_to_mdx.settings import Settings

PROG_NAME = "md-to-mdx"

HELP_TEXT = f"""Usage: {PROG_NAME} [directory] [options]

Options:
  --deep            Recursively process sub-directories.
  --no-deep         Disable recursive traversal (default).
  --adapter a:b     Map front-matter field "a" to "b". Repeatable.
  --out path        Write output to a directory (or .mdx file when converting one file).
  -h, --help        Show this help message.
"""

app = typer.Typer(
    name=PROG_NAME,
    help="Convert Markdown front matter into MDX metadata exports.",
    add_completion=False,
)


# -----------------------------
# Output helpers
# -----------------------------
def _print_help() -> None:
    typer.echo(HELP_TEXT)


def _print_error(message: str) -> None:
    typer.echo(
        f"{typer.style('✗', fg=typer.colors.RED, bold=True)} "
        f"{typer.style('Error:', bold=True)} {message}",
        err=True,
    )


def _print_conversion_error(exc: Exception, debug: bool) -> int:
    """Print a user-friendly conversion error.

    Parameters
    ----------
    exc : Exception
        Exception raised during conversion.
    debug : bool
        Whether to include traceback details.

    Returns
    -------
    int
        Process exit code.
    """
    _print_error(str(exc))
    if debug:
        typer.echo("\nTraceback:", err=True)
        typer.echo("".join(traceback.format_exception(type(exc), exc, exc.__traceback__)), err=True)
    code = getattr(exc, "exit_code", None)
    if isinstance(code, int) and code > 0:
        return code
    return 1


def _echo_converted(result: ConversionResult) -> None:
    typer.echo(
        " ".join(
            [
                typer.style("✓", fg=typer.colors.GREEN),
                typer.style("Converted:", dim=True),
                typer.style(result.source_path.name, fg=typer.colors.CYAN),
                typer.style("→", dim=True),
                typer.style(result.output_path.name, fg=typer.colors.CYAN),
            ]
        )
    )


def _configure_logging(settings: Settings) -> None:
    logging.basicConfig(
        level=settings.log_level,
        format="%(levelname)s %(name)s: %(message)s",
    )


# -----------------------------
# Argument parsing
# -----------------------------
_SWITCHES = {
    "--deep": "--deep",
    "--no-deep": "--no-deep",
    "--help": "--help",
    "-h": "--help",
}
_VALUE_FLAGS = {
    "--adapter": "--adapter",
    "-a": "--adapter",
    "--out": "--out",
    "-o": "--out",
}
_MISSING_VALUE = {
    "--adapter": 'Expected value for --adapter flag (format: "source:target").',
    "--out": "Expected value for --out flag.",
}


def _normalize_tokens(args: Sequence[str]) -> list[str]:
    """Rewrite ``args`` so the option parser only sees exact flags.

    Known flags are emitted first, value flags in ``--flag=value`` form, and
    every other token follows a ``--`` separator as a positional argument.
    """
    options: list[str] = []
    positional: list[str] = []
    tokens = iter(args)
    for token in tokens:
        if token in _SWITCHES:
            options.append(_SWITCHES[token])
            continue
        if token in _VALUE_FLAGS:
            flag = _VALUE_FLAGS[token]
            value = next(tokens, None)
            if not value:
                raise ArgumentError(_MISSING_VALUE[flag])
            options.append(f"{flag}={value}")
            continue
        name, separator, _ = token.partition("=")
        if separator and name in _MISSING_VALUE:
            options.append(token)
            continue
        positional.append(token)
    return [*options, "--", *positional]


def _parse_adapter(values: Sequence[str] | None) -> dict[str, str]:
    """Fold repeated ``source:target`` values into one adapter mapping."""
    adapter: dict[str, str] = {}
    for value in values or ():
        try:
            mapping = AdapterMapping.parse(value)
        except ValueError as exc:
            raise ArgumentError(str(exc)) from exc
        adapter[mapping.source] = mapping.target
    return adapter


def _build_cli_options(
    *,
    paths: Sequence[str] | None,
    deep: bool,
    adapter: Sequence[str] | None,
    out: str | None,
    help_requested: bool,
) -> CliOptions:
    if out is not None and not out:
        raise ArgumentError("Expected value for --out flag.")
    positional = list(paths or ())
    return CliOptions(
        input=positional[0] if positional else "./",
        deep=deep,
        adapter=_parse_adapter(adapter),
        output=out,
        help_requested=help_requested,
    )


def parse_cli_args(args: Sequence[str]) -> CliOptions:
    """Parse command-line tokens into :class:`CliOptions`.

    Any token that is not an exact flag, or a ``--adapter=`` / ``--out=``
    assignment, is positional; only the first positional argument is used as
    the input path.

    Raises
    ------
    ArgumentError
        If an adapter mapping is malformed or a flag is missing its value.
    """
    command = typer.main.get_command(app)
    try:
        with command.make_context(PROG_NAME, _normalize_tokens(args)) as ctx:
            params = dict(ctx.params)
    except typer.TyperException as exc:
        raise ArgumentError(exc.format_message()) from exc

    return _build_cli_options(
        paths=params.get("paths"),
        deep=bool(params.get("deep", False)),
        adapter=params.get("adapter"),
        out=params.get("out"),
        help_requested=bool(params.get("help_requested", False)),
    )


# -----------------------------
# Driver
# -----------------------------
def _execute(options: CliOptions, debug: bool) -> int:
    """Run a parsed invocation and return the process exit code."""
    if options.help_requested:
        _print_help()
        return 0

    try:
        typer.echo(
            f"{typer.style(PROG_NAME, fg=typer.colors.CYAN, bold=True)} "
            f"{typer.style('Converting Markdown to MDX...', dim=True)}"
        )
        typer.echo()

        input_path = Path(os.path.abspath(options.input))
        output_path = Path(os.path.abspath(options.output)) if options.output else None
        convert_path(
            input_path=input_path,
            options=build_conversion_options(
                adapter=options.adapter,
                deep=options.deep,
                output=output_path,
            ),
            notify=_echo_converted,
        )

        typer.echo()
        typer.echo(
            f"{typer.style('✓', fg=typer.colors.GREEN, bold=True)} "
            f"{typer.style('Conversion complete!', bold=True)}"
        )
    except MdxConversionError as exc:
        return _print_conversion_error(exc, debug)
    except Exception as exc:
        # I/O failures (permissions, encoding) abort the run with a clean message.
        return _print_conversion_error(exc, debug)
    return 0


def _run(parse: Callable[[], CliOptions]) -> int:
    """Load settings, parse with ``parse``, convert, and return an exit code."""
    try:
        settings = Settings.from_env()
    except MdxConversionError as exc:
        return _print_conversion_error(exc, debug=False)
    _configure_logging(settings)

    try:
        options = parse()
    except ArgumentError as exc:
        _print_error(str(exc))
        typer.echo()
        _print_help()
        return exc.exit_code

    return _execute(options, settings.debug)


def run_cli(args: Sequence[str] | None = None) -> int:
    """Parse ``args`` (default ``sys.argv[1:]``), convert, and return an exit code."""
    tokens = sys.argv[1:] if args is None else list(args)
    return _run(lambda: parse_cli_args(tokens))


def main() -> None:
    """Console-script entry point."""
    raise SystemExit(run_cli())


# -----------------------------
# Command
# -----------------------------
@app.command(
    context_settings={"ignore_unknown_options": True, "help_option_names": []},
    add_help_option=False,
)
def convert_cmd(
    paths: list[str] | None = typer.Argument(
        None,
        help="Markdown file or directory to convert (default: current directory).",
        show_default=False,
    ),
    deep: bool = typer.Option(
        False, "--deep/--no-deep", help="Recursively process sub-directories."
    ),
    adapter: list[str] | None = typer.Option(
        None,
        "--adapter",
        "-a",
        help='Map front-matter field "a" to "b" as a:b (repeatable).',
    ),
    out: str | None = typer.Option(
        None,
        "--out",
        "-o",
        help="Write output to a directory (or .mdx file when converting one file).",
    ),
    help_requested: bool = typer.Option(
        False, "--help", "-h", help="Show this help message."
    ),
) -> None:
    """Convert Markdown files with front matter into MDX files."""
    code = _run(
        lambda: _build_cli_options(
            paths=paths,
            deep=deep,
            adapter=adapter,
            out=out,
            help_requested=help_requested,
        )
    )
    if code:
        raise typer.Exit(code=code)


if __name__ == "__main__":
    main()
