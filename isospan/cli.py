"""Command line entry point for isospan."""

from __future__ import annotations

import json
import logging

import click

from isospan import __version__
from isospan.config.logging import configure_logging
from isospan.query import (
    ComparisonResult,
    ErrorResult,
    ListResult,
    QueryResult,
    ValueResult,
    describe_value,
    evaluate,
)

logger = logging.getLogger(__name__)


@click.command()
@click.version_option(version=__version__, prog_name="isospan")
@click.argument("inputs", metavar="INPUT...", nargs=-1, required=True)
@click.option("--json", "json_output", is_flag=True, help="Structured JSON output.")
@click.option("-v", "--verbose", is_flag=True, help="Detailed output with debug info.")
@click.option("--log-json", is_flag=True, help="Structured JSON log output to stderr.")
def main(inputs: tuple[str, ...], json_output: bool, verbose: bool, log_json: bool) -> None:
    """isospan: parse, normalize and compare ISO 8601 dates and times.

    Each INPUT is a date, time or date-time, a ';' separated list of them,
    or two of them joined by '^' to show how they relate.
    """
    configure_logging(verbose=verbose, log_json=log_json)

    results = [(text, evaluate(text)) for text in inputs]
    failed = [text for text, result in results if not result.ok]
    if failed:
        logger.debug("%d of %d inputs failed", len(failed), len(results))

    if json_output:
        payload = [{"input": text, "result": result.to_dict()} for text, result in results]
        click.echo(json.dumps(payload, indent=2, ensure_ascii=False))
    else:
        for text, result in results:
            for line in _render(text, result):
                click.echo(line)

    if failed:
        raise SystemExit(1)


def _render(text: str, result: QueryResult) -> list[str]:
    if isinstance(result, ListResult):
        lines = [f"{text}:"]
        for item in result.items:
            lines.extend("  " + line for line in _render_item(item))
        return lines
    return [f"{text}: {line}" for line in _render_item(result)]


def _render_item(result: QueryResult) -> list[str]:
    if isinstance(result, ValueResult):
        return [_describe(result.value)]
    if isinstance(result, ErrorResult):
        return [f"error: {result.message}"]
    if isinstance(result, ComparisonResult):
        flags = ", ".join(
            f"{name}={'yes' if outcome else 'no'}"
            for name, outcome in result.relations.items()
        )
        return [f"{result.left} ^ {result.right}: {flags}"]
    if isinstance(result, ListResult):
        lines: list[str] = []
        for item in result.items:
            lines.extend(_render_item(item))
        return lines
    raise TypeError(f"unexpected result {type(result).__name__}")


def _describe(value: object) -> str:
    info = describe_value(value)  # type: ignore[arg-type]
    if info["type"] == "date":
        return (
            f"{info['canonical']} (date, {info['granularity']}, "
            f"[{info['inclusive_start']}, {info['exclusive_end']}))"
        )
    zone = "zone-aware" if info["zone_aware"] else "zone-naive"
    return f"{info['canonical']} ({info['type']}, {zone})"


__all__ = ["main"]
