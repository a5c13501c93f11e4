"""Command line interface for filesig."""

from __future__ import annotations

import difflib
from pathlib import Path
from typing import Any, Iterable, Optional

import click
import yaml
from rich.console import Console
from rich.syntax import Syntax
from rich.table import Table

from filesig.config import ConfigError, ConfigManager, FilesigConfig, validate_config
from filesig.detection import (
    SIGNATURES,
    FileSignature,
    HeaderReader,
    UnreadableFileError,
    detect,
    is_allowed,
    is_likely_plain_text,
    is_resume_format,
    matches_extension,
)
from filesig.detection.catalog import TEXT_MIME
from filesig.logging_setup import configure_logging

console = Console()


def _handle_cli_error(
    message: str,
    *,
    code: str,
    json_output: bool,
    details: Any | None = None,
    original: Exception | None = None,
) -> None:
    """Emit a standardized error and terminate the command appropriately.

    Args:
        message: Human-readable error message.
        code: Machine-readable error identifier.
        json_output: Indicates whether JSON mode is active.
        details: Optional structured details to include in the payload.
        original: Original exception for chaining when not using JSON.

    Raises:
        SystemExit: When emitting JSON output to terminate the command.
        click.ClickException: For non-JSON flows to surface the error.
    """

    if json_output:
        payload: dict[str, Any] = {"error": {"code": code, "message": message}}
        if details is not None:
            payload["error"]["details"] = details
        console.print_json(data=payload)
        raise SystemExit(1)

    if isinstance(original, click.ClickException):
        raise original

    raise click.ClickException(message) from original


def _emit_message(message: Any, *, mode: str, quiet: bool) -> None:
    """Print CLI output unless quiet mode hides it.

    Args:
        message: Renderable or string to emit.
        mode: Output mode identifier (`detail`, `summary`, `warning`, or `error`).
        quiet: Whether quiet mode is active.
    """

    if quiet and mode != "error":
        return
    console.print(message, soft_wrap=True)


def _format_summary_line(command: str, metrics: dict[str, Any]) -> str:
    """Render a one-line summary of per-command counts.

    Args:
        command: Label for the command being summarized.
        metrics: Ordered counters, such as accepted and rejected totals.

    Returns:
        str: Rich-markup summary line.
    """
    parts = ", ".join(f"{key}={value}" for key, value in metrics.items())
    return f"[green]{command} summary: {parts}.[/green]"


def _assign_nested(target: dict[str, Any], path: list[str], value: Any) -> None:
    """Assign a nested value within a dictionary for a dotted path.

    Raises:
        ConfigError: If a non-mapping value is encountered along the path.
    """

    node = target
    for segment in path[:-1]:
        existing = node.get(segment)
        if existing is None:
            existing = {}
            node[segment] = existing
        elif not isinstance(existing, dict):
            raise ConfigError(
                f"Cannot assign into '{segment}' because it is not a mapping in the config file."
            )
        node = existing
    node[path[-1]] = value


def _load_config(ctx: click.Context) -> FilesigConfig:
    """Load configuration and configure logging for the invoked command."""
    config = ConfigManager().load()
    verbose = bool(ctx.find_root().obj and ctx.find_root().obj.get("verbose"))
    configure_logging("DEBUG" if verbose else config.logging.level)
    return config


def _signature_payload(signature: Optional[FileSignature]) -> dict[str, Any]:
    if signature is None:
        return {"format": None, "mime_type": None, "extension": None, "is_bom": False}
    return {
        "format": signature.name,
        "mime_type": signature.mime_type,
        "extension": signature.extension,
        "is_bom": signature.is_bom,
    }


def _read_headers(
    paths: Iterable[Path], length: int
) -> Iterable[tuple[Path, Optional[bytes], Optional[str]]]:
    """Yield each path with its leading bytes, or the reason it could not be read."""
    reader = HeaderReader()
    for path in paths:
        try:
            yield path, reader.read(path, length), None
        except UnreadableFileError as exc:
            yield path, None, exc.reason


@click.group(context_settings={"help_option_names": ["-h", "--help"]})
@click.version_option(package_name="filesig")
@click.option("-v", "--verbose", is_flag=True, help="Enable debug logging.")
@click.pass_context
def cli(ctx: click.Context, verbose: bool) -> None:
    """filesig identifies file formats from their magic bytes and vets uploads.

    Returns:
        None: This function is invoked for its side effects.
    """
    ctx.ensure_object(dict)
    ctx.obj["verbose"] = verbose


@cli.command("detect")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option("--json", "json_output", is_flag=True, help="Emit detection results as JSON.")
@click.pass_context
def detect_command(ctx: click.Context, paths: tuple[Path, ...], json_output: bool) -> None:
    """Report the detected format of each file in PATHS.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    json_enabled = json_output
    try:
        config = _load_config(ctx)
        json_enabled = json_output or config.cli.json_default

        results: list[dict[str, Any]] = []
        failures = 0
        for path, header, error in _read_headers(paths, config.detection.header_length):
            record: dict[str, Any] = {"path": str(path)}
            if header is None:
                failures += 1
                record["error"] = error
            else:
                record.update(_signature_payload(detect(header)))
            results.append(record)
    except ConfigError as exc:
        _handle_cli_error(str(exc), code="config_error", json_output=json_enabled, original=exc)
        return

    if json_enabled:
        console.print_json(data={"results": results})
    else:
        table = Table(title="Detected formats")
        table.add_column("Path", style="cyan")
        table.add_column("Format")
        table.add_column("MIME type")
        table.add_column("Extension")
        for record in results:
            if "error" in record:
                table.add_row(record["path"], "[red]unreadable[/red]", record["error"], "")
                continue
            table.add_row(
                record["path"],
                record["format"] or "[yellow]unknown[/yellow]",
                record["mime_type"] or "",
                record["extension"] or "",
            )
        console.print(table)

    if failures:
        ctx.exit(1)


@cli.command("check")
@click.argument("paths", nargs=-1, required=True, type=click.Path(path_type=Path))
@click.option(
    "--allow",
    "allowed",
    multiple=True,
    help="MIME type to accept; repeat to build the allow-list. Defaults to the configured policy.",
)
@click.option("--resume", "resume_mode", is_flag=True, help="Apply the resume upload policy.")
@click.option(
    "--match-extension",
    is_flag=True,
    help="Reject files whose detected format does not answer for their extension.",
)
@click.option("--json", "json_output", is_flag=True, help="Emit verdicts as JSON.")
@click.option("--quiet", is_flag=True, help="Only print rejected files.")
@click.pass_context
def check_command(
    ctx: click.Context,
    paths: tuple[Path, ...],
    allowed: tuple[str, ...],
    resume_mode: bool,
    match_extension: bool,
    json_output: bool,
    quiet: bool,
) -> None:
    """Validate PATHS against an allow-list of formats; exit 1 if any are rejected.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    json_enabled = json_output
    try:
        config = _load_config(ctx)
        json_enabled = json_output or config.cli.json_default
        quiet_enabled = quiet or config.cli.quiet_default
        allow_list = frozenset(allowed) if allowed else frozenset(config.policy.allowed_mime_types)

        verdicts: list[dict[str, Any]] = []
        for path, header, error in _read_headers(paths, config.detection.header_length):
            record: dict[str, Any] = {"path": str(path)}
            if header is None:
                record.update(accepted=False, reason=f"unreadable: {error}")
                verdicts.append(record)
                continue

            signature = detect(header)
            record.update(_signature_payload(signature))
            if resume_mode:
                accepted = is_resume_format(header)
            else:
                accepted = is_allowed(header, allow_list) or (
                    signature is None
                    and TEXT_MIME in allow_list
                    and config.policy.accept_plain_text
                    and is_likely_plain_text(header)
                )

            reason = None if accepted else "format not allowed"
            if accepted and match_extension and signature is not None and path.suffix:
                if not matches_extension(header, path.suffix):
                    accepted = False
                    reason = f"extension {path.suffix} does not match {signature.name}"
            record.update(accepted=accepted, reason=reason)
            verdicts.append(record)
    except ConfigError as exc:
        _handle_cli_error(str(exc), code="config_error", json_output=json_enabled, original=exc)
        return

    rejected = [record for record in verdicts if not record["accepted"]]

    if json_enabled:
        console.print_json(
            data={
                "context": {"resume": resume_mode, "allowed": sorted(allow_list)},
                "verdicts": verdicts,
                "counts": {"accepted": len(verdicts) - len(rejected), "rejected": len(rejected)},
            }
        )
    else:
        for record in verdicts:
            label = record.get("format") or "unknown"
            if record["accepted"]:
                _emit_message(
                    f"[green]accepted[/green] {record['path']} ({label})",
                    mode="detail",
                    quiet=quiet_enabled,
                )
            else:
                _emit_message(
                    f"[red]rejected[/red] {record['path']} ({label}): {record['reason']}",
                    mode="error",
                    quiet=quiet_enabled,
                )
        _emit_message(
            _format_summary_line(
                "Check",
                {"accepted": len(verdicts) - len(rejected), "rejected": len(rejected)},
            ),
            mode="summary",
            quiet=quiet_enabled,
        )

    if rejected:
        ctx.exit(1)


@cli.command("formats")
@click.option("--json", "json_output", is_flag=True, help="Emit the catalog as JSON.")
def formats_command(json_output: bool) -> None:
    """List every format the detector recognizes, in matching order."""
    if json_output:
        console.print_json(
            data={
                "formats": [
                    {
                        "name": signature.name,
                        "pattern": signature.pattern.hex(" "),
                        "extension": signature.extension,
                        "mime_type": signature.mime_type,
                        "extensions": list(signature.extensions),
                    }
                    for signature in SIGNATURES
                ]
            }
        )
        return

    table = Table(title="Known signatures")
    table.add_column("#", justify="right")
    table.add_column("Format", style="cyan")
    table.add_column("Magic bytes")
    table.add_column("MIME type")
    table.add_column("Extensions")
    for index, signature in enumerate(SIGNATURES, start=1):
        table.add_row(
            str(index),
            signature.name,
            signature.pattern.hex(" "),
            signature.mime_type,
            ", ".join(signature.extensions) or signature.extension,
        )
    console.print(table)


@cli.group()
def config() -> None:
    """Manage filesig configuration files and overrides.

    Returns:
        None: This function is invoked for its side effects.
    """


@config.command("view")
def config_view() -> None:
    """Display the effective configuration, defaults included.

    Raises:
        click.ClickException: If configuration cannot be loaded.
    """
    manager = ConfigManager()
    try:
        loaded = manager.load()
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    yaml_text = yaml.safe_dump(loaded.model_dump(mode="python"), sort_keys=False)
    console.print(Syntax(yaml_text, "yaml", word_wrap=True))


@config.command("set")
@click.argument("key")
@click.option("--value", required=True, help="Value to assign to KEY.")
def config_set(key: str, value: str) -> None:
    """Persist a configuration value expressed as a dotted KEY.

    Args:
        key: Dotted path describing the configuration field to update.
        value: YAML-literal value to write into the configuration file.

    Raises:
        click.ClickException: If parsing, assignment, or validation fails.
    """
    manager = ConfigManager()
    manager.ensure_exists()

    before = manager.read_text().splitlines()
    segments = [segment.strip() for segment in key.split(".") if segment.strip()]
    if not segments:
        raise click.ClickException(
            "KEY must specify a dotted path such as 'detection.header_length'."
        )

    try:
        parsed_value = yaml.safe_load(value)
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Unable to parse value: {exc}") from exc

    try:
        file_data = manager.read_values()
        _assign_nested(file_data, segments, parsed_value)
        validate_config(file_data)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(file_data)
    after = manager.read_text().splitlines()

    diff = list(
        difflib.unified_diff(
            before,
            after,
            fromfile="config.yaml (before)",
            tofile="config.yaml (after)",
            lineterm="",
        )
    )
    # The timestamp line always changes; only report real edits.
    if not any(
        line.startswith(("+", "-")) and not line.startswith(("+++", "---", "+# Last", "-# Last"))
        for line in diff
    ):
        console.print("[yellow]No changes applied; value already up to date.[/yellow]")
        return

    console.print(Syntax("\n".join(diff), "diff", word_wrap=False))
    console.print(f"[green]Updated {'.'.join(segments)}.[/green]")


@config.command("edit")
def config_edit() -> None:
    """Open the configuration file in an interactive editor session.

    Raises:
        click.ClickException: If edited content is invalid or cannot be saved.
    """
    manager = ConfigManager()
    manager.ensure_exists()

    original = manager.read_text()
    edited = click.edit(original, extension=".yaml")

    if edited is None:
        console.print("[yellow]Edit cancelled; no changes applied.[/yellow]")
        return

    if edited == original:
        console.print("[yellow]No changes detected.[/yellow]")
        return

    try:
        parsed = yaml.safe_load(edited) or {}
    except yaml.YAMLError as exc:
        raise click.ClickException(f"Invalid YAML: {exc}") from exc

    if not isinstance(parsed, dict):
        raise click.ClickException("Configuration file must contain a top-level mapping.")

    try:
        validate_config(parsed)
    except ConfigError as exc:
        raise click.ClickException(str(exc)) from exc

    manager.save(parsed)
    console.print("[green]Configuration updated successfully.[/green]")


def main() -> None:
    """Invoke the Click CLI as the console script entry point.

    Returns:
        None: This function is invoked for its side effects.
    """
    cli()


if __name__ == "__main__":
    main()
