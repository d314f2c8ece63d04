"""Typer CLI entrypoint for pass-craft."""

import logging

import typer

from passcraft.cli.console import Status, info_status, info_step
from passcraft.core.config import ConfigLoadError, resolve_config
from passcraft.core.defaults import (
    CONFIG_BANNER_WIDTH,
    DEFAULT_CMD,
    DEFAULT_LOG_LEVEL,
    DEFAULT_MODE,
    LOG_LEVEL_ENVVAR,
)
from passcraft.core.hashing import UnsupportedHashMethodError, format_password
from passcraft.core.host import PlatformInfo, detect_platform
from passcraft.core.logging import configure_logging
from passcraft.core.store import save_password
from passcraft.core.time import get_time_now
from passcraft.core.types import EffectiveConfig
from passcraft.core.validation import InvalidConfigError, validate_config

logger = logging.getLogger(__name__)

app = typer.Typer(help="Cross-platform password hash generator.")


@app.command()
def main(
    cmd: str = typer.Argument(DEFAULT_CMD, help="Command (accepted for compatibility; always adds)"),
    text: str | None = typer.Option(None, "--text", help="Identity list: name:..,email:..,site:.."),
    hash_params: str | None = typer.Option(None, "--hash", help="Hash list: method:..,cut:..,end:..,upper-start:.."),
    slkv: str | None = typer.Option(None, "--slkv", help="Combined identity and hash key-value list"),
    sslf: str | None = typer.Option(None, "--sslf", help="Compact form: <identity list>;<hash list>"),
    save: str | None = typer.Option(None, "--save", help="File to append the generated password to"),
    file: str | None = typer.Option(None, "--file", help="Config file; the last compact-form line wins"),
    show_config: bool = typer.Option(False, "--show-config", help="Show resolved configuration and exit"),
    show_platform: bool = typer.Option(False, "--show-platform", help="Show platform information and exit"),
    mode: str = typer.Option(DEFAULT_MODE, "--mode", help="Operation mode"),
    once: bool = typer.Option(False, "--once", help="Run once and exit"),
    log_level: str = typer.Option(DEFAULT_LOG_LEVEL, "--log-level", envvar=LOG_LEVEL_ENVVAR, help="Logging level"),
) -> None:
    """Generate a formatted password hash from name, email and site."""
    try:
        configure_logging(log_level)
    except ValueError as exc:
        raise typer.BadParameter(str(exc), param_hint="--log-level") from exc

    platform = detect_platform()

    if show_platform:
        _show_platform(platform)
        return

    logger.info("Starting pass-craft on %s (cmd=%s, mode=%s)", platform.display, cmd, mode)

    try:
        config = resolve_config(
            text=text, hash_params=hash_params, slkv=slkv, sslf=sslf,
            file=file, save=save,
        )
    except ConfigLoadError as exc:
        info_step("Configuration Error", fillchar="!")
        info_status(f"{get_time_now()} - Configuration loading failed: {exc}", Status.ERROR, err=True)
        info_status("Supported parameters:", err=True)
        info_status("  --text: User information (name, email, site)", err=True)
        info_status("  --hash: Hash parameters (method, cut, end, upper-start)", err=True)
        info_status("  --file: Configuration file path", err=True)
        raise typer.Exit(code=1)

    if show_config:
        _show_config(config, platform)
        return

    finding = validate_config(config)
    if finding is not None:
        info_step("Configuration Validation", fillchar="!")
        info_status(f"{get_time_now()} - Configuration validation failed: {finding.message}", Status.ERROR, err=True)
        raise typer.Exit(code=1)

    info_step("Current Configuration")
    info_status(f"Platform: {platform.display}", Status.SUCCESS)
    info_status(f"Algorithm: {config.method}", Status.SUCCESS)
    info_status(f"User: {config.name}", Status.SUCCESS)
    info_status(f"Site: {config.site}", Status.SUCCESS)
    info_status(
        f"Format: {config.cut_length} chars, end with '{config.end_char}', "
        f"first {config.upper_start} uppercase",
        Status.SUCCESS,
    )

    try:
        result = format_password(config)
    except (InvalidConfigError, UnsupportedHashMethodError) as exc:
        info_step("Password Generation Failed", fillchar="!")
        info_status(f"{get_time_now()} - Password generation failed: {exc}", Status.ERROR, err=True)
        raise typer.Exit(code=1)

    info_step("Password Generation Complete")
    info_status(f"{get_time_now()} - Generated Password: {result}", Status.SUCCESS)

    if config.output_file:
        info_step("Saving Result", fillchar="-")
        try:
            save_password(result, input_file=config.input_file, output_file=config.output_file)
        except OSError as exc:
            info_status(f"{get_time_now()} - Save failed: {exc}", Status.ERROR)
        else:
            info_status(f"{get_time_now()} - Successfully saved to: {config.output_file}", Status.SUCCESS)

    if once:
        info_step("Completed (One-time Mode)")


def _show_platform(platform: PlatformInfo) -> None:
    info_step("Platform Information")
    typer.echo(f"Operating System: {platform.os}")
    typer.echo(f"Architecture: {platform.arch}")
    typer.echo(f"Family: {platform.family}")
    typer.echo(f"Display Format: {platform.display}")


def _show_config(config: EffectiveConfig, platform: PlatformInfo) -> None:
    info_step("Password Hash Generator Configuration", CONFIG_BANNER_WIDTH)

    typer.echo("👤 User Information:")
    typer.echo(f"  Name: {config.name}")
    typer.echo(f"  Email: {config.email}")
    typer.echo(f"  Site: {config.site}")

    typer.echo("🔑 Hash Algorithm Configuration:")
    typer.echo(f"  Method: {config.method}")
    typer.echo(f"  Cut Length: {config.cut_length}")
    typer.echo(f"  End Character: {config.end_char}")
    typer.echo(f"  Upper Start: {config.upper_start}")

    typer.echo("📁 File Configuration:")
    typer.echo(f"  Input File: {config.input_file or 'Not set'}")
    typer.echo(f"  Output File: {config.output_file or 'Not set'}")

    typer.echo("🔧 Platform Configuration:")
    typer.echo(f"  Platform: {platform.display}")

    typer.echo("✅ Configuration Validation:")
    finding = validate_config(config)
    if finding is None:
        info_status("Status: Valid", Status.SUCCESS)
    else:
        info_status(f"Status: Invalid - {finding.message}", Status.ERROR)


if __name__ == "__main__":
    app()
