"""
Configuration management commands.
"""

from pathlib import Path
from typing import Optional
import click
from dotenv import dotenv_values, set_key
from conlluedit.config.validation import validate_config, ValidationResult

CONFIG_KEYS = ("LOG_LEVEL", "LOG_FILE", "CHECK_HEADS", "ALIGN_PADDING")


def print_validation_result(key: str, result: ValidationResult) -> None:
    """Print validation result with appropriate formatting."""
    if result.is_valid:
        click.echo(f"✅ {key}: {result.message}")
    else:
        click.echo(f"❌ {key}: {result.message}")


@click.group()
def config() -> None:
    """Manage conlluedit configuration."""
    pass


@config.command()
@click.argument("key")
@click.argument("value")
@click.option("--env-file", default=".env", help="Path to .env file")
def set(key: str, value: str, env_file: str) -> None:
    """Set configuration value."""
    if key not in CONFIG_KEYS:
        click.echo(f"❌ Invalid configuration key: {key}")
        return

    result = validate_config({key: value})[key]
    if not result.is_valid:
        click.echo(f"❌ Invalid value for {key}: {result.message}")
        return

    Path(env_file).touch(exist_ok=True)
    set_key(env_file, key, value)
    click.echo(f"✅ Successfully set {key}")


@config.command()
@click.argument("key", required=False)
@click.option("--env-file", default=".env", help="Path to .env file")
def get(key: Optional[str], env_file: str) -> None:
    """Get configuration value(s)."""
    if not Path(env_file).exists():
        click.echo("❌ Environment file not found")
        return

    config_values = dotenv_values(env_file)
    if key:
        if key not in config_values:
            click.echo("Key not found")
            return
        click.echo(f"{key}={config_values[key]}")
    else:
        for k, v in config_values.items():
            click.echo(f"{k}={v}")


@config.command()
@click.option("--env-file", default=".env", help="Path to .env file")
def validate(env_file: str) -> None:
    """Validate conlluedit configuration."""
    if not Path(env_file).exists():
        click.echo(f"❌ Environment file not found: {env_file}")
        raise SystemExit(1)

    config_values = dotenv_values(env_file)
    results = validate_config({key: config_values.get(key) for key in CONFIG_KEYS})

    click.echo("Validating configuration...")
    click.echo("=" * 40)

    all_valid = True
    for key, result in results.items():
        print_validation_result(key, result)
        if not result.is_valid:
            all_valid = False

    click.echo("=" * 40)
    if all_valid:
        click.echo("✨ All configuration settings are valid!")
    else:
        click.echo("⚠️  Some configuration settings need attention.")
        raise SystemExit(1)
