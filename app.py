#!/usr/bin/env python3

import sys

import click
import yaml
from dotenv import load_dotenv

from business_id.config import get_settings
from business_id.error_details import get_error_human_message
from business_id.utils.logging import get_logger, setup_logging
from business_id.validation import BusinessIdValidator, ValidationReport

logger = get_logger(__name__)

# Sample IDs checked by the demo command
DEMO_BUSINESS_IDS = (
    "1234567-9",  # Fail, checksum
    "0357502-9",  # Pass
    "357502-9",  # Fail, old style six digit prefix
    "1234567a",  # Fail, format
    None,  # Fail, null
    "",  # Fail, empty string
)


def build_validator(descriptions: str | None) -> BusinessIdValidator:
    """Create a validator using the configured or given descriptions file"""
    settings = get_settings().catalog
    if descriptions:
        settings = settings.model_copy(update={"descriptions_file": descriptions})
    try:
        catalog = settings.load_catalog()
    except (OSError, ValueError, yaml.YAMLError) as e:
        logger.error("Could not load reason descriptions", error=str(e))
        raise click.ClickException(get_error_human_message(e)) from e
    return BusinessIdValidator(catalog)


def echo_report(report: ValidationReport, color: bool | None) -> None:
    """Print PASS/FAIL and the numbered reasons for one report"""
    click.echo(f"Check for {report.business_id or ''} ", nl=False)
    if report.satisfied:
        click.secho("PASS", fg="green", color=color)
    else:
        click.secho("FAIL", fg="red", color=color)
        click.echo(report.format_reasons())
    click.echo()


def resolve_color(no_color: bool) -> bool | None:
    """None lets click decide based on the terminal, False strips colours"""
    if no_color or not get_settings().output.color:
        return False
    return None


description_option = click.option(
    "--descriptions",
    type=click.Path(exists=True, file_okay=True, dir_okay=False),
    help="YAML file mapping failure reasons to description texts. "
    "Overrides BUSINESS_ID_DESCRIPTIONS_FILE.",
)
no_color_option = click.option(
    "--no-color",
    is_flag=True,
    default=False,
    help="Disable coloured PASS/FAIL output",
)


@click.group(invoke_without_command=True)
@click.pass_context
def cli(ctx) -> None:
    """Finnish Business ID (Y-tunnus) validator"""
    if ctx.invoked_subcommand is None:
        click.echo(ctx.get_help())


@cli.command()
@click.argument("business_ids", nargs=-1, required=True)
@description_option
@no_color_option
def check(business_ids, descriptions, no_color) -> None:
    """Validate one or more business IDs, e.g. 0357502-9"""
    validator = build_validator(descriptions)
    color = resolve_color(no_color)

    reports = [validator.validate(business_id) for business_id in business_ids]
    for report in reports:
        echo_report(report, color)

    if any(report.failed for report in reports):
        sys.exit(1)


@cli.command()
@description_option
@no_color_option
def demo(descriptions, no_color) -> None:
    """Validate a fixed list of sample business IDs"""
    validator = build_validator(descriptions)
    color = resolve_color(no_color)

    for business_id in DEMO_BUSINESS_IDS:
        echo_report(validator.validate(business_id), color)


def main() -> None:
    load_dotenv()
    setup_logging()
    cli()


if __name__ == "__main__":
    main()
