import logging
import sys

import click
from flask import current_app
from flask.cli import AppGroup

from services import get_services
from services.email_service import DeliveryError
from ..cli_constants import COMMAND_GROUP_REPORTS, EXIT_ERROR, RECENT_COLUMNS

logger = logging.getLogger(__name__)
reports_cli = AppGroup(COMMAND_GROUP_REPORTS, help='Signup digest reports.')


@reports_cli.command('send-digest')
@click.option('--label', default=None, help='Report title (defaults to REPORT_DEFAULT_LABEL)')
def send_digest(label: str) -> None:
    """Email the most recent signups to the report recipient."""
    label = label or current_app.config.get('REPORT_DEFAULT_LABEL')
    try:
        result = get_services().reports.generate(label)
    except DeliveryError as e:
        logger.error("Digest failed: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    click.echo(result.message)


@reports_cli.command('send-test')
def send_test() -> None:
    """Email a digest built from sample rows."""
    try:
        result = get_services().reports.send_test_report()
    except DeliveryError as e:
        logger.error("Test report failed: %s", e)
        click.echo(f"Error: {e}", err=True)
        sys.exit(EXIT_ERROR)

    click.echo(result.message)


@reports_cli.command('recent')
@click.option('--limit', default=None, type=click.IntRange(min=1),
              help='Number of rows to show (defaults to REPORT_LIMIT)')
def recent(limit: int) -> None:
    """Print the most recent signups."""
    services = get_services()
    limit = limit or current_app.config.get('REPORT_LIMIT')
    rows = services.store.read_recent(limit)
    if not rows:
        click.echo('No signups found')
        return

    for row in rows:
        click.echo(' | '.join(str(row.get(column, '')) for column in RECENT_COLUMNS))
