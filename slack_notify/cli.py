"""
Slack Notify CLI

Posts a commit status notification to Slack.

Usage:
    slack-notify [OPTIONS]

Every option can also be supplied through its environment variable
(e.g. GITHUB_ACCESS_TOKEN for --github-access-token) or a .env file.
"""

import logging
import sys

import click
from dotenv import load_dotenv

from .config import DEFAULT_API_TIMEOUT, NotifyConfig
from .monitoring import init_sentry
from .pipeline import notify_commit_status

logger = logging.getLogger(__name__)


def setup_logging(verbose: bool, quiet: bool = False):
    """Configure logging to output to stdout."""
    if quiet:
        level = logging.WARNING
    else:
        level = logging.DEBUG if verbose else logging.INFO
    logging.basicConfig(
        level=level,
        format='%(message)s',  # Simple format for CLI
        handlers=[logging.StreamHandler(sys.stdout)],
        force=True,
    )


def _env_option(name: str, help_text: str):
    """Option backed by the environment variable of the same name."""
    return click.option(
        '--' + name.lower().replace('_', '-'),
        name.lower(),
        envvar=name,
        default='',
        show_envvar=True,
        help=help_text,
    )


@click.command()
@_env_option('GITHUB_ACCESS_TOKEN', 'GitHub token, used to get the author SSO email')
@_env_option('SLACK_ACCESS_TOKEN', 'Slack token, used to match emails to users and post')
@_env_option('SLACK_CHANNEL_NAME', 'Slack channel to post to')
@_env_option('COMMIT_URL', 'GitHub commit URL')
@_env_option('COMMIT_AUTHOR_USERNAME', 'GitHub commit author username')
@_env_option('COMMIT_AUTHOR_EMAIL', 'GitHub commit author email')
@_env_option('COMMIT_MESSAGE', 'GitHub commit message')
@_env_option('STATUS_CONCLUSION', 'GitHub commit status conclusion')
@_env_option('STATUS_URL', 'GitHub commit status URL')
@_env_option('STATUS_NAME', 'GitHub commit status name')
@_env_option('STATUS_DESCRIPTION', 'GitHub commit status description')
@click.option('--api-timeout', envvar='API_TIMEOUT', default=DEFAULT_API_TIMEOUT, type=int,
              show_envvar=True, help='HTTP timeout in seconds')
@click.option('--sentry-dsn', envvar='SENTRY_DSN', default=None, help='Sentry DSN (optional)')
@click.option('--sentry-environment', envvar='SENTRY_ENVIRONMENT', default='production',
              help='Sentry environment name')
@click.option('-v', '--verbose', is_flag=True, help='Verbose output (show DEBUG logs)')
@click.option('-q', '--quiet', is_flag=True, help='Quiet mode (only show warnings/errors)')
def cli(verbose, quiet, **settings):
    """Notify a Slack channel about a GitHub commit status."""
    setup_logging(verbose, quiet)
    logger.info("Running slack-notify")

    config = NotifyConfig(**settings)
    missing = config.missing_fields()
    if missing:
        logger.warning("Missing configuration: %s", ', '.join(missing))

    init_sentry(config)

    outcome = notify_commit_status(config)
    if not outcome.sent:
        logger.warning("Notification for %s was not delivered", outcome.status.name or 'unknown step')


def main():
    load_dotenv()
    cli()


if __name__ == '__main__':
    main()
