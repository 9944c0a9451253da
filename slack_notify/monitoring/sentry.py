"""
Sentry Setup and Context Management

Initializes Sentry SDK and provides context enrichment helpers.
All helpers are no-ops until ``init_sentry`` succeeds and never raise.
"""

import logging
from typing import Any, Dict, Optional

import sentry_sdk
from sentry_sdk.integrations.logging import LoggingIntegration

from ..config import NotifyConfig

logger = logging.getLogger(__name__)

# Track initialization state
_sentry_initialized = False


def init_sentry(config: Optional[NotifyConfig] = None) -> bool:
    """
    Initialize Sentry SDK.

    Args:
        config: NotifyConfig with DSN (read from the environment if omitted)

    Returns:
        True if initialized successfully
    """
    global _sentry_initialized

    config = config or NotifyConfig.from_env()

    if _sentry_initialized:
        return True

    if not config.sentry_enabled:
        logger.debug("Sentry not configured, skipping initialization")
        return False

    try:
        # Log records become breadcrumbs only; events come from capture_exception
        logging_integration = LoggingIntegration(
            level=logging.INFO,
            event_level=None,
        )

        sentry_sdk.init(
            dsn=config.sentry_dsn,
            environment=config.sentry_environment,
            integrations=[logging_integration],
            send_default_pii=False,
            attach_stacktrace=True,
        )

        sentry_sdk.set_tag("slack_channel", config.slack_channel_name)
        sentry_sdk.set_tag("status_name", config.status_name)

        _sentry_initialized = True
        logger.debug("Sentry initialized successfully")
        return True

    except Exception as e:
        logger.error("Failed to initialize Sentry: %s", e)
        return False


def add_breadcrumb(message: str, category: str = "notify", data: Optional[Dict[str, Any]] = None) -> None:
    """Record a notification stage (github, slack) on the current scope."""
    if not _sentry_initialized:
        return

    try:
        sentry_sdk.add_breadcrumb(message=message, category=category, level="info", data=data)
    except Exception as e:
        logger.debug("Failed to add breadcrumb: %s", e)


def capture_exception(exception: Exception, tags: Optional[Dict[str, str]] = None) -> Optional[str]:
    """Report a delivery failure; returns the Sentry event ID, or None when not reported."""
    if not _sentry_initialized:
        return None

    try:
        with sentry_sdk.new_scope() as scope:
            for key, value in (tags or {}).items():
                scope.set_tag(key, value)
            return sentry_sdk.capture_exception(exception)
    except Exception as e:
        logger.debug("Failed to capture exception: %s", e)
        return None
