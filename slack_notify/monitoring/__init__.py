"""
Error Tracking for Slack Notify

Provides optional Sentry exception capture and breadcrumbs for each
notification stage.
"""

from .sentry import (
    init_sentry,
    add_breadcrumb,
    capture_exception,
)

__all__ = [
    'init_sentry',
    'add_breadcrumb',
    'capture_exception',
]
