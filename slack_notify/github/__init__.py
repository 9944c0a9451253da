"""
GitHub Identity Module

Resolves commit authors to their organization SSO email.
"""

from .sso import (
    build_sso_query,
    extract_sso_email,
    lookup_sso_email,
    resolve_author_email,
)

__all__ = [
    'build_sso_query',
    'extract_sso_email',
    'lookup_sso_email',
    'resolve_author_email',
]
