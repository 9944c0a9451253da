"""
GitHub SSO Identity Lookup

Maps a GitHub username to the email bound to it by the organization's SAML
identity provider, using the GraphQL API.
"""

import logging
from typing import Any, Optional

import requests

from ..config import DEFAULT_API_TIMEOUT, GITHUB_GRAPHQL_URL, GITHUB_ORGANIZATION
from ..types import LookupResult

logger = logging.getLogger(__name__)

SSO_QUERY_TEMPLATE = (
    'query {{organization(login: "{organization}"){{samlIdentityProvider{{'
    'externalIdentities(first: 1, login: "{username}") '
    '{{edges {{node {{samlIdentity {{nameId}}}}}}}}}}}}}}'
)


def build_sso_query(username: str, organization: str = GITHUB_ORGANIZATION) -> str:
    """Build the GraphQL query for the first external identity of ``username``."""
    return SSO_QUERY_TEMPLATE.format(organization=organization, username=username)


def extract_sso_email(payload: Any) -> LookupResult[str]:
    """
    Pull the first ``nameId`` out of a GraphQL response body.

    Missing or null levels are treated the same as an empty edge list.
    """
    if not isinstance(payload, dict):
        return LookupResult.miss("unexpected response body")

    provider = ((payload.get('data') or {}).get('organization') or {}).get('samlIdentityProvider') or {}
    edges = (provider.get('externalIdentities') or {}).get('edges') or []
    if not edges:
        return LookupResult.miss("no external identity edges")

    node = (edges[0] or {}).get('node') or {}
    name_id = (node.get('samlIdentity') or {}).get('nameId')
    if not name_id:
        return LookupResult.miss("external identity has no nameId")

    return LookupResult.hit(str(name_id))


def lookup_sso_email(
    username: str,
    token: str,
    session: Optional[requests.Session] = None,
    timeout: int = DEFAULT_API_TIMEOUT,
) -> LookupResult[str]:
    """
    Query GitHub for the SSO email of ``username``.

    Args:
        username: GitHub login of the commit author
        token: GitHub access token with ``admin:org`` read scope
        session: Optional requests session (tests inject one)
        timeout: Request timeout in seconds

    Returns:
        LookupResult with the email, or a miss describing the failure
    """
    post = session.post if session is not None else requests.post
    headers = {'Authorization': f'Bearer {token}'}
    body = {'query': build_sso_query(username)}

    try:
        response = post(GITHUB_GRAPHQL_URL, json=body, headers=headers, timeout=timeout)
    except requests.RequestException as e:
        logger.warning("Error requesting GitHub SSO identity for %s: %s", username, e)
        return LookupResult.miss(str(e))

    if response.status_code >= 400:
        logger.warning("GitHub API returned %s for SSO lookup of %s", response.status_code, username)

    try:
        payload = response.json()
    except ValueError as e:
        logger.warning("Error decoding GitHub API response body: %s", e)
        return LookupResult.miss(f"undecodable response: {e}")

    result = extract_sso_email(payload)
    if not result.found:
        logger.warning("No SSO email for %s in GitHub API response: %s", username, result.error)
    return result


def resolve_author_email(
    username: str,
    fallback_email: str,
    token: str,
    session: Optional[requests.Session] = None,
    timeout: int = DEFAULT_API_TIMEOUT,
) -> str:
    """
    Resolve the commit author's verified email.

    Returns the SSO email when GitHub knows one, ``fallback_email`` otherwise.
    """
    result = lookup_sso_email(username, token, session=session, timeout=timeout)
    if result.found:
        logger.info("Resolved %s to SSO email %s", username, result.value)
    else:
        logger.info("Using commit email %s for %s", fallback_email, username)
    return result.value_or(fallback_email)
