"""
Slack Notification Client

Looks up Slack users by email and posts plain text messages through the
Slack Web API.
"""

import logging
from typing import Optional

from slack_sdk import WebClient
from slack_sdk.errors import SlackApiError, SlackClientError

from ..config import DEFAULT_API_TIMEOUT
from ..monitoring import capture_exception
from ..types import LookupResult, PostAck, SlackUser

logger = logging.getLogger(__name__)


class SlackNotifier:
    """
    Sends commit status notifications to Slack as the authenticated bot.

    Usage:
        notifier = SlackNotifier(token)
        lookup = notifier.lookup_user_by_email("alice@example.com")
        notifier.send("#ci", text)

    Neither method raises on Slack or network errors; failures are logged
    and reported through the return value.
    """

    def __init__(
        self,
        token: str,
        client: Optional[WebClient] = None,
        timeout: int = DEFAULT_API_TIMEOUT,
    ):
        """
        Initialize Slack notifier.

        Args:
            token: Slack bot/user access token
            client: Optional preconfigured WebClient (tests inject a mock)
            timeout: Request timeout in seconds
        """
        self._client = client or WebClient(token=token, timeout=timeout)

    def lookup_user_by_email(self, email: str) -> LookupResult[SlackUser]:
        """
        Find the Slack account registered with ``email``.

        Returns:
            LookupResult with the SlackUser, or a miss when no account
            matches or the lookup failed
        """
        if not email:
            return LookupResult.miss("no email to look up")

        try:
            response = self._client.users_lookupByEmail(email=email)
        except SlackApiError as e:
            logger.warning("Error getting Slack user by email %s: %s", email, e.response.get('error', e))
            return LookupResult.miss(str(e.response.get('error', e)))
        except (SlackClientError, OSError) as e:
            logger.warning("Error getting Slack user by email %s: %s", email, e)
            return LookupResult.miss(str(e))

        user = response.get('user') or {}
        user_id = user.get('id')
        if not user_id:
            logger.warning("Slack returned no user id for %s", email)
            return LookupResult.miss("user without id")

        return LookupResult.hit(SlackUser(
            id=user_id,
            name=user.get('name') or '',
            real_name=user.get('real_name') or '',
        ))

    def send(self, channel: str, text: str) -> Optional[PostAck]:
        """
        Post ``text`` to ``channel`` as plain text.

        Returns:
            PostAck on success, None if Slack rejected the message
        """
        try:
            response = self._client.chat_postMessage(
                channel=channel,
                text=text,
                as_user=True,
            )
        except SlackApiError as e:
            logger.error("Error posting message to Slack: %s", e.response.get('error', e))
            capture_exception(e, tags={"stage": "post_message"})
            return None
        except (SlackClientError, OSError) as e:
            logger.error("Error posting message to Slack: %s", e)
            capture_exception(e, tags={"stage": "post_message"})
            return None

        ack = PostAck(channel=response.get('channel') or channel, ts=response.get('ts') or '')
        logger.info("Message sent to channel %s at %s", ack.channel, ack.ts)
        return ack
