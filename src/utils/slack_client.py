# utils/slack_client.py

import json
from typing import Mapping, Optional

import requests

from utils.errors import DeliveryFailure, NoDestinationError
from utils.logger import get_logger
from utils.models import Notification

logger = get_logger("slack_client")


class SlackWebhookClient:
    """
    Posts notifications to Slack incoming webhooks.

    ``endpoints`` maps a channel name (e.g. "#general") to its webhook URL and
    is never modified. Exactly one POST is made per ``deliver`` call.
    """

    def __init__(
        self,
        endpoints: Mapping[str, str],
        timeout: float,
        session: Optional[requests.Session] = None,
    ):
        self._endpoints = endpoints
        self._timeout = timeout
        self._session = session or requests.Session()

    def resolve(self, channel: str) -> Optional[str]:
        return self._endpoints.get(channel)

    def deliver(self, notification: Notification) -> None:
        """
        Send ``notification`` to its channel's webhook.

        Raises NoDestinationError if the channel has no webhook, and
        DeliveryFailure on timeouts, transport errors or any status other
        than 200.
        """
        webhook_url = self.resolve(notification.channel)
        if not webhook_url:
            raise NoDestinationError(
                f"No webhook configured for channel: {notification.channel}"
            )

        body = json.dumps({"text": notification.text}, ensure_ascii=False).encode("utf-8")
        headers = {
            "Content-Type": "application/json",
            "Content-Length": str(len(body)),
        }

        try:
            resp = self._session.post(
                webhook_url,
                data=body,
                headers=headers,
                timeout=self._timeout,
            )
        except requests.Timeout as e:
            raise DeliveryFailure(
                f"Slack request timed out after {self._timeout}s: {e}"
            ) from e
        except requests.RequestException as e:
            raise DeliveryFailure(f"Slack request failed: {e}") from e

        if resp.status_code != 200:
            raise DeliveryFailure(f"Slack returned status {resp.status_code}")

        logger.debug(
            "slack_client.posted",
            extra={"channel": notification.channel, "status_code": resp.status_code},
        )
