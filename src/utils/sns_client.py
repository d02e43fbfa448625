from typing import Optional

import boto3
from botocore.config import Config
from botocore.exceptions import BotoCoreError, ClientError

from utils.errors import FallbackFailure
from utils.logger import get_logger
from utils.models import FallbackEnvelope

logger = get_logger("sns_client")

# Single attempt per publish, and never wait longer than the Lambda allows.
_SNS_CLIENT_CONFIG = Config(
    connect_timeout=3,
    read_timeout=5,
    retries={"max_attempts": 1, "mode": "standard"},
)


def build_sns_client(region_name: str):
    """
    Create the boto3 SNS client used for fallback publishing.
    """
    logger.info("Creating SNS client", extra={"region": region_name})
    return boto3.client("sns", region_name=region_name, config=_SNS_CLIENT_CONFIG)


class SnsFallbackPublisher:
    """Publishes fallback envelopes to one fixed SNS topic."""

    def __init__(self, client, topic_arn: str):
        self._client = client
        self._topic_arn = topic_arn

    @property
    def topic_arn(self) -> str:
        return self._topic_arn

    def publish(self, envelope: FallbackEnvelope) -> Optional[str]:
        """
        Publish ``envelope`` once. Returns the SNS MessageId.

        Raises FallbackFailure if the publish call fails.
        """
        try:
            resp = self._client.publish(
                TopicArn=self._topic_arn,
                Subject=envelope.subject,
                Message=envelope.message,
            )
        except (ClientError, BotoCoreError) as e:
            raise FallbackFailure(f"SNS publish failed: {e}") from e

        return (resp or {}).get("MessageId")
