import json
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, Iterable, List, Optional

from utils.errors import DeliveryFailure, FallbackFailure, ParseError, ValidationError
from utils.logger import get_logger
from utils.models import FallbackEnvelope, Notification

logger = get_logger("messenger")


class RecordOutcome(str, Enum):
    DELIVERED = "delivered"
    FALLBACK = "fallback"
    FALLBACK_FAILED = "fallback_failed"
    SKIPPED = "skipped"
    FAILED = "failed"


@dataclass
class RecordResult:
    index: int
    outcome: RecordOutcome
    channel: Optional[str] = None
    reason: Optional[str] = None


@dataclass
class BatchReport:
    results: List[RecordResult] = field(default_factory=list)

    def counts(self) -> Dict[str, int]:
        counts = {outcome.value: 0 for outcome in RecordOutcome}
        for result in self.results:
            counts[result.outcome.value] += 1
        return counts

    def to_dict(self) -> Dict[str, Any]:
        return {
            "records": len(self.results),
            "outcomes": self.counts(),
        }


def extract_payload(record: Dict[str, Any]) -> str:
    """
    Return the raw JSON string carried by an SNS or SQS record.
    """
    sns = record.get("Sns")
    if isinstance(sns, dict) and isinstance(sns.get("Message"), str):
        return sns["Message"]

    body = record.get("body")
    if isinstance(body, str):
        return body

    raise ParseError("Record carries no message payload")


def parse_notification(raw: str) -> Notification:
    try:
        payload = json.loads(raw)
    except json.JSONDecodeError as e:
        raise ParseError(f"Invalid JSON payload: {e}") from e

    return Notification.from_payload(payload)


class Dispatcher:
    """
    Relays each record to Slack, falling back to SNS when Slack fails.

    Records are handled one at a time and in order; a failure on one record
    never stops the rest of the batch.
    """

    def __init__(self, webhook_client, fallback_publisher):
        self.webhook_client = webhook_client
        self.fallback_publisher = fallback_publisher

    def dispatch(self, records: Iterable[Dict[str, Any]]) -> BatchReport:
        report = BatchReport()

        for index, record in enumerate(records):
            try:
                result = self._process(index, record)
            except Exception as e:
                logger.exception(
                    "messenger.record_error",
                    extra={"index": index, "error": str(e)},
                )
                result = RecordResult(index, RecordOutcome.FAILED, reason=str(e))
            report.results.append(result)

        logger.info("messenger.batch_complete", extra=report.to_dict())
        return report

    def _process(self, index: int, record: Dict[str, Any]) -> RecordResult:
        # 1) Parse
        try:
            raw = extract_payload(record)
            notification = parse_notification(raw)
        except ParseError as e:
            logger.warning(
                "messenger.record_invalid_json",
                extra={"index": index, "error": str(e), "preview": str(record)[:200]},
            )
            return RecordResult(index, RecordOutcome.SKIPPED, reason=str(e))
        except ValidationError as e:
            logger.error(
                "messenger.record_missing_fields",
                extra={"index": index, "error": str(e), "preview": raw[:200]},
            )
            return RecordResult(index, RecordOutcome.SKIPPED, reason=str(e))

        channel = notification.channel

        # 2) Primary: Slack webhook
        try:
            self.webhook_client.deliver(notification)
        except DeliveryFailure as e:
            logger.warning(
                "messenger.fallback_triggered",
                extra={"index": index, "channel": channel, "reason": str(e)},
            )
            return self._fall_back(index, notification, reason=str(e))

        logger.info("messenger.delivered", extra={"index": index, "channel": channel})
        return RecordResult(index, RecordOutcome.DELIVERED, channel=channel)

    def _fall_back(self, index: int, notification: Notification, reason: str) -> RecordResult:
        envelope = FallbackEnvelope.for_notification(notification)
        channel = notification.channel

        # 3) Fallback: SNS, one attempt
        try:
            message_id = self.fallback_publisher.publish(envelope)
        except FallbackFailure as e:
            logger.error(
                "messenger.fallback_failed",
                extra={
                    "index": index,
                    "channel": channel,
                    "subject": envelope.subject,
                    "error": str(e),
                },
            )
            return RecordResult(
                index, RecordOutcome.FALLBACK_FAILED, channel=channel, reason=str(e)
            )

        logger.info(
            "messenger.fallback_sent",
            extra={
                "index": index,
                "channel": channel,
                "subject": envelope.subject,
                "message_id": message_id,
            },
        )
        return RecordResult(index, RecordOutcome.FALLBACK, channel=channel, reason=reason)
