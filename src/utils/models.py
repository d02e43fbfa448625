from dataclasses import dataclass
from typing import Any, Optional

from utils.errors import ValidationError

FALLBACK_SUBJECT_PREFIX = "[Slack Fallback] "


def _required_field(payload: dict, field: str) -> str:
    value = payload.get(field)
    # absent, empty, false or zero all count as missing
    if value is None or value == "" or (isinstance(value, (bool, int, float)) and not value):
        raise ValidationError(f"Missing required field: {field}")
    return value if isinstance(value, str) else str(value)


@dataclass(frozen=True)
class Notification:
    channel: str
    message: str
    emoji: Optional[str] = None

    @classmethod
    def from_payload(cls, payload: Any) -> "Notification":
        """
        Build a Notification from a parsed event payload.

        ``channel`` and ``message`` must be present and non-empty; numbers and
        other non-string values are converted to text. ``emoji`` is optional
        and ignored when empty.
        """
        if not isinstance(payload, dict):
            raise ValidationError(
                f"Payload must be a JSON object, got {type(payload).__name__}"
            )

        channel = _required_field(payload, "channel")
        message = _required_field(payload, "message")
        emoji = payload.get("emoji")

        return cls(channel=channel, message=message, emoji=str(emoji) if emoji else None)

    @property
    def text(self) -> str:
        return f"{self.emoji} {self.message}" if self.emoji else self.message


@dataclass(frozen=True)
class FallbackEnvelope:
    subject: str
    message: str

    @classmethod
    def for_notification(cls, notification: Notification) -> "FallbackEnvelope":
        return cls(
            subject=FALLBACK_SUBJECT_PREFIX + notification.channel,
            message=notification.text,
        )
