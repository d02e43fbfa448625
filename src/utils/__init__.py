"""
Vectoplus Messenger Utilities
=============================

Shared helper modules for the messenger Lambda:

- logger.py        → structured JSON logging
- config.py        → environment configuration + channel webhook table
- errors.py        → relay error taxonomy
- models.py        → Notification / FallbackEnvelope value objects
- slack_client.py  → Slack incoming-webhook delivery (requests)
- sns_client.py    → fallback publishing to SNS (boto3)
"""

from utils.logger import get_logger

__all__ = [
    "get_logger",
]
