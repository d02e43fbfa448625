"""
Vectoplus Messenger
===================

AWS Lambda relay that forwards site alerts published to an SNS topic into
Slack channels through incoming webhooks. When a webhook delivery fails, the
alert is republished to a fallback SNS topic instead.

Modules under this package:
- messenger.py  → SNS-triggered Lambda entry point (lambda_handler)
- dispatcher.py → per-record parse / deliver / fall back loop
- utils/        → Shared helper modules (logging, config, Slack + SNS clients)

Environment variables expected:
  • CHANNEL_WEBHOOK_GENERAL, CHANNEL_WEBHOOK_ERRORS, CHANNEL_WEBHOOK_UPLOAD,
    CHANNEL_WEBHOOK_TRANSACTIONS, CHANNEL_WEBHOOK_CONTRIBUTOR_SIGNUP,
    CHANNEL_WEBHOOK_SIGNUPS     - Slack incoming webhook URL per channel
  • FALLBACK_DESTINATION_ID     - ARN of the fallback SNS topic
  • WEBHOOK_TIMEOUT_SECONDS     - Slack request timeout (default: 5)
  • AWS_REGION                  - AWS region for the SNS client
  • LOG_LEVEL                   - Log verbosity (default: INFO)

All handlers in this package are stateless and Lambda-optimized.
"""

__version__ = "1.0.0"
__author__ = "Vectoplus Engineering"
__license__ = "MIT"

__all__ = ["__version__", "__author__"]
