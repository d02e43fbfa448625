from dispatcher import Dispatcher
from utils.config import load_config
from utils.logger import get_logger
from utils.slack_client import SlackWebhookClient
from utils.sns_client import SnsFallbackPublisher, build_sns_client

logger = get_logger("messenger")

# Config + clients are built once per container; a missing variable fails the cold start.
config = load_config()

dispatcher = Dispatcher(
    webhook_client=SlackWebhookClient(config.endpoints, timeout=config.webhook_timeout),
    fallback_publisher=SnsFallbackPublisher(
        build_sns_client(config.region_name), config.fallback_topic_arn
    ),
)


def lambda_handler(event, context):
    records = event.get("Records") or []
    logger.info(
        "messenger.lambda_start",
        extra={
            "request_id": getattr(context, "aws_request_id", None),
            "records": len(records),
        },
    )

    report = dispatcher.dispatch(records)

    # The invocation itself always succeeds; per-record failures live in the logs.
    return report.to_dict()
