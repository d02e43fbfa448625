import os
from dataclasses import dataclass
from types import MappingProxyType
from typing import Mapping, Optional

from utils.errors import ConfigurationError
from utils.logger import get_logger

logger = get_logger("config")

# Slack channel -> environment variable holding its incoming webhook URL
CHANNEL_WEBHOOK_VARS = {
    "#general": "CHANNEL_WEBHOOK_GENERAL",
    "#site-errors": "CHANNEL_WEBHOOK_ERRORS",
    "#uploads": "CHANNEL_WEBHOOK_UPLOAD",
    "#transactions": "CHANNEL_WEBHOOK_TRANSACTIONS",
    "#contributors": "CHANNEL_WEBHOOK_CONTRIBUTOR_SIGNUP",
    "#signups": "CHANNEL_WEBHOOK_SIGNUPS",
}

FALLBACK_DESTINATION_VAR = "FALLBACK_DESTINATION_ID"

DEFAULT_WEBHOOK_TIMEOUT_SECONDS = "5"
DEFAULT_REGION = "us-east-1"


@dataclass(frozen=True)
class MessengerConfig:
    endpoints: Mapping[str, str]
    fallback_topic_arn: str
    webhook_timeout: float
    region_name: str


def load_config(environ: Optional[Mapping[str, str]] = None) -> MessengerConfig:
    """
    Load and validate the relay configuration from environment variables.

    Every CHANNEL_WEBHOOK_* variable and FALLBACK_DESTINATION_ID is required.
    WEBHOOK_TIMEOUT_SECONDS is optional (default 5) and must be a positive
    number. AWS_REGION defaults to us-east-1.

    Raises ConfigurationError naming every missing/invalid variable.
    """
    env = os.environ if environ is None else environ

    required = list(CHANNEL_WEBHOOK_VARS.values()) + [FALLBACK_DESTINATION_VAR]
    missing = [name for name in required if not env.get(name)]

    if missing:
        msg = f"Missing required environment variables: {', '.join(missing)}"
        logger.error(msg)
        raise ConfigurationError(msg)

    timeout_str = env.get("WEBHOOK_TIMEOUT_SECONDS") or DEFAULT_WEBHOOK_TIMEOUT_SECONDS
    try:
        webhook_timeout = float(timeout_str)
    except ValueError:
        webhook_timeout = 0.0

    if webhook_timeout <= 0:
        msg = (
            f"Invalid WEBHOOK_TIMEOUT_SECONDS='{timeout_str}'. "
            "Must be a positive number of seconds."
        )
        logger.error(msg)
        raise ConfigurationError(msg)

    endpoints = MappingProxyType(
        {channel: env[var] for channel, var in CHANNEL_WEBHOOK_VARS.items()}
    )

    config = MessengerConfig(
        endpoints=endpoints,
        fallback_topic_arn=env[FALLBACK_DESTINATION_VAR],
        webhook_timeout=webhook_timeout,
        region_name=env.get("AWS_REGION") or DEFAULT_REGION,
    )
    logger.debug(
        "config.loaded",
        extra={
            "channels": sorted(endpoints),
            "fallback_topic_arn": config.fallback_topic_arn,
            "webhook_timeout": webhook_timeout,
            "region": config.region_name,
        },
    )
    return config
