import json
import os

import pytest

EVENTS_DIR = os.path.join(os.path.dirname(os.path.abspath(__file__)), "events")

WEBHOOK_ENV = {
    "CHANNEL_WEBHOOK_GENERAL": "https://hooks.slack.test/general",
    "CHANNEL_WEBHOOK_ERRORS": "https://hooks.slack.test/errors",
    "CHANNEL_WEBHOOK_UPLOAD": "https://hooks.slack.test/uploads",
    "CHANNEL_WEBHOOK_TRANSACTIONS": "https://hooks.slack.test/transactions",
    "CHANNEL_WEBHOOK_CONTRIBUTOR_SIGNUP": "https://hooks.slack.test/contributors",
    "CHANNEL_WEBHOOK_SIGNUPS": "https://hooks.slack.test/signups",
    "FALLBACK_DESTINATION_ID": "arn:aws:sns:us-east-1:123456789012:messenger-fallback",
}


def load_event(name):
    with open(os.path.join(EVENTS_DIR, name), "r", encoding="utf-8") as f:
        return json.load(f)


@pytest.fixture
def messenger_env(monkeypatch):
    for key, value in WEBHOOK_ENV.items():
        monkeypatch.setenv(key, value)
    monkeypatch.setenv("AWS_REGION", "us-east-1")
    monkeypatch.delenv("WEBHOOK_TIMEOUT_SECONDS", raising=False)
    return dict(WEBHOOK_ENV)


class StubResponse:
    def __init__(self, status_code=200):
        self.status_code = status_code


class StubSession:
    """Stands in for requests.Session; records every POST."""

    def __init__(self, status_code=200, exc=None):
        self.status_code = status_code
        self.exc = exc
        self.calls = []

    def post(self, url, data=None, headers=None, timeout=None):
        self.calls.append({"url": url, "data": data, "headers": headers, "timeout": timeout})
        if self.exc is not None:
            raise self.exc
        return StubResponse(self.status_code)


class StubSNS:
    """Stands in for the boto3 SNS client."""

    def __init__(self, exc=None):
        self.exc = exc
        self.published = []

    def publish(self, TopicArn, Subject, Message):
        self.published.append({"TopicArn": TopicArn, "Subject": Subject, "Message": Message})
        if self.exc is not None:
            raise self.exc
        return {"MessageId": f"msg-{len(self.published)}"}
