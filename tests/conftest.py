import logging

import pytest

from chatter_broadcaster import ModifyStringRequest


class FakeTransport:
    """Stands in for the rospy transport, time advances one period per sleep()."""

    def __init__(self, rate=10, max_ticks=3):
        self.rate = rate
        self.max_ticks = max_ticks
        self.periods = 0

        self.published = []
        self.transforms = []
        self.responses = []
        self.events = []

        self.handler = None
        # tick index -> inputs delivered at that tick's spin_once()
        self.scheduled_calls = {}

    def register_service(self, handler):
        self.handler = handler

    def is_alive(self):
        return self.periods < self.max_ticks

    def now(self):
        return self.periods / self.rate

    def publish(self, text):
        self.events.append("publish")
        self.published.append(text)

    def send_transform(self, sample):
        self.events.append("send_transform")
        self.transforms.append(sample)

    def spin_once(self):
        self.events.append("spin_once")
        for value in self.scheduled_calls.pop(self.periods, []):
            self.responses.append(self.handler.handle(ModifyStringRequest(input=value)))

    def sleep(self):
        self.events.append("sleep")
        self.periods += 1


@pytest.fixture
def rosout(caplog):
    caplog.set_level(logging.DEBUG, logger="rosout")
    return caplog


@pytest.fixture
def fake_transport():
    return FakeTransport
