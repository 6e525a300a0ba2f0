from typing import Any

import pytest

from patternshowcase.observer import (
    EmailNotifier,
    EventManager,
    Observer,
    SlackNotifier,
    run,
)


class Recorder(Observer):
    def __init__(self, name: str, log: list) -> None:
        self.name = name
        self.log = log

    def on_event(self, event: str, payload: Any) -> None:
        self.log.append((self.name, event, payload))


def test_publish_reaches_subscribers_in_order():
    log: list = []
    manager = EventManager()
    manager.subscribe("a", Recorder("first", log))
    manager.subscribe("a", Recorder("second", log))
    manager.publish("a", 42)
    assert log == [("first", "a", 42), ("second", "a", 42)]


def test_publish_only_to_matching_event():
    log: list = []
    manager = EventManager()
    manager.subscribe("a", Recorder("x", log))
    manager.subscribe("b", Recorder("y", log))
    manager.publish("b", "data")
    assert log == [("y", "b", "data")]


def test_publish_without_subscribers_does_nothing():
    log: list = []
    manager = EventManager()
    manager.subscribe("a", Recorder("x", log))
    manager.publish("missing", None)
    assert log == []


def test_email_notifier_prints_for_in_stock(capsys):
    EmailNotifier("shop@example.com").on_event("product:in_stock", "Lamp")
    out = capsys.readouterr().out
    assert out == "[Email to shop@example.com] Event: product:in_stock -> Lamp is available!\n"


def test_slack_notifier_prints_for_in_stock(capsys):
    SlackNotifier("stock-updates").on_event("product:in_stock", "Lamp")
    out = capsys.readouterr().out
    assert out == "[Slack #stock-updates] Event: product:in_stock -> Lamp is available!\n"


@pytest.mark.parametrize(
    "notifier",
    [EmailNotifier("shop@example.com"), SlackNotifier("general")],
)
@pytest.mark.parametrize(
    "event,payload",
    [("product:in_stock", 5), ("product:out_of_stock", "Lamp")],
)
def test_notifiers_ignore_other_events_and_payloads(capsys, notifier, event, payload):
    notifier.on_event(event, payload)
    assert capsys.readouterr().out == ""


def test_observer_is_abstract():
    with pytest.raises(TypeError):
        Observer()


def test_run_output(capsys):
    run()
    lines = capsys.readouterr().out.splitlines()
    assert len(lines) == 2
    assert lines[0].startswith("[Email to ")
    assert lines[1] == "[Slack #stock-updates] Event: product:in_stock -> Product is available!"