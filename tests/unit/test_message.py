from __future__ import annotations

from relay.gateway.message import render_mention, compose_message


def test_compose_message_matches_expected_layout() -> None:
    assert compose_message(["1", "2"], "Heads up! ") == (
        "Heads up! \n<@1> <@2>\nJust a friendly reminder to check in!"
    )


def test_compose_message_falls_back_to_default_prefix() -> None:
    assert compose_message(["1"]) == "Heads up! \n<@1>\nJust a friendly reminder to check in!"
    assert compose_message(["1"], "") == compose_message(["1"], None)


def test_compose_message_keeps_order_and_duplicates() -> None:
    text = compose_message(["3", "1", "3"], "x", suffix="done")
    assert text == "x\n<@3> <@1> <@3>\ndone"


def test_render_mention() -> None:
    assert render_mention("42") == "<@42>"
