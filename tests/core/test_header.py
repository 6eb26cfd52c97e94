from __future__ import annotations

from mail_access_scan.core.header import HeaderState


def test_push_collects_headers_until_blank_line() -> None:
    head = HeaderState()
    lines = ["From: router@example.com", "Subject: log", "Date: Mon, 1 Jan 2024"]

    accepted = [head.push(line) for line in lines]
    accepted.append(head.push(""))

    assert accepted == [True] * (len(lines) + 1)
    assert head.done
    assert head.headers == {
        "From": "router@example.com",
        "Subject": "log",
        "Date": "Mon, 1 Jan 2024",
    }


def test_push_after_done_returns_false_and_leaves_headers() -> None:
    head = HeaderState()
    head.push("Subject: x")
    head.push("")

    assert head.push("Other: y") is False
    assert head.push("") is False
    assert head.headers == {"Subject": "x"}


def test_later_duplicate_overwrites() -> None:
    head = HeaderState()
    head.push("Subject: first")
    head.push("Subject: second")
    assert head.headers == {"Subject": "second"}


def test_value_keeps_everything_after_first_delimiter() -> None:
    # Not truncated at a second ": "; the value is the whole remainder.
    head = HeaderState()
    head.push("Subject: alert: LAN access")
    assert head.headers == {"Subject": "alert: LAN access"}


def test_line_without_delimiter_maps_to_empty_key() -> None:
    head = HeaderState()
    head.push("garbage")
    head.push("Subject:no-space")
    assert head.headers == {"": ""}
    assert not head.done
