import logging

import pytest

from dns_probe.config import AnswerMatchConfig, ZoneConsistencyConfig
from dns_probe.runner import run_check, run_checks
from dns_probe.status import Status
from dns_probe.transport import ExchangeOutcome

from tests.support import SOA_TEXT, FakeTransport, answer_with, rrset


def _answer_config(server="192.0.2.1"):
    return AnswerMatchConfig(
        server=server, name="www.example.com", type="A", acceptable=("192.0.2.10",)
    )


def test_run_checks_returns_results_in_order(caplog) -> None:
    caplog.set_level(logging.INFO, logger="dns_probe.runner")
    transport = FakeTransport(
        {
            "192.0.2.1:53": answer_with(
                rrset("www.example.com.", "A", "192.0.2.10"),
            ),
            "192.0.2.2:53": ExchangeOutcome.timed_out(),
        }
    )

    results = run_checks(
        [_answer_config(), _answer_config("192.0.2.2")],
        transport=transport,
    )

    assert [result.status for result in results] == [Status.PASS, Status.FAIL]
    assert "dns www.example.com.|A @ 192.0.2.1:53: PASS" in caplog.text
    assert (
        "dns www.example.com.|A @ 192.0.2.2:53: FAIL - Timeout asking DNS question"
        in caplog.text
    )


def test_run_checks_validates_every_config_before_querying() -> None:
    transport = FakeTransport({"192.0.2.1:53": answer_with()})

    with pytest.raises(ValueError):
        run_checks(
            [_answer_config(), ZoneConsistencyConfig(domain="example.com", servers=("bad",))],
            transport=transport,
        )

    assert transport.calls == []


def test_run_checks_without_configs_logs_and_returns_empty(caplog) -> None:
    caplog.set_level(logging.INFO, logger="dns_probe.runner")

    assert run_checks([]) == []
    assert "No checks configured" in caplog.text


def test_run_check_performs_a_single_config() -> None:
    transport = FakeTransport(
        {
            "192.0.2.1:53": answer_with(rrset("example.com.", "SOA", SOA_TEXT)),
        }
    )

    result = run_check(
        ZoneConsistencyConfig(domain="example.com", servers=("192.0.2.1",)), transport=transport
    )

    assert result.healthy
    assert result.details["soa"] == SOA_TEXT
