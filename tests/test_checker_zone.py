import dns.rcode
import pytest

from dns_probe.checker import ZoneConsistencyChecker
from dns_probe.status import Status
from dns_probe.transport import ExchangeOutcome

from tests.support import SOA_TEXT, FakeTransport, answer_with, query_has_do, query_has_rd, rrset

NEWER_SOA = "ns1.example.com. hostmaster.example.com. 2024010102 7200 3600 1209600 3600"


def _soa(text=SOA_TEXT, owner="example.com."):
    return answer_with(rrset(owner, "SOA", text))


def test_identical_soa_across_servers_is_healthy():
    transport = FakeTransport({"192.0.2.1:53": _soa(), "192.0.2.2:53": _soa()})
    checker = ZoneConsistencyChecker("example.com", ["192.0.2.1", "192.0.2.2"], transport=transport)

    result = checker.perform()

    assert result.healthy
    assert result.message == ""
    assert result.details["soa"] == SOA_TEXT
    assert transport.servers == ["192.0.2.1:53", "192.0.2.2:53"]


def test_differing_serials_list_both_variants():
    transport = FakeTransport({"192.0.2.1:53": _soa(), "192.0.2.2:53": _soa(NEWER_SOA)})
    checker = ZoneConsistencyChecker("example.com", ["192.0.2.1", "192.0.2.2"], transport=transport)

    result = checker.perform()

    assert result.status is Status.FAIL
    assert result.message.startswith("Had different SOA records for example.com.: {")
    assert SOA_TEXT in result.message
    assert NEWER_SOA in result.message
    assert result.details["found"] == sorted([SOA_TEXT, NEWER_SOA])


def test_missing_soa_stops_before_later_servers():
    transport = FakeTransport(
        {
            "192.0.2.1:53": answer_with(),
            "192.0.2.2:53": _soa(),
        }
    )
    checker = ZoneConsistencyChecker("example.com", ["192.0.2.1", "192.0.2.2"], transport=transport)

    result = checker.perform()

    assert result.status is Status.FAIL
    assert result.message == "DNS server 192.0.2.1:53 did not return a SOA for example.com."
    assert transport.servers == ["192.0.2.1:53"]


def test_soa_for_another_owner_does_not_count():
    transport = FakeTransport({"192.0.2.1:53": _soa(owner="other.example.")})
    checker = ZoneConsistencyChecker("example.com", ["192.0.2.1"], transport=transport)

    result = checker.perform()

    assert result.status is Status.FAIL
    assert "did not return a SOA" in result.message


def test_timeout_on_first_server_skips_the_rest():
    transport = FakeTransport(
        {"192.0.2.1:53": ExchangeOutcome.timed_out(), "192.0.2.2:53": _soa()}
    )
    checker = ZoneConsistencyChecker("example.com", ["192.0.2.1", "192.0.2.2"], transport=transport)

    result = checker.perform()

    assert result.status is Status.FAIL
    assert result.message == "Timeout asking DNS question for example.com.|SOA to 192.0.2.1:53"
    assert transport.servers == ["192.0.2.1:53"]


def test_refused_rcode_fails():
    transport = FakeTransport({"192.0.2.1:53": answer_with(rcode=dns.rcode.REFUSED)})
    checker = ZoneConsistencyChecker("example.com", ["192.0.2.1"], transport=transport)

    result = checker.perform()

    assert result.status is Status.FAIL
    assert "RCode REFUSED from 192.0.2.1:53" in result.message


def test_servers_are_deduplicated_in_configured_order():
    transport = FakeTransport({"192.0.2.2:53": _soa(), "192.0.2.1:53": _soa()})
    checker = ZoneConsistencyChecker(
        "example.com", ["192.0.2.2", "192.0.2.1", "192.0.2.2:53"], transport=transport
    )

    checker.perform()

    assert transport.servers == ["192.0.2.2:53", "192.0.2.1:53"]


def test_soa_queries_are_non_recursive_without_dnssec():
    transport = FakeTransport({"192.0.2.1:53": _soa()})
    checker = ZoneConsistencyChecker("example.com", ["192.0.2.1"], transport=transport)

    checker.perform()

    assert not query_has_rd(transport.last_query)
    assert not query_has_do(transport.last_query)


def test_empty_server_list_is_rejected():
    with pytest.raises(ValueError, match="At least one DNS server"):
        ZoneConsistencyChecker("example.com", [])


def test_custom_label_and_timeout_are_used():
    transport = FakeTransport({"192.0.2.1:53": _soa()})
    checker = ZoneConsistencyChecker(
        "example.com", ["192.0.2.1"], label="zone apex", timeout=2, transport=transport
    )

    result = checker.perform()

    assert result.check == "zone apex"
    assert transport.calls[0].timeout == 2.0
