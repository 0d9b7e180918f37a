from dns_probe.result import CheckResult
from dns_probe.status import Status


def test_pass_result_is_healthy_with_empty_message() -> None:
    result = CheckResult.pass_("probe")

    assert result.healthy
    assert result.message == ""
    assert str(result) == ""
    assert result.details == {}


def test_failing_results_carry_messages() -> None:
    failed = CheckResult.fail("probe", "went wrong", {"server": "192.0.2.1:53"})
    unknown = CheckResult.unknown("probe", "socket broke")

    assert not failed.healthy
    assert str(failed) == "went wrong"
    assert failed.details == {"server": "192.0.2.1:53"}
    assert unknown.status is Status.UNKNOWN


def test_status_strings_are_coerced() -> None:
    assert CheckResult("probe", "fail", "x").status is Status.FAIL
