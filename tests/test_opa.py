import pytest

from chainbench.checkmodels import (
    CheckMetadata,
    CheckMetadataMap,
    CheckResult,
    CheckRunResult,
    ResultStatus,
    ScannerType,
)
from chainbench.consts import MissingCheckIDError, MissingResultStatusError
from chainbench.opa import (
    RegoResult,
    get_run_result,
    parse_rego_result,
    parse_rego_result_to_map,
    parse_rego_rule,
)

SECTION_URL = (
    "https://avd.khulnasoft.com/compliance/softwaresupplychain/cis-1.0/cis-1.0-sourcecode/1.1"
)
TITLE = "Ensure any change to code receives approval of two strongly authenticated users"


def make_metadata(scanner_type=ScannerType.REGO) -> CheckMetadata:
    return CheckMetadata(
        title=TITLE,
        type="SCM",
        entity="Organization",
        description="SOME DESCRIPTION",
        scanner_type=scanner_type,
        url=SECTION_URL
        + "/#1113-ensure-any-change-to-code-receives-approval-of-two-strongly-authenticated-users",
    )


def test_parse_rego_result():
    metadata = make_metadata()
    metadata_map = CheckMetadataMap(checks={"1.1.13": metadata}, url=SECTION_URL)
    findings = [RegoResult(ids=["1.1.13"], status=ResultStatus.PASSED, details="Details")]

    actual = parse_rego_result(findings, metadata_map)

    assert actual == [
        CheckRunResult(
            id="1.1.13",
            metadata=metadata,
            result=CheckResult(status=ResultStatus.PASSED, details="Details"),
        )
    ]


def test_parse_rego_result_skips_non_rego_checks_and_defaults_to_passed():
    metadata_map = CheckMetadataMap(
        url=SECTION_URL,
        checks={
            "1.1.13": make_metadata(),
            "1.1.14": make_metadata(ScannerType.CUSTOM),
        },
    )
    actual = parse_rego_result([], metadata_map)
    assert [r.id for r in actual] == ["1.1.13"]
    assert actual[0].result == CheckResult(status=ResultStatus.PASSED)


def test_parse_rego_rule_with_all_fields():
    finding = RegoResult(ids=["1.1.9"], status=ResultStatus.PASSED, details="Details")
    assert parse_rego_rule(finding) == RegoResult(
        ids=["1.1.9"], status=ResultStatus.PASSED, details="Details"
    )


def test_parse_rego_rule_missing_status():
    with pytest.raises(MissingResultStatusError) as info:
        parse_rego_rule(RegoResult(ids=["1.1.9"], details="Details"))
    assert str(info.value) == "Missing check result"


def test_parse_rego_rule_missing_ids():
    with pytest.raises(MissingCheckIDError) as info:
        parse_rego_rule(RegoResult(status=ResultStatus.PASSED, details="Details"))
    assert str(info.value) == "Missing Check ID"


def test_parse_rego_rule_from_mapping():
    rule = {"status": "Failed", "ids": ["1.1.3", "1.1.4"], "details": "Details"}
    parsed = parse_rego_rule(rule)
    assert parsed == RegoResult(
        status=ResultStatus.FAILED, ids=["1.1.3", "1.1.4"], details="Details"
    )


def test_parse_rego_rule_rejects_bad_ids():
    with pytest.raises(ValueError):
        parse_rego_rule({"status": "Failed", "ids": "1.1.3"})


def test_parse_rego_result_to_map_expands_ids():
    findings = [
        RegoResult(status=ResultStatus.FAILED, ids=["1.1.3", "1.1.4"], details="Details"),
        RegoResult(status=ResultStatus.UNKNOWN, ids=["1.1.5"]),
    ]
    mapped = parse_rego_result_to_map(findings)
    assert mapped == {
        "1.1.3": CheckResult(status=ResultStatus.FAILED, details="Details"),
        "1.1.4": CheckResult(status=ResultStatus.FAILED, details="Details"),
        "1.1.5": CheckResult(status=ResultStatus.UNKNOWN),
    }


def test_get_run_result_returns_copy_or_passed():
    stored = CheckResult(status=ResultStatus.FAILED, details="Details")
    results_map = {"1.1.3": stored}
    found = get_run_result("1.1.3", results_map)
    assert found == stored
    assert found is not stored
    assert get_run_result("9.9.9", results_map) == CheckResult(status=ResultStatus.PASSED)