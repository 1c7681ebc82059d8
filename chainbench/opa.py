"""Turning policy-engine findings into check run results."""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass
from typing import Any

from .checkmodels import (
    CheckIdToCheckResultMap,
    CheckMetadataMap,
    CheckResult,
    CheckRunResult,
    ResultStatus,
    ScannerType,
    to_check_run_result,
)
from .consts import MissingCheckIDError, MissingResultStatusError


@dataclass(kw_only=True)
class RegoResult:
    """One finding reported by a policy: a status shared by several check IDs."""

    status: ResultStatus | str = ""
    ids: list[str] | None = None
    details: str = ""


def _status(value: Any) -> ResultStatus | str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'status' expected a string, got '{type(value).__name__}'")
    try:
        return ResultStatus(value)
    except ValueError:
        return value


def _ids(value: Any) -> list[str] | None:
    if value is None:
        return None
    if isinstance(value, str) or not isinstance(value, Iterable):
        raise ValueError(f"'ids' expected a list, got '{type(value).__name__}'")
    ids = list(value)
    for item in ids:
        if not isinstance(item, str):
            raise ValueError(f"'ids' expected strings, got '{type(item).__name__}'")
    return ids


def _details(value: Any) -> str:
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'details' expected a string, got '{type(value).__name__}'")
    return value


def parse_rego_rule(rule: RegoResult | Mapping[str, Any]) -> RegoResult:
    """Decode one finding; raise if it has no status or no IDs."""
    if isinstance(rule, RegoResult):
        raw_status, raw_ids, raw_details = rule.status, rule.ids, rule.details
    elif isinstance(rule, Mapping):
        values = {str(key).lower(): value for key, value in rule.items()}
        raw_status = values.get("status")
        raw_ids = values.get("ids")
        raw_details = values.get("details")
    else:
        raise ValueError(f"rule expected an object, got '{type(rule).__name__}'")

    result = RegoResult(
        status=_status(raw_status), ids=_ids(raw_ids), details=_details(raw_details)
    )
    if not result.status:
        raise MissingResultStatusError()
    if result.ids is None:
        raise MissingCheckIDError()
    return result


def parse_rego_result_to_map(findings: Iterable[RegoResult]) -> CheckIdToCheckResultMap:
    """Index findings by check ID; a later finding wins over an earlier one."""
    return {
        check_id: CheckResult(status=finding.status, details=finding.details)
        for finding in findings
        for check_id in finding.ids or ()
    }


def get_run_result(check_id: str, results_map: CheckIdToCheckResultMap) -> CheckResult:
    """The result reported for ``check_id``, or Passed when nothing was reported."""
    found = results_map.get(check_id)
    if found is None:
        return CheckResult(status=ResultStatus.PASSED)
    return CheckResult(status=found.status, details=found.details)


def parse_rego_result(
    findings: Iterable[RegoResult], checks_metadata: CheckMetadataMap
) -> list[CheckRunResult]:
    """One run result for every policy-evaluated check in the section."""
    mapped = parse_rego_result_to_map(findings)
    return [
        to_check_run_result(check_id, metadata, checks_metadata.url, get_run_result(check_id, mapped))
        for check_id, metadata in checks_metadata.checks.items()
        if metadata.scanner_type == ScannerType.REGO
    ]