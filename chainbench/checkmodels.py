"""Check definitions, the data they run on, and their results."""

from __future__ import annotations

import dataclasses
from collections.abc import Callable, Mapping
from dataclasses import dataclass, field
from enum import StrEnum
from typing import Any

from .config import Configuration
from .models import Organization, PackageRegistry, Protection, Repository, User


class ScannerType(StrEnum):
    REGO = "Rego"
    CUSTOM = "Custom"


class CheckType(StrEnum):
    SCM = "SCM"


class EntityType(StrEnum):
    ORGANIZATION = "Organization"
    REPOSITORY = "Repository"


class ResultStatus(StrEnum):
    PASSED = "Passed"
    FAILED = "Failed"
    UNKNOWN = "Unknown"


def _asset(key: str) -> Any:
    # The "key" metadata names the field in the policy input (see models.to_input).
    return field(default=None, metadata={"key": key})


@dataclass(kw_only=True)
class AssetsData:
    """Everything fetched from the platform, handed to the checks."""

    authorized_user: User | None = _asset("AuthorizedUser")
    organization: Organization | None = _asset("Organization")
    repository: Repository | None = _asset("Repository")
    branch_protections: Protection | None = _asset("BranchProtections")
    users: list[User] | None = _asset("Users")
    pipelines: list[Any] | None = _asset("Pipelines")
    registry: PackageRegistry | None = _asset("Registry")


@dataclass(kw_only=True)
class CheckData:
    configuration: Configuration | None = None
    assets_metadata: AssetsData | None = None


def _lower_keys(data: Any, name: str) -> dict[str, Any]:
    if not isinstance(data, Mapping):
        raise ValueError(f"'{name}' expected an object, got '{type(data).__name__}'")
    return {str(key).lower(): value for key, value in data.items()}


def _text(values: dict[str, Any], key: str) -> str:
    value = values.get(key)
    if value is None:
        return ""
    if not isinstance(value, str):
        raise ValueError(f"'{key}' expected a string, got '{type(value).__name__}'")
    return value


def _enum_or_raw(enum_cls: type[StrEnum], value: str) -> Any:
    try:
        return enum_cls(value)
    except ValueError:
        return value


@dataclass(kw_only=True)
class CheckMetadata:
    title: str = ""
    type: CheckType | str = ""
    entity: EntityType | str = ""
    description: str = ""
    remediation: str = ""
    url: str = ""
    severity: str = ""
    scanner_type: ScannerType | str = ""

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CheckMetadata:
        """Build metadata from a rules-metadata object; keys are case-insensitive."""
        values = _lower_keys(data, "check metadata")
        return cls(
            title=_text(values, "title"),
            type=_enum_or_raw(CheckType, _text(values, "type")),
            entity=_enum_or_raw(EntityType, _text(values, "entity")),
            description=_text(values, "description"),
            remediation=_text(values, "remediation"),
            url=_text(values, "url"),
            severity=_text(values, "severity"),
            scanner_type=_enum_or_raw(ScannerType, _text(values, "scannertype")),
        )


@dataclass(kw_only=True)
class CheckMetadataMap:
    """A section of checks: its identity, documentation URL and checks by ID."""

    id: str = ""
    name: str = ""
    url: str = ""
    checks: dict[str, CheckMetadata] = field(default_factory=dict)

    @classmethod
    def from_mapping(cls, data: Mapping[str, Any]) -> CheckMetadataMap:
        values = _lower_keys(data, "checks metadata")
        raw_checks = values.get("checks") or {}
        if not isinstance(raw_checks, Mapping):
            raise ValueError(f"'checks' expected an object, got '{type(raw_checks).__name__}'")
        return cls(
            id=_text(values, "id"),
            name=_text(values, "name"),
            url=_text(values, "url"),
            checks={
                str(check_id): CheckMetadata.from_mapping(metadata)
                for check_id, metadata in raw_checks.items()
            },
        )


@dataclass(kw_only=True)
class CheckResult:
    status: ResultStatus | str = ""
    details: str = ""


@dataclass(kw_only=True)
class CheckRunResult:
    id: str = ""
    metadata: CheckMetadata = field(default_factory=CheckMetadata)
    result: CheckResult | None = None


CheckIdToCheckResultMap = dict[str, CheckResult]
CheckAction = Callable[[CheckData], list[CheckRunResult]]


@dataclass(kw_only=True)
class Check:
    """A section of checks together with the action that evaluates them."""

    check_metadata_map: CheckMetadataMap = field(default_factory=CheckMetadataMap)
    action: CheckAction | None = None
    scanner_type: ScannerType | str = ""

    @property
    def url(self) -> str:
        return self.check_metadata_map.url

    @property
    def checks(self) -> dict[str, CheckMetadata]:
        return self.check_metadata_map.checks


@dataclass(kw_only=True)
class RegoCustomModule:
    name: str = ""
    content: str = ""


def get_permalink(section_url: str, check_id: str, name: str) -> str:
    """Link to a check's entry in its section's documentation page."""
    parsed_id = "#" + check_id.replace(".", "").lower()
    parsed_name = name.replace(" ", "-").replace("'", "").lower()
    return f"{section_url}/{parsed_id}-{parsed_name}"


def to_check_run_result(
    check_id: str, metadata: CheckMetadata, section_url: str, result: CheckResult | None
) -> CheckRunResult:
    """Pair a result with a copy of its metadata whose URL points at the check."""
    return CheckRunResult(
        id=check_id,
        metadata=dataclasses.replace(
            metadata, url=get_permalink(section_url, check_id, metadata.title)
        ),
        result=result,
    )