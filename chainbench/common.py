"""Validation and registration of check definitions."""

from __future__ import annotations

from collections.abc import MutableSequence

from . import logs
from .checkmodels import Check, CheckAction, CheckMetadata
from .consts import (
    MissingCheckActionError,
    MissingCheckIDError,
    MissingDescriptionError,
    MissingEntityError,
    MissingNameError,
    MissingRemediationError,
    MissingTypeError,
    MissingUrlError,
)


def validate_check(
    check_id: str, metadata: CheckMetadata, action: CheckAction | None, url: str
) -> None:
    """Raise a ``CheckValidationError`` subclass for the first missing field."""
    if not check_id:
        raise MissingCheckIDError()
    if not metadata.title:
        raise MissingNameError()
    if not metadata.description:
        raise MissingDescriptionError()
    if not metadata.remediation:
        raise MissingRemediationError()
    if not url:
        raise MissingUrlError()
    if not metadata.type:
        raise MissingTypeError()
    if not metadata.entity:
        raise MissingEntityError()
    if action is None:
        raise MissingCheckActionError()


def validate_checks(check: Check) -> None:
    """Validate every check in a section; log and re-raise the first failure."""
    for check_id, metadata in check.check_metadata_map.checks.items():
        try:
            validate_check(check_id, metadata, check.action, check.url)
        except Exception as exc:
            logs.error(exc, "error in register check Id: %s", check_id)
            raise


def append_check(checks: MutableSequence[Check], check: Check) -> None:
    """Append ``check`` to ``checks`` if it is valid; raise otherwise."""
    validate_checks(check)
    checks.append(check)