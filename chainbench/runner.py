"""Running check actions concurrently and collecting their results."""

from __future__ import annotations

from collections.abc import Sequence
from concurrent.futures import ThreadPoolExecutor

from .checkmodels import AssetsData, Check, CheckData, CheckRunResult
from .config import Configuration


def get_checks_count(checks: Sequence[Check]) -> int:
    """Number of distinct check IDs across all sections."""
    return len({check_id for check in checks for check_id in check.check_metadata_map.checks})


def _run(check: Check, data: CheckData) -> list[CheckRunResult]:
    if check.action is None:
        raise TypeError("check action is missing")
    results = check.action(data) or []
    return [CheckRunResult(id=r.id, metadata=r.metadata, result=r.result) for r in results]


def run_checks(
    assets_data: AssetsData | None,
    configuration: Configuration | None,
    checks: Sequence[Check],
) -> tuple[list[CheckRunResult], list[Exception]]:
    """Run every check's action in parallel.

    Returns the results of the actions that succeeded and the errors raised
    by those that failed.
    """
    data = CheckData(assets_metadata=assets_data, configuration=configuration)
    results: list[CheckRunResult] = []
    errors: list[Exception] = []
    if not checks:
        return results, errors

    with ThreadPoolExecutor(max_workers=len(checks)) as pool:
        futures = [pool.submit(_run, check, data) for check in checks]
        for future in futures:
            try:
                results.extend(future.result())
            except Exception as exc:
                errors.append(exc)
    return results, errors