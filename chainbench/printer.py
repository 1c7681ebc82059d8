"""Printing findings as a table and writing them to a report file."""

from __future__ import annotations

import contextlib
import json
import sys
import uuid
from collections.abc import Iterable, Sequence
from datetime import datetime
from pathlib import Path
from typing import Any

import jinja2
from packaging.version import Version

from . import logs
from .checkmodels import CheckRunResult, ResultStatus
from .statistics import Statistics
from .table import (
    COLOR_GREEN,
    COLOR_RED,
    COLOR_YELLOW,
    CellData,
    Table,
    create_body_row,
    create_footer,
    create_header,
)

_HEADER = ["ID", "Name", "Result", "Reason"]


def print_error(msg: str) -> None:
    """Print ``msg`` in the error colour."""
    print(COLOR_RED + msg)


def errors_to_string(errors: Iterable[BaseException]) -> str:
    return "".join(f"{err}\n" for err in errors)


def print_errors(errors: Sequence[BaseException]) -> None:
    if errors:
        print_error(errors_to_string(errors))


def get_supported_checks(
    results: list[CheckRunResult], supported_ids: Sequence[str] | None
) -> list[CheckRunResult]:
    """Results whose ID is supported; every result when ``supported_ids`` is None."""
    if supported_ids is None:
        return results
    return [r for r in results if r.id in supported_ids]


def sort_results(results: Iterable[CheckRunResult]) -> list[CheckRunResult]:
    """Results ordered by check ID compared as version numbers (stable)."""
    return sorted(results, key=lambda r: Version(r.id))


def get_result_data(status: ResultStatus | str) -> CellData:
    if status == ResultStatus.PASSED:
        color = COLOR_GREEN
    elif status == ResultStatus.UNKNOWN:
        color = COLOR_YELLOW
    else:
        color = COLOR_RED
    return CellData(text=str(status), color=color)


def _status_and_details(result: CheckRunResult) -> tuple[ResultStatus | str, str]:
    if result.result is None:
        return "", ""
    return result.result.status, result.result.details


def get_print_data(results: Iterable[CheckRunResult]) -> tuple[list[dict[str, str]], Statistics]:
    """Report entries (empty fields left out) and the statistics of ``results``."""
    entries: list[dict[str, str]] = []
    statistics = Statistics()
    for r in results:
        status, details = _status_and_details(r)
        entry = {
            "id": r.id,
            "name": r.metadata.title,
            "description": r.metadata.description,
            "remediation": r.metadata.remediation,
            "severity": r.metadata.severity,
            "result": str(status),
            "reason": details,
            "url": r.metadata.url,
        }
        entries.append({key: value for key, value in entry.items() if value})
        with contextlib.suppress(ValueError):
            statistics.add(status)
    return entries, statistics


def _write_template(source: str, entries: list[dict[str, str]], output_file_path: str) -> None:
    try:
        text = jinja2.Template(source).render(results=entries)
    except jinja2.TemplateError:
        print_error("Failed to create the template, check the template is valid")
        return
    try:
        Path(output_file_path).write_text(text, encoding="utf-8")
    except OSError:
        print_error("Failed to create an output file, make sure your path is valid")


def print_output_to_file(
    data: Iterable[CheckRunResult],
    output_file_path: str,
    repository_url: str,
    output_template: str,
) -> None:
    """Write the report to ``output_file_path``.

    With ``output_template`` of the form ``@path`` the template at ``path`` is
    rendered with the report entries bound to ``results``; otherwise the
    report is written as indented JSON.
    """
    entries, statistics = get_print_data(data)

    if output_template.startswith("@"):
        template_path = output_template.removeprefix("@")
        try:
            source = Path(template_path).read_text(encoding="utf-8")
        except OSError as exc:
            logs.error(exc, "error retrieving template from path: %s", output_template)
            source = ""
        _write_template(source, entries, output_file_path)
        return

    metadata: dict[str, Any] = {
        "date": datetime.now().astimezone().isoformat(timespec="seconds"),
        "scan_id": str(uuid.uuid4()),
        "statistics": statistics.to_dict(),
    }
    if repository_url:
        metadata["url"] = repository_url
    report = {"metadata": metadata, "results": entries}
    try:
        Path(output_file_path).write_text(
            json.dumps(report, indent=2, ensure_ascii=False), encoding="utf-8"
        )
    except OSError:
        print_error("Failed to write to output file, make sure your path is valid")


def print_findings(
    results: list[CheckRunResult],
    supported_checks: Sequence[str] | None,
    output_file_path: str,
    is_quiet: bool,
    repository_url: str,
    output_template_file_path: str,
) -> None:
    """Filter and sort results, write the report file if asked, and print the table."""
    filtered = sort_results(get_supported_checks(results, supported_checks))
    if output_file_path:
        print_output_to_file(filtered, output_file_path, repository_url, output_template_file_path)
    if is_quiet:
        return

    statistics = Statistics()
    table = Table(header=create_header(_HEADER))
    for row in filtered:
        status, details = _status_and_details(row)
        table.body.append(
            create_body_row(
                [
                    CellData(text=row.id),
                    CellData(text=row.metadata.title),
                    get_result_data(status),
                    CellData(text=details),
                ]
            )
        )
        with contextlib.suppress(ValueError):
            statistics.add(status)
    table.footer = create_footer(statistics, len(table.header))
    print(table.render(), file=sys.stdout)