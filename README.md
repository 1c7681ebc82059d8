# chainbench

Building blocks for CIS Software Supply Chain benchmark checks: a data
model of repository assets, check definitions and their validation,
turning policy findings into per-check results, running checks
concurrently, and reporting the results as a coloured table, a JSON file
or a rendered template.

## Installation

```
pip install .
```

For running the test suite:

```
pip install ".[test]"
pytest
```

## Command line

```
chainbench --help
chainbench --version
```

The `chainbench` command parses its options, loads the configuration
(built-in defaults, then the configuration file, then the command-line
flags, each layer overriding the one before), sets up logging from it, and
prints its usage. It reports a configuration or logging error on standard
error and exits with status 1.

| Option | Meaning |
| --- | --- |
| `-q`, `--quiet` | log level `error` |
| `-o`, `--output-file PATH` | path of a results file (`output_path` in the config) |
| `--template PATH` | path of an output template (`output_template_path`) |
| `-c`, `--config-file PATH` | read settings from this configuration file |
| `-l`, `--log-file PATH` | also append logs to this file |
| `--log-format FORMAT` | `normal` or `json` |
| `-v`, `-vv` | debug or trace log level (default: info) |
| `--no-color` | no colours in console logs |
| `--version` | print the version |

Without `--config-file`, the first of `config.json`, `config.toml`,
`config.yaml` and `config.yml` found in the current directory is read, if
any. A file given with `--config-file` must exist and have one of those
extensions.

## Configuration file

Keys are matched case-insensitively.

```yaml
logs:
  log_level: info
  log_format: normal
  log_path: chainbench.log
  no_color: false
output_path: results.json
output_template_path: ""
repository_url: https://git.example.com/org/repo
access_token: token
```

Accepted log levels are `trace`, `debug`, `info`, `warning`, `error` and
`panic`, in any case.

## Library use

- `chainbench.models` — dataclasses for users, teams, apps, organisations,
  repositories, branches, branch protection, hooks and package registries;
  `to_input()` turns a model tree into plain dicts and lists.
- `chainbench.checkmodels` — `CheckMetadata`, `CheckMetadataMap`, `Check`,
  `CheckResult`, `CheckRunResult`, `AssetsData`, the `ResultStatus` and
  related enums, `to_check_run_result()` and `get_permalink()`.
- `chainbench.common` — `validate_check()`, `validate_checks()` and
  `append_check()`, which raise the `Missing…Error` classes of
  `chainbench.consts`.
- `chainbench.opa` — `parse_rego_rule()` and `parse_rego_result()`: a check
  with no finding is reported as Passed.
- `chainbench.runner` — `run_checks()` runs every check's action in
  parallel and returns `(results, errors)`.
- `chainbench.statistics` — `Statistics` counts results by status.
- `chainbench.table` — `Table` and the header, body and footer builders.
- `chainbench.printer` — `print_findings()` filters results to the
  supported IDs, sorts them by ID as version numbers, optionally writes a
  report file, and prints the table unless quiet. The report is indented
  JSON with `metadata` (date, scan ID, statistics, URL) and `results`;
  with a template given as `@path`, the Jinja2 template at `path` is
  rendered with the entries bound to `results` (each entry a dict of
  `id`, `name`, `description`, `remediation`, `severity`, `result`,
  `reason`, `url`, empty ones left out).
- `chainbench.config` — `load_configuration()` and `merge()`.
- `chainbench.logs` — `init_logger()`, the module-level log functions and
  `ContextLogger`.

```python
from chainbench.checkmodels import CheckMetadata, CheckResult, ResultStatus, to_check_run_result

result = to_check_run_result(
    "1.1.3",
    CheckMetadata(title="Ensure any change to code receives approval"),
    "https://docs.example.com/cis/1.1",
    CheckResult(status=ResultStatus.PASSED),
)
print(result.metadata.url)
# https://docs.example.com/cis/1.1/#113-ensure-any-change-to-code-receives-approval
```

## What it does not do

- There is no `scan` command: the package does not fetch anything from
  source-control platforms, so `AssetsData` has to be filled in by the
  caller.
- No check sections or policies are shipped, and no policy engine is
  included: `chainbench.opa` only turns findings that were already
  evaluated into per-check results.