"""Errors raised while registering and running checks, and result detail texts."""


class ChainBenchError(Exception):
    """Base class of all errors raised by the package."""

    message = "chain bench error"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message if message is not None else self.message)


class CheckValidationError(ChainBenchError):
    """A check definition is incomplete."""

    message = "Invalid check"


class MissingCheckIDError(CheckValidationError):
    message = "Missing Check ID"


class MissingNameError(CheckValidationError):
    message = "Missing Name"


class MissingEntityError(CheckValidationError):
    message = "Missing Entity"


class MissingTypeError(CheckValidationError):
    message = "Missing Type"


class MissingDescriptionError(CheckValidationError):
    message = "Missing Description"


class MissingRemediationError(CheckValidationError):
    message = "Missing Remediation"


class MissingUrlError(CheckValidationError):
    message = "Missing Url"


class MissingCheckActionError(CheckValidationError):
    message = "Check action cannot be nil"


class MissingResultStatusError(ChainBenchError):
    """A policy result carries no status."""

    message = "Missing check result"


class MissingAssetError(ChainBenchError):
    """An asset required to run a check was not provided."""

    message = "Asset cannot be nil"


class MissingRepositoryError(MissingAssetError):
    message = "Repository cannot be nil"


class MissingOrganizationError(MissingAssetError):
    message = "Organization cannot be nil"


class MissingBranchProtectionError(MissingAssetError):
    message = "Branch Protection cannot be nil"


DETAILS_LINEAR_HISTORY_MERGE_COMMIT_ENABLED = "MergeCommit is enabled for repository"
DETAILS_LINEAR_HISTORY_REQUIRE_REBASE_OR_SQUASH_COMMIT_ENABLED = (
    "Repository is not configured to allow rebase or squash merge"
)

DETAILS_ORGANIZATION_NOT_FETCHED = "Organization is not fetched"
DETAILS_ORGANIZATION_PERMISSIVE_DEFAULT_REPOSITORY_PERMISSIONS = (
    "Organization default permissions are too permissive"
)
DETAILS_ORGANIZATION_MISSING_MINIMAL_PERMISSIONS = "Organization is missing minimal permissions"
DETAILS_HOOKS_MISSING_MINIMAL_PERMISSIONS = (
    "Organization & Repository Hooks is missing minimal permissions"
)
DETAILS_ORGANIZATION_HOOKS_MISSING_MINIMAL_PERMISSIONS = (
    "Organization Packages is missing minimal permissions"
)

DETAILS_REPOSITORY_MISSING_MINIMAL_PERMISSIONS = "Repository is missing minimal permissions"
DETAILS_REPOSITORY_MISSING_MINIMAL_PERMISSIONS_FOR_PROTECTIONS = (
    "Repository is missing admin permissions for branch protection settings"
)

DETAILS_PIPELINE_PIPELINES_NOT_SCANNED_FOR_VULNERABILITIES = (
    "Pipelines are not scanned for vulnerabilities"
)
DETAILS_DEPENDENCIES_PIPELINES_NOT_SCANNED_FOR_VULNERABILITIES = (
    "Pipeline dependencies are not scanned for vulnerabilities"
)
DETAILS_DEPENDENCIES_PIPELINES_NOT_SCANNED_FOR_LICENSES = (
    "Pipeline dependencies are not scanned for licenses"
)
DETAILS_PIPELINE_REPOSITORY_NOT_SCANNED_FOR_SECRETS = "Repository is not scanned for secrets"
DETAILS_PIPELINE_NO_PIPELINES_FOUND = "No pipelines were found"
DETAILS_PIPELINE_NO_BUILD_JOB = "No build job was found in pipelines"
DETAILS_REGISTRY_DATA_IS_MISSING = "Registry is not fetched"
DETAILS_PIPELINE_ARE_MISSING = "Pipelines are not fetched"
DETAILS_REPOSITORY_IS_MISSING = "Repository is not fetched"