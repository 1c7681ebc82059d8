"""Data model of the source-control assets inspected by the benchmark checks.

Fields that hold ``None`` were not fetched (or are unknown). Lists default to
``None`` as well, so that "not fetched" stays distinct from "fetched, empty".

``to_input`` turns a model tree into the plain JSON-like structure handed to
the policy engine. Its keys are the wire names the policies expect.
"""

from __future__ import annotations

import dataclasses
import enum
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Any

_KEY = "key"
_OMIT = "omitempty"


def _ptr(key: str) -> Any:
    """An optional field serialised under ``key`` even when unset."""
    return field(default=None, metadata={_KEY: key})


def _json(key: str | None = None) -> Any:
    """An optional field serialised under ``key`` (or its own name), omitted when unset."""
    return field(default=None, metadata={_KEY: key, _OMIT: True})


def _flag(key: str) -> Any:
    return field(default=False, metadata={_KEY: key})


@dataclass(kw_only=True)
class InstallationPermissions:
    """Repository and organisation permissions granted to an app installation."""

    actions: str | None = _ptr("Actions")
    administration: str | None = _ptr("Administration")
    blocking: str | None = _ptr("Blocking")
    checks: str | None = _ptr("Checks")
    contents: str | None = _ptr("Contents")
    content_references: str | None = _ptr("ContentReferences")
    deployments: str | None = _ptr("Deployments")
    emails: str | None = _ptr("Emails")
    environments: str | None = _ptr("Environments")
    followers: str | None = _ptr("Followers")
    issues: str | None = _ptr("Issues")
    metadata: str | None = _ptr("Metadata")
    members: str | None = _ptr("Members")
    organization_administration: str | None = _ptr("OrganizationAdministration")
    organization_hooks: str | None = _ptr("OrganizationHooks")
    organization_plan: str | None = _ptr("OrganizationPlan")
    organization_pre_receive_hooks: str | None = _ptr("OrganizationPreReceiveHooks")
    organization_projects: str | None = _ptr("OrganizationProjects")
    organization_secrets: str | None = _ptr("OrganizationSecrets")
    organization_self_hosted_runners: str | None = _ptr("OrganizationSelfHostedRunners")
    organization_user_blocking: str | None = _ptr("OrganizationUserBlocking")
    packages: str | None = _ptr("Packages")
    pages: str | None = _ptr("Pages")
    pull_requests: str | None = _ptr("PullRequests")
    repository_hooks: str | None = _ptr("RepositoryHooks")
    repository_projects: str | None = _ptr("RepositoryProjects")
    repository_pre_receive_hooks: str | None = _ptr("RepositoryPreReceiveHooks")
    secrets: str | None = _ptr("Secrets")
    secret_scanning_alerts: str | None = _ptr("SecretScanningAlerts")
    security_events: str | None = _ptr("SecurityEvents")
    single_file: str | None = _ptr("SingleFile")
    statuses: str | None = _ptr("Statuses")
    team_discussions: str | None = _ptr("TeamDiscussions")
    vulnerability_alerts: str | None = _ptr("VulnerabilityAlerts")
    workflows: str | None = _ptr("Workflows")


@dataclass(kw_only=True)
class App:
    """An application installed on the platform."""

    id: int | None = _ptr("ID")
    slug: str | None = _ptr("Slug")
    node_id: str | None = _ptr("NodeID")
    owner: User | None = _ptr("Owner")
    name: str | None = _ptr("Name")
    description: str | None = _ptr("Description")
    external_url: str | None = _ptr("ExternalURL")
    html_url: str | None = _ptr("HTMLURL")
    created_at: datetime | None = _ptr("CreatedAt")
    updated_at: datetime | None = _ptr("UpdatedAt")
    permissions: InstallationPermissions | None = _ptr("Permissions")
    events: list[str] | None = _ptr("Events")


@dataclass(kw_only=True)
class RequiredStatusChecks:
    strict: bool = _flag("Strict")


@dataclass(kw_only=True)
class DismissalRestrictions:
    """Users allowed to dismiss pull request reviews."""

    users: list[User] | None = _ptr("users")


@dataclass(kw_only=True)
class PullRequestReviewsEnforcement:
    """Pull request review rules of a protected branch."""

    dismissal_restrictions: DismissalRestrictions | None = _ptr("DismissalRestrictions")
    dismiss_stale_reviews: bool = _flag("DismissStaleReviews")
    require_code_owner_reviews: bool = _flag("RequireCodeOwnerReviews")
    required_approving_review_count: int = field(
        default=0, metadata={_KEY: "RequiredApprovingReviewCount"}
    )


@dataclass(kw_only=True)
class AdminEnforcement:
    url: str | None = _ptr("URL")
    enabled: bool = _flag("Enabled")


@dataclass(kw_only=True)
class BranchRestrictions:
    """Users, teams and apps allowed to push to a branch."""

    users: list[User] | None = _ptr("Users")
    teams: list[Team] | None = _ptr("Teams")
    apps: list[App] | None = _ptr("Apps")


@dataclass(kw_only=True)
class Protection:
    """Branch protection settings."""

    required_status_checks: RequiredStatusChecks | None = _ptr("RequiredStatusChecks")
    required_pull_request_reviews: PullRequestReviewsEnforcement | None = _ptr(
        "RequiredPullRequestReviews"
    )
    enforce_admins: AdminEnforcement | None = _ptr("EnforceAdmins")
    restrictions: BranchRestrictions | None = _ptr("Restrictions")
    require_linear_history: bool = _flag("RequireLinearHistory")
    allow_force_pushes: bool = _flag("AllowForcePushes")
    allow_deletions: bool = _flag("AllowDeletions")
    required_conversation_resolution: bool = _flag("RequiredConversationResolution")
    required_signed_commit: bool = _flag("RequiredSignedCommit")


@dataclass(kw_only=True)
class SignatureVerification:
    verified: bool | None = _json()
    reason: str | None = _json()
    signature: str | None = _json()
    payload: str | None = _json()


@dataclass(kw_only=True)
class CommitAuthor:
    date: datetime | None = _ptr("Date")
    name: str | None = _json()
    email: str | None = _json()
    login: str | None = _json("username")


@dataclass(kw_only=True)
class RepositoryCommit:
    node_id: str | None = _json()
    sha: str | None = _json()
    author: CommitAuthor | None = _ptr("Author")
    committer: CommitAuthor | None = _ptr("Committer")
    url: str | None = _json()
    verification: SignatureVerification | None = _json()


@dataclass(kw_only=True)
class Branch:
    name: str | None = _json()
    commit: RepositoryCommit | None = _ptr("Commit")
    protected: bool | None = _json()


@dataclass(kw_only=True)
class HookConfig:
    insecure_ssl: str | None = _ptr("Insecure_SSL")
    url: str | None = _ptr("URL")
    secret: str | None = _ptr("Secret")


@dataclass(kw_only=True)
class Hook:
    """A webhook registered on an organisation or repository."""

    created_at: datetime | None = _ptr("CreatedAt")
    updated_at: datetime | None = _ptr("UpdatedAt")
    url: str | None = _ptr("URL")
    id: int | None = _ptr("ID")
    type: str | None = _ptr("Type")
    name: str | None = _ptr("Name")
    test_url: str | None = _ptr("TestURL")
    ping_url: str | None = _ptr("PingURL")
    last_response: dict[str, Any] | None = _ptr("LastResponse")
    config: HookConfig | None = _ptr("Config")
    events: list[str] | None = _ptr("Events")
    active: bool | None = _ptr("Active")


@dataclass(kw_only=True)
class Plan:
    name: str | None = _ptr("Name")
    space: int | None = _ptr("Space")
    collaborators: int | None = _ptr("Collaborators")
    private_repos: int | None = _ptr("PrivateRepos")


@dataclass(kw_only=True)
class Organization:
    """An organisation and the settings relevant to the checks."""

    login: str | None = _ptr("Login")
    id: int | None = _ptr("ID")
    node_id: str | None = _ptr("NodeID")
    name: str | None = _ptr("Name")
    company: str | None = _ptr("Company")
    location: str | None = _ptr("Location")
    email: str | None = _ptr("Email")
    description: str | None = _ptr("Description")
    public_repos: int | None = _ptr("PublicRepos")
    created_at: datetime | None = _ptr("CreatedAt")
    updated_at: datetime | None = _ptr("UpdatedAt")
    total_private_repos: int | None = _ptr("TotalPrivateRepos")
    owned_private_repos: int | None = _ptr("OwnedPrivateRepos")
    collaborators: int | None = _ptr("Collaborators")
    type: str | None = _ptr("Type")
    plan: Plan | None = _ptr("Plan")
    default_repo_permission: str | None = _ptr("DefaultRepoPermission")
    default_repo_settings: str | None = _ptr("DefaultRepoSettings")
    members_can_create_repos: bool | None = _ptr("MembersCanCreateRepos")
    members_can_create_public_repos: bool | None = _ptr("MembersCanCreatePublicRepos")
    members_can_create_private_repos: bool | None = _ptr("MembersCanCreatePrivateRepos")
    members_can_create_internal_repos: bool | None = _ptr("MembersCanCreateInternalRepos")
    two_factor_requirement_enabled: bool | None = _ptr("TwoFactorRequirementEnabled")
    is_verified: bool | None = _ptr("IsVerified")
    members: list[User] | None = _ptr("Members")
    is_repository_deletion_limited: bool | None = _ptr("IsRepositoryDeletionLimited")
    is_issue_deletion_limited: bool | None = _ptr("IsIssueDeletionLimited")
    hooks: list[Hook] | None = _ptr("Hooks")


@dataclass(kw_only=True)
class Package:
    id: int | None = _ptr("ID")
    name: str | None = _ptr("Name")
    package_type: str | None = _ptr("PackageType")
    html_url: str | None = _ptr("HTMLURL")
    created_at: datetime | None = _ptr("CreatedAt")
    updated_at: datetime | None = _ptr("UpdatedAt")
    owner: User | None = _ptr("Owner")
    version: str | None = _ptr("Version")
    url: str | None = _ptr("URL")
    version_count: int | None = _ptr("VersionCount")
    visibility: str | None = _ptr("Visibility")
    repository: Repository | None = _ptr("Repository")


@dataclass(kw_only=True)
class PackageRegistry:
    two_factor_requirement_enabled: bool | None = _ptr("TwoFactorRequirementEnabled")
    packages: list[Package] | None = _ptr("Packages")


@dataclass(kw_only=True)
class License:
    key: str | None = _json()
    name: str | None = _json()
    url: str | None = _json()
    spdx_id: str | None = _json()
    html_url: str | None = _json()
    featured: bool | None = _json()
    description: str | None = _json()
    implementation: str | None = _json()
    conditions: list[str] | None = _json()
    permissions: list[str] | None = _json()
    limitations: list[str] | None = _json()
    body: str | None = _json()


@dataclass(kw_only=True)
class Repository:
    """A repository and everything fetched about it."""

    id: int | None = _ptr("ID")
    node_id: str | None = _json()
    owner: User | None = _json()
    name: str | None = _json()
    description: str | None = _json()
    default_branch: str | None = _json()
    master_branch: str | None = _json()
    created_at: datetime | None = _json()
    pushed_at: datetime | None = _json()
    updated_at: datetime | None = _json()
    language: str | None = _json()
    fork: bool | None = _json()
    forks_count: int | None = _json()
    network_count: int | None = _json()
    open_issues_count: int | None = _json()
    stargazers_count: int | None = _json()
    subscribers_count: int | None = _json()
    watchers_count: int | None = _json()
    size: int | None = _json()
    auto_init: bool | None = _json()
    parent: Repository | None = _json()
    source: Repository | None = _json()
    organization: Organization | None = _json()
    allow_rebase_merge: bool | None = _ptr("AllowRebaseMerge")
    allow_squash_merge: bool | None = _ptr("AllowSquashMerge")
    allow_merge_commit: bool | None = _ptr("AllowMergeCommit")
    topics: list[str] | None = _json()
    license: License | None = _json()
    is_private: bool | None = _ptr("IsPrivate")
    has_issues: bool | None = _json()
    license_template: str | None = _json()
    gitignore_template: str | None = _json()
    archived: bool | None = _json()
    team_id: int | None = _json()
    url: str | None = _json()
    branches: list[Branch] | None = _ptr("Branches")
    collaborators: list[User] | None = _ptr("Collaborators")
    is_contains_security_md: bool = _flag("IsContainsSecurityMd")
    commits: list[RepositoryCommit] | None = _ptr("Commits")
    hooks: list[Hook] | None = _ptr("Hooks")


@dataclass(kw_only=True)
class Team:
    """A team within an organisation."""

    id: int | None = _ptr("ID")
    name: str | None = _ptr("Name")
    description: str | None = _ptr("Description")
    url: str | None = _ptr("URL")
    slug: str | None = _ptr("Slug")
    permission: str | None = _ptr("Permission")
    permissions: dict[str, bool] | None = _ptr("Permissions")
    privacy: str | None = _ptr("Privacy")
    members_count: int | None = _ptr("MembersCount")
    repos_count: int | None = _ptr("ReposCount")


@dataclass(kw_only=True)
class User:
    """A user account, optionally with its role and repository permissions."""

    login: str | None = _json()
    id: int | None = _json()
    node_id: str | None = _json()
    avatar_url: str | None = _json()
    html_url: str | None = _json()
    gravatar_id: str | None = _json()
    name: str | None = _json()
    company: str | None = _json()
    blog: str | None = _json()
    location: str | None = _json()
    email: str | None = _json()
    hireable: bool | None = _json()
    bio: str | None = _json()
    public_repos: int | None = _json()
    public_gists: int | None = _json()
    followers: int | None = _json()
    following: int | None = _json()
    created_at: datetime | None = _json()
    updated_at: datetime | None = _json()
    suspended_at: datetime | None = _json()
    type: str | None = _json()
    site_admin: bool | None = _json()
    total_private_repos: int | None = _json()
    owned_private_repos: int | None = _json()
    private_gists: int | None = _json()
    disk_usage: int | None = _json()
    collaborators: int | None = _json()
    plan: Plan | None = _json()
    role: str = field(default="", metadata={_KEY: "Role"})
    url: str | None = _json()
    events_url: str | None = _json()
    following_url: str | None = _json()
    followers_url: str | None = _json()
    gists_url: str | None = _json()
    organizations_url: str | None = _json()
    received_events_url: str | None = _json()
    repos_url: str | None = _json()
    starred_url: str | None = _json()
    subscriptions_url: str | None = _json()
    permissions: dict[str, bool] | None = _json()


def _format_time(value: datetime) -> str:
    text = value.isoformat()
    if value.tzinfo is not None and value.utcoffset() == timezone.utc.utcoffset(None):
        text = text.removesuffix("+00:00") + "Z"
    return text


def to_input(value: Any) -> Any:
    """Convert a model tree into plain dicts, lists and scalars for policy input."""
    if dataclasses.is_dataclass(value) and not isinstance(value, type):
        result: dict[str, Any] = {}
        for f in dataclasses.fields(value):
            item = getattr(value, f.name)
            if f.metadata.get(_OMIT) and item is None:
                continue
            result[f.metadata.get(_KEY) or f.name] = to_input(item)
        return result
    if isinstance(value, enum.Enum):
        return to_input(value.value)
    if isinstance(value, datetime):
        return _format_time(value)
    if isinstance(value, dict):
        return {str(k): to_input(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [to_input(v) for v in value]
    return value