import pytest

from chainbench.consts import (
    ChainBenchError,
    CheckValidationError,
    MissingAssetError,
    MissingBranchProtectionError,
    MissingCheckActionError,
    MissingCheckIDError,
    MissingDescriptionError,
    MissingEntityError,
    MissingNameError,
    MissingOrganizationError,
    MissingRemediationError,
    MissingRepositoryError,
    MissingResultStatusError,
    MissingTypeError,
    MissingUrlError,
)


@pytest.mark.parametrize(
    "error_class, text",
    [
        (MissingCheckIDError, "Missing Check ID"),
        (MissingNameError, "Missing Name"),
        (MissingEntityError, "Missing Entity"),
        (MissingTypeError, "Missing Type"),
        (MissingDescriptionError, "Missing Description"),
        (MissingRemediationError, "Missing Remediation"),
        (MissingUrlError, "Missing Url"),
        (MissingCheckActionError, "Check action cannot be nil"),
        (MissingResultStatusError, "Missing check result"),
        (MissingRepositoryError, "Repository cannot be nil"),
        (MissingOrganizationError, "Organization cannot be nil"),
        (MissingBranchProtectionError, "Branch Protection cannot be nil"),
    ],
)
def test_default_messages(error_class, text):
    assert str(error_class()) == text


@pytest.mark.parametrize(
    "error_class, text",
    [
        (MissingCheckIDError, "Missing Check ID"),
        (MissingNameError, "Missing Name"),
        (MissingEntityError, "Missing Entity"),
        (MissingTypeError, "Missing Type"),
        (MissingDescriptionError, "Missing Description"),
        (MissingRemediationError, "Missing Remediation"),
        (MissingUrlError, "Missing Url"),
        (MissingCheckActionError, "Check action cannot be nil"),
    ],
)
def test_validation_errors_share_a_base(error_class, text):
    err = error_class()
    assert isinstance(err, CheckValidationError)
    assert isinstance(err, ChainBenchError)
    assert not isinstance(err, MissingAssetError)
    assert str(err) == text


@pytest.mark.parametrize(
    "error_class, text",
    [
        (MissingRepositoryError, "Repository cannot be nil"),
        (MissingOrganizationError, "Organization cannot be nil"),
        (MissingBranchProtectionError, "Branch Protection cannot be nil"),
    ],
)
def test_asset_errors_share_a_base(error_class, text):
    err = error_class()
    assert isinstance(err, MissingAssetError)
    assert isinstance(err, ChainBenchError)
    assert not isinstance(err, CheckValidationError)
    assert str(err) == text


def test_result_status_error_is_not_a_validation_error():
    err = MissingResultStatusError()
    assert str(err) == "Missing check result"
    assert isinstance(err, ChainBenchError)
    assert not isinstance(err, CheckValidationError)


def test_custom_message_overrides_default():
    err = MissingNameError("custom text")
    assert str(err) == "custom text"
    assert err.args == ("custom text",)


def test_all_errors_catchable_as_package_error():
    err = MissingUrlError()
    assert isinstance(err, ChainBenchError)
    assert isinstance(err, Exception)
    assert str(err) == "Missing Url"