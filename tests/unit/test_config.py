"""Settings defaults and validation."""

import pytest
from pydantic import ValidationError

from devportal.core.config import Settings


def test_defaults() -> None:
    settings = Settings(_env_file=None)
    assert settings.databricks_token_ttl_seconds == 3000
    assert settings.databricks_workspace_ttl_seconds == 120
    assert settings.ws_validate_rate_limit == "60/minute"


@pytest.mark.parametrize("field", ["databricks_token_ttl_seconds", "databricks_workspace_ttl_seconds"])
def test_ttls_must_be_positive(field: str) -> None:
    with pytest.raises(ValidationError, match="must be greater than 0"):
        Settings(_env_file=None, **{field: 0})


def test_databricks_configured_requires_secret() -> None:
    base = {
        "databricks_base_url": "https://accounts.example.com",
        "databricks_account_id": "acc",
        "databricks_client_id": "id",
    }
    assert not Settings(_env_file=None, databricks_client_secret="", **base).databricks_configured
    assert Settings(_env_file=None, databricks_client_secret="s", **base).databricks_configured


def test_secret_is_masked() -> None:
    settings = Settings(_env_file=None, databricks_client_secret="s3cret")
    assert "s3cret" not in repr(settings)
