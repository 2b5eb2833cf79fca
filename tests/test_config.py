from __future__ import annotations

import argparse
from pathlib import Path

import pytest

import jira_vrsnmngr as jvm


def _raw(**overrides) -> dict:
    raw = {
        "email": "dev@example.com",
        "api_token": "token",
        "subdomain": "acme",
        "jira_project": "PROJ",
        "release_name": "v1.2.0",
        "operation": "create_or_update",
        "tickets": "",
        "dry_run": "",
        "release_description": "",
        "release_released": "",
        "release_release_date": "",
        "release_archived": "",
    }
    raw.update(overrides)
    return raw


def test_validate_config_applies_defaults() -> None:
    config = jvm.validate_config(_raw())

    assert config.operation == "create_or_update"
    assert config.dry_run is False
    assert config.release_released is False
    assert config.release_archived is False
    assert config.tickets == ""


@pytest.mark.parametrize(
    "name", ["email", "api_token", "subdomain", "jira_project", "release_name", "operation"]
)
def test_validate_config_requires_field(name: str) -> None:
    with pytest.raises(jvm.ValidationError) as excinfo:
        jvm.validate_config(_raw(**{name: "  "}))
    assert excinfo.value.field == name


def test_validate_config_rejects_unknown_operation() -> None:
    with pytest.raises(jvm.ValidationError) as excinfo:
        jvm.validate_config(_raw(operation="archive"))
    assert excinfo.value.field == "operation"


def test_validate_config_rejects_bad_release_date() -> None:
    with pytest.raises(jvm.ValidationError) as excinfo:
        jvm.validate_config(_raw(release_release_date="not-a-date"))
    assert excinfo.value.field == "release_release_date"
    assert "Release date must be a valid date." in str(excinfo.value)


def test_validate_config_keeps_valid_release_date_as_given() -> None:
    config = jvm.validate_config(_raw(release_release_date=" March 7, 2025 "))
    assert config.release_release_date == "March 7, 2025"
    assert config.to_version_spec().release_date == "March 7, 2025"


def test_validate_config_accepts_real_booleans() -> None:
    config = jvm.validate_config(_raw(dry_run=True, release_released="TRUE"))
    assert config.dry_run is True
    assert config.release_released is True


@pytest.mark.parametrize(
    ("value", "expected"),
    [("true", True), ("True", True), ("TRUE", True), ("false", False), ("FALSE", False), ("", False), (None, False)],
)
def test_parse_boolean_input(value, expected) -> None:
    assert jvm.parse_boolean_input("dry_run", value) is expected


@pytest.mark.parametrize("value", ["yes", "1", "tRuE"])
def test_parse_boolean_input_rejects_other_values(value: str) -> None:
    with pytest.raises(jvm.ValidationError) as excinfo:
        jvm.parse_boolean_input("dry_run", value)
    assert excinfo.value.field == "dry_run"


def test_masked_config_hides_token() -> None:
    config = jvm.validate_config(_raw(api_token="secret"))
    assert config.masked()["api_token"] == "***"
    assert config.api_token == "secret"


def test_collect_inputs_precedence(tmp_path: Path) -> None:
    config_file = tmp_path / "jira"
    config_file.write_text(
        "[jira]\nemail = file@example.com\napi_token = file-token\nsubdomain = filecorp\n"
    )
    args = argparse.Namespace(release_name="v2.0.0", dry_run=None, email=None)
    environ = {
        "INPUT_RELEASE_NAME": "v1.0.0",
        "INPUT_EMAIL": "env@example.com",
        "INPUT_OPERATION": "delete",
        "INPUT_DRY_RUN": "true",
    }

    raw = jvm.collect_inputs(args, environ, jvm.JiraConfig(str(config_file)))

    assert raw["release_name"] == "v2.0.0"
    assert raw["email"] == "env@example.com"
    assert raw["api_token"] == "file-token"
    assert raw["subdomain"] == "filecorp"
    assert raw["operation"] == "delete"
    assert raw["dry_run"] == "true"
    assert raw["tickets"] is None


def test_jira_config_reads_default_section(tmp_path: Path) -> None:
    config_file = tmp_path / "jira"
    config_file.write_text("[DEFAULT]\nemail = dev@example.com\nsubdomain = acme\n")

    config = jvm.JiraConfig(str(config_file))

    assert config.email == "dev@example.com"
    assert config.subdomain == "acme"
    assert config.api_token == ""


def test_jira_config_missing_explicit_file(tmp_path: Path) -> None:
    with pytest.raises(jvm.ValidationError) as excinfo:
        jvm.JiraConfig(str(tmp_path / "missing"))
    assert excinfo.value.field == "config"


def test_jira_config_missing_default_file_is_empty(
    monkeypatch: pytest.MonkeyPatch, tmp_path: Path
) -> None:
    monkeypatch.setenv("HOME", str(tmp_path))
    config = jvm.JiraConfig()
    assert config.email == ""


def test_create_sample_config_round_trips(tmp_path: Path) -> None:
    path = jvm.create_sample_config(str(tmp_path / "conf" / "jira"))

    config = jvm.JiraConfig(path)

    assert config.email == "your-email@company.com"
    assert config.subdomain == "your-company"
