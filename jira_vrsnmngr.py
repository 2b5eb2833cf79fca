#!/usr/bin/env python3
"""
jira-vrsnmngr - Jira Version Manager

Keeps a single Jira project version in sync with a CI workflow: creates or
updates the named version, optionally tags issues with it as a fix version,
or deletes the version.

Copyright (c) 2025
All rights reserved.

Redistribution and use in source and binary forms, with or without
modification, are permitted provided that the following conditions are met:

1. Redistributions of source code must retain the above copyright notice, this
   list of conditions and the following disclaimer.

2. Redistributions in binary form must reproduce the above copyright notice,
   this list of conditions and the following disclaimer in the documentation
   and/or other materials provided with the distribution.

3. Neither the name of the copyright holder nor the names of its
   contributors may be used to endorse or promote products derived from
   this software without specific prior written permission.

THIS SOFTWARE IS PROVIDED BY THE COPYRIGHT HOLDERS AND CONTRIBUTORS "AS IS"
AND ANY EXPRESS OR IMPLIED WARRANTIES, INCLUDING, BUT NOT LIMITED TO, THE
IMPLIED WARRANTIES OF MERCHANTABILITY AND FITNESS FOR A PARTICULAR PURPOSE ARE
DISCLAIMED. IN NO EVENT SHALL THE COPYRIGHT HOLDER OR CONTRIBUTORS BE LIABLE
FOR ANY DIRECT, INDIRECT, INCIDENTAL, SPECIAL, EXEMPLARY, OR CONSEQUENTIAL
DAMAGES (INCLUDING, BUT NOT LIMITED TO, PROCUREMENT OF SUBSTITUTE GOODS OR
SERVICES; LOSS OF USE, DATA, OR PROFITS; OR BUSINESS INTERRUPTION) HOWEVER
CAUSED AND ON ANY THEORY OF LIABILITY, WHETHER IN CONTRACT, STRICT LIABILITY,
OR TORT (INCLUDING NEGLIGENCE OR OTHERWISE) ARISING IN ANY WAY OUT OF THE USE
OF THIS SOFTWARE, EVEN IF ADVISED OF THE POSSIBILITY OF SUCH DAMAGE.
"""

import requests
import json
import sys
import os
import logging
from email.utils import parsedate_to_datetime
from typing import Callable, List, Dict, Mapping, Optional, Sequence
from dataclasses import asdict, dataclass, field
from datetime import date, datetime, timezone
import argparse
import configparser
from enum import Enum


# Constants
class Constants:
    """Application constants."""

    # API
    API_TIMEOUT = 30
    API_PATH = "/rest/api/3"
    TRACKER_DOMAIN = "atlassian.net"

    # Operations
    OPERATION_CREATE_OR_UPDATE = "create_or_update"
    OPERATION_DELETE = "delete"
    OPERATIONS = (OPERATION_CREATE_OR_UPDATE, OPERATION_DELETE)

    # Formats tried when a release date is neither ISO 8601 nor RFC 2822
    DATE_FORMATS = (
        "%Y-%m-%d",
        "%Y/%m/%d",
        "%m/%d/%Y",
        "%B %d %Y",
        "%b %d %Y",
        "%B %d, %Y",
        "%b %d, %Y",
        "%d %B %Y",
        "%d %b %Y",
    )

    # GitHub Actions boolean input values
    TRUE_VALUES = {"true", "True", "TRUE"}
    FALSE_VALUES = {"false", "False", "FALSE"}

    DEFAULT_CONFIG_PATH = "~/.config/jira-vrsnmngr"


class LogLevel(Enum):
    """Logging levels."""

    DEBUG = "DEBUG"
    INFO = "INFO"
    WARNING = "WARNING"
    ERROR = "ERROR"


class JiraError(Exception):
    """Base exception for jira-vrsnmngr errors."""

    pass


class ValidationError(JiraError):
    """Configuration is missing or malformed."""

    def __init__(self, field_name: str, message: str):
        super().__init__(f"{field_name}: {message}")
        self.field = field_name


class NotFoundError(JiraError):
    """No version with the requested name exists."""

    def __init__(self, name: str):
        super().__init__(f"Version {name} not found")
        self.name = name


class RemoteError(JiraError):
    """Jira rejected a request or could not be reached."""

    def __init__(
        self,
        message: str,
        status_code: Optional[int] = None,
        response_text: Optional[str] = None,
    ):
        super().__init__(message)
        self.status_code = status_code
        self.response_text = response_text


class AuthenticationError(RemoteError):
    """Authentication failed."""

    pass


class RateLimitError(RemoteError):
    """Rate limit exceeded."""

    pass


class InvariantViolation(JiraError):
    """Internal state that should be impossible."""

    pass


def setup_logging(
    level: LogLevel = LogLevel.INFO, include_timestamp: bool = True
) -> logging.Logger:
    """Set up logging configuration."""
    logger = logging.getLogger("jira-vrsnmngr")
    logger.setLevel(level.value)

    # Remove existing handlers
    for handler in logger.handlers[:]:
        logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)

    if include_timestamp:
        formatter = logging.Formatter(
            "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
        )
    else:
        formatter = logging.Formatter("%(levelname)s - %(message)s")

    handler.setFormatter(formatter)
    logger.addHandler(handler)

    return logger


logger = logging.getLogger("jira-vrsnmngr")


@dataclass
class VersionSpec:
    """Desired state of a project version."""

    name: str
    description: Optional[str] = None
    released: bool = False
    release_date: Optional[str] = None
    archived: bool = False


@dataclass
class RemoteVersion:
    """A project version as Jira reports it."""

    id: Optional[str]
    name: str
    description: Optional[str] = None
    released: bool = False
    release_date: Optional[str] = None
    archived: bool = False
    project_id: Optional[str] = None
    raw: Dict = field(default_factory=dict, repr=False)

    @classmethod
    def from_json(cls, data: Dict) -> "RemoteVersion":
        """Build from a version object returned by the REST API."""
        project_id = data.get("projectId")
        return cls(
            id=data.get("id"),
            name=data.get("name", ""),
            description=data.get("description"),
            released=bool(data.get("released", False)),
            release_date=data.get("releaseDate"),
            archived=bool(data.get("archived", False)),
            project_id=str(project_id) if project_id is not None else None,
            raw=data,
        )


@dataclass
class ReleaseConfig:
    """Validated configuration for one run."""

    email: str
    api_token: str
    subdomain: str
    jira_project: str
    release_name: str
    operation: str
    tickets: str = ""
    dry_run: bool = False
    release_description: str = ""
    release_released: bool = False
    release_release_date: str = ""
    release_archived: bool = False

    def to_version_spec(self) -> VersionSpec:
        return VersionSpec(
            name=self.release_name,
            description=self.release_description,
            released=self.release_released,
            release_date=self.release_release_date or None,
            archived=self.release_archived,
        )

    def masked(self) -> Dict:
        """Return the configuration as a dict with the API token hidden."""
        data = asdict(self)
        data["api_token"] = "***"
        return data


def _parse_rfc2822(value: str) -> Optional[datetime]:
    try:
        return parsedate_to_datetime(value)
    except (TypeError, ValueError, IndexError):
        # TypeError on Python < 3.10, ValueError after
        return None


def parse_date(value: Optional[str]) -> Optional[date]:
    """Parse a free-form date into the UTC calendar day it falls on.

    ISO 8601 dates and datetimes are accepted (with an optional trailing
    ``Z``), as are RFC 2822 dates (``date -R``) and the formats in
    ``Constants.DATE_FORMATS``. Slashed dates ending in the year are read
    as MM/DD/YYYY. Aware datetimes are converted to UTC first; naive ones
    are taken as UTC.
    Returns None for empty or unparseable input.
    """
    if value is None:
        return None
    value = value.strip()
    if not value:
        return None

    iso_value = value[:-1] + "+00:00" if value.endswith(("Z", "z")) else value
    try:
        parsed = datetime.fromisoformat(iso_value)
    except ValueError:
        parsed = _parse_rfc2822(value)
    if parsed is None:
        for fmt in Constants.DATE_FORMATS:
            try:
                parsed = datetime.strptime(value, fmt)
                break
            except ValueError:
                continue
    if parsed is None:
        return None

    if parsed.tzinfo is not None:
        parsed = parsed.astimezone(timezone.utc)
    return parsed.date()


def normalize_release_date(value: Optional[str]) -> Optional[str]:
    """Reformat a date as YYYY-MM-DD, or None if it does not parse."""
    parsed = parse_date(value)
    return parsed.isoformat() if parsed else None


def today_utc() -> str:
    return datetime.now(timezone.utc).date().isoformat()


def prepare_version_payload(spec: VersionSpec, today: Optional[str] = None) -> Dict:
    """Build the create/update payload for a version.

    A released version always carries a release date (today's UTC date if
    none was given); an unreleased one never does.
    """
    release_date = normalize_release_date(spec.release_date)
    if spec.released and not release_date:
        release_date = normalize_release_date(today) or today_utc()
    elif not spec.released:
        release_date = None

    payload = {
        "name": spec.name,
        "released": spec.released,
        "archived": spec.archived,
    }
    if spec.description is not None:
        payload["description"] = spec.description
    if release_date:
        payload["releaseDate"] = release_date
    return payload


class JiraClient:
    """Thin wrapper over the Jira Cloud REST API v3."""

    def __init__(self, base_url: str, email: str, api_token: str) -> None:
        self.base_url = base_url.rstrip("/")
        self.session = requests.Session()
        self.session.auth = (email, api_token)
        self.session.headers.update(
            {"Accept": "application/json", "Content-Type": "application/json"}
        )
        self.timeout = Constants.API_TIMEOUT

    def _url(self, path: str) -> str:
        return f"{self.base_url}{Constants.API_PATH}{path}"

    def _handle_response_errors(self, response: requests.Response) -> None:
        """Handle common HTTP response errors."""
        if response.status_code == 401:
            raise AuthenticationError(
                "Invalid credentials (email/API token)", status_code=401
            )
        elif response.status_code == 403:
            raise AuthenticationError(
                "Access forbidden (check permissions)", status_code=403
            )
        elif response.status_code == 429:
            raise RateLimitError("Rate limit exceeded", status_code=429)
        elif not response.ok:
            raise RemoteError(
                f"HTTP {response.status_code}: {response.reason}",
                status_code=response.status_code,
                response_text=response.text[:500] if response.text else None,
            )

    def _request(self, method: str, path: str, **kwargs) -> Optional[Dict]:
        url = self._url(path)
        logger.debug(f"{method} {url}")
        try:
            response = self.session.request(method, url, timeout=self.timeout, **kwargs)
        except requests.RequestException as e:
            raise RemoteError(f"Request to {url} failed: {e}")

        self._handle_response_errors(response)
        if response.status_code == 204 or not response.content:
            return None
        try:
            return response.json()
        except ValueError:
            raise RemoteError(
                f"Invalid JSON in response from {url}",
                status_code=response.status_code,
                response_text=response.text[:500] if response.text else None,
            )

    def get_myself(self) -> Dict:
        return self._request("GET", "/myself")

    def get_project(self, project_key: str) -> Dict:
        return self._request("GET", f"/project/{project_key}")

    def get_project_versions_paginated(
        self, project_key: str, query: Optional[str] = None
    ) -> Dict:
        """Fetch one page of a project's versions, optionally name-filtered."""
        params = {}
        if query:
            params["query"] = query
        return self._request("GET", f"/project/{project_key}/version", params=params)

    def create_version(self, payload: Dict) -> Dict:
        return self._request("POST", "/version", json=payload)

    def update_version(self, version_id: str, payload: Dict) -> Dict:
        return self._request("PUT", f"/version/{version_id}", json=payload)

    def delete_and_replace_version(
        self,
        version_id: str,
        move_fix_issues_to: Optional[str] = None,
        move_affected_issues_to: Optional[str] = None,
    ) -> None:
        body = {}
        if move_fix_issues_to:
            body["moveFixIssuesTo"] = move_fix_issues_to
        if move_affected_issues_to:
            body["moveAffectedIssuesTo"] = move_affected_issues_to
        self._request("POST", f"/version/{version_id}/removeAndSwap", json=body)

    def add_fix_version(self, issue_key: str, version_id: str) -> None:
        # "add" keeps the fix versions already on the issue
        payload = {"update": {"fixVersions": [{"add": {"id": version_id}}]}}
        self._request("PUT", f"/issue/{issue_key}", json=payload)


def create_client(email: str, api_token: str, subdomain: str) -> JiraClient:
    """Create a Jira client for https://{subdomain}.atlassian.net."""
    base_url = f"https://{subdomain}.{Constants.TRACKER_DOMAIN}"
    return JiraClient(base_url, email, api_token)


def find_version_by_name(
    client: JiraClient, project_key: str, name: str
) -> Optional[RemoteVersion]:
    """Return the version of ``project_key`` named exactly ``name``.

    Only the first page of the name-filtered listing is scanned, so a name
    that is not on that page is reported as missing.
    """
    logger.info(f"Getting version {name}...")

    page = client.get_project_versions_paginated(project_key, query=name)
    logger.debug(json.dumps(page, indent=2))

    for value in (page or {}).get("values", []):
        if value.get("name") == name:
            return RemoteVersion.from_json(value)
    return None


def get_project_id(client: JiraClient, project_key: str) -> str:
    project = client.get_project(project_key)
    logger.debug(json.dumps(project, indent=2))
    return str(project["id"])


def create_version(
    client: JiraClient, project_key: str, spec: VersionSpec, today: Optional[str] = None
) -> RemoteVersion:
    project_id = get_project_id(client, project_key)
    payload = prepare_version_payload(spec, today)
    payload["projectId"] = project_id

    logger.info(f"Creating project version {spec.name}...")
    logger.debug(json.dumps(payload, indent=2))

    return RemoteVersion.from_json(client.create_version(payload))


def update_version(
    client: JiraClient, version_id: str, spec: VersionSpec, today: Optional[str] = None
) -> RemoteVersion:
    payload = prepare_version_payload(spec, today)

    logger.info(f"Updating project version {spec.name}...")
    logger.debug(json.dumps(payload, indent=2))

    return RemoteVersion.from_json(client.update_version(version_id, payload))


def upsert_version(
    client: JiraClient, project_key: str, spec: VersionSpec, today: Optional[str] = None
) -> RemoteVersion:
    """Create the version if no version has its name, otherwise update it."""
    existing = find_version_by_name(client, project_key, spec.name)
    if existing and existing.id:
        return update_version(client, existing.id, spec, today)
    return create_version(client, project_key, spec, today)


def delete_version_by_name(
    client: JiraClient, project_key: str, name: str
) -> RemoteVersion:
    """Delete the named version without moving its issues to a replacement."""
    version = find_version_by_name(client, project_key, name)
    if not version or not version.id:
        raise NotFoundError(name)

    logger.info(f"Deleting version {name}...")
    logger.debug(json.dumps(version.raw, indent=2))

    client.delete_and_replace_version(version.id)
    return version


def tag_issues(
    client: JiraClient, version_id: str, issue_keys: Sequence[str]
) -> List[str]:
    """Add ``version_id`` to the fix versions of each issue, one at a time.

    The first failure propagates and the remaining issues are left alone.
    """
    tagged = []
    for issue_key in issue_keys:
        logger.info(f"Setting fix version on {issue_key}...")
        client.add_fix_version(issue_key, version_id)
        tagged.append(issue_key)
    return tagged


def split_tickets(tickets: Optional[str]) -> List[str]:
    if not tickets:
        return []
    return [ticket.strip() for ticket in tickets.split(",") if ticket.strip()]


class JiraConfig:
    """Credentials file in INI format, read from a [jira] or [DEFAULT] section."""

    def __init__(self, config_path: Optional[str] = None) -> None:
        explicit = config_path is not None
        if config_path is None:
            config_path = os.path.expanduser(Constants.DEFAULT_CONFIG_PATH)

        self.config_path = config_path
        self.config = configparser.ConfigParser()

        if os.path.exists(config_path):
            self.config.read(config_path)
        elif explicit:
            raise ValidationError("config", f"Config file not found: {config_path}")

    def get(self, key: str) -> str:
        if self.config.has_section("jira"):
            value = self.config.get("jira", key, fallback="")
        else:
            value = self.config.defaults().get(key, "")
        return value.strip()

    @property
    def email(self) -> str:
        return self.get("email")

    @property
    def api_token(self) -> str:
        return self.get("api_token")

    @property
    def subdomain(self) -> str:
        return self.get("subdomain")


def create_sample_config(config_path: Optional[str] = None) -> str:
    """Create a sample config file and return its path."""
    if config_path is None:
        config_path = os.path.expanduser(Constants.DEFAULT_CONFIG_PATH)
    config_dir = os.path.dirname(config_path)
    if config_dir:
        os.makedirs(config_dir, exist_ok=True)

    sample_config = """[jira]
email = your-email@company.com
api_token = your-api-token-here
subdomain = your-company

# Alternative format using DEFAULT section:
# [DEFAULT]
# email = your-email@company.com
# api_token = your-api-token-here
# subdomain = your-company
"""

    with open(config_path, "w") as f:
        f.write(sample_config)

    return config_path


def parse_boolean_input(field_name: str, value: Optional[str], default: bool = False) -> bool:
    """Parse a boolean the way GitHub Actions inputs are parsed."""
    if value is None:
        return default
    value = value.strip()
    if not value:
        return default
    if value in Constants.TRUE_VALUES:
        return True
    if value in Constants.FALSE_VALUES:
        return False
    raise ValidationError(
        field_name, "must be one of: true | True | TRUE | false | False | FALSE"
    )


REQUIRED_FIELDS = ("email", "api_token", "subdomain", "jira_project", "release_name", "operation")
TEXT_FIELDS = ("tickets", "release_description", "release_release_date")
BOOLEAN_FIELDS = ("dry_run", "release_released", "release_archived")
CREDENTIAL_FIELDS = ("email", "api_token", "subdomain")


def validate_config(raw: Mapping[str, object]) -> ReleaseConfig:
    """Validate flat key/value input into a ReleaseConfig.

    Values may be strings (as read from the environment) or booleans
    (as produced by command line flags).
    """
    values = {}
    for name in REQUIRED_FIELDS:
        value = raw.get(name)
        value = value.strip() if isinstance(value, str) else ""
        if not value:
            raise ValidationError(name, "is required")
        values[name] = value

    if values["operation"] not in Constants.OPERATIONS:
        raise ValidationError(
            "operation", f"must be one of {', '.join(Constants.OPERATIONS)}"
        )

    for name in TEXT_FIELDS:
        value = raw.get(name)
        values[name] = value.strip() if isinstance(value, str) else ""

    for name in BOOLEAN_FIELDS:
        value = raw.get(name)
        if isinstance(value, bool):
            values[name] = value
        else:
            values[name] = parse_boolean_input(name, value)

    if values["release_release_date"] and parse_date(values["release_release_date"]) is None:
        raise ValidationError("release_release_date", "Release date must be a valid date.")

    return ReleaseConfig(**values)


def collect_inputs(
    args: argparse.Namespace,
    environ: Optional[Mapping[str, str]] = None,
    file_config: Optional[JiraConfig] = None,
) -> Dict[str, object]:
    """Gather raw inputs: command line first, then INPUT_* variables,
    then the credentials file."""
    if environ is None:
        environ = os.environ

    raw = {}
    for name in REQUIRED_FIELDS + TEXT_FIELDS + BOOLEAN_FIELDS:
        value = getattr(args, name, None)
        if value is None:
            value = environ.get(f"INPUT_{name.upper()}")
        if not value and name in CREDENTIAL_FIELDS and file_config is not None:
            value = getattr(file_config, name)
        raw[name] = value
    return raw


def run(
    config: ReleaseConfig,
    client_factory: Optional[Callable[[str, str, str], JiraClient]] = None,
) -> Optional[RemoteVersion]:
    """Carry out the configured operation against Jira."""
    if client_factory is None:
        client_factory = create_client

    if config.dry_run:
        logger.info("Dry run enabled, dumping config:")
        logger.info(json.dumps(config.masked(), indent=2))
        return None

    logger.info(
        f"Performing release operation {config.operation} on project "
        f"{config.jira_project} for release {config.release_name}..."
    )
    logger.debug(json.dumps(config.masked(), indent=2))

    client = client_factory(config.email, config.api_token, config.subdomain)

    if config.operation == Constants.OPERATION_DELETE:
        return delete_version_by_name(client, config.jira_project, config.release_name)

    version = upsert_version(client, config.jira_project, config.to_version_spec())
    issue_keys = split_tickets(config.tickets)
    if issue_keys:
        if not version.id:
            raise InvariantViolation(
                f"Version {config.release_name} has no id after create/update"
            )
        tag_issues(client, version.id, issue_keys)
    return version


def report_failure(message: str, environ: Optional[Mapping[str, str]] = None) -> None:
    """Log a failure and, inside GitHub Actions, mark the step as failed."""
    if environ is None:
        environ = os.environ
    logger.error(message)
    if (environ.get("GITHUB_ACTIONS") or "").strip().lower() == "true":
        print(f"::error::{message}")


def action_run(args) -> None:
    """Create/update or delete the release version."""
    file_config = JiraConfig(args.config)
    config = validate_config(collect_inputs(args, file_config=file_config))
    version = run(config)
    if version is not None:
        print(f"✓ {config.operation} {version.name} (id: {version.id})")


def action_test_auth(args) -> None:
    """Test Jira authentication."""
    file_config = JiraConfig(args.config)
    raw = collect_inputs(args, file_config=file_config)
    for name in CREDENTIAL_FIELDS:
        if not raw.get(name):
            raise ValidationError(name, "is required")

    client = create_client(raw["email"], raw["api_token"], raw["subdomain"])
    print(f"Testing authentication with {client.base_url}...")
    user_info = client.get_myself()

    logger.info("Authentication successful")
    print("✓ Authentication successful!")
    print(f"  User: {user_info.get('displayName', 'Unknown')}")
    print(f"  Email: {user_info.get('emailAddress', 'Unknown')}")
    print(f"  Account ID: {user_info.get('accountId', 'Unknown')}")


def action_create_config(args) -> None:
    """Create a sample config file."""
    path = create_sample_config(args.config)
    print(f"Sample config created at {path}")
    print("Please edit the file with your actual Jira credentials.")


def _add_credential_arguments(parser: argparse.ArgumentParser) -> None:
    parser.add_argument("--email", help="Jira account email (env: INPUT_EMAIL)")
    parser.add_argument("--api-token", help="Jira API token (env: INPUT_API_TOKEN)")
    parser.add_argument(
        "--subdomain", help="Jira Cloud subdomain, e.g. 'mycompany' (env: INPUT_SUBDOMAIN)"
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Jira release version manager")
    parser.add_argument(
        "--config",
        help=f"Path to credentials file (default: {Constants.DEFAULT_CONFIG_PATH})",
    )
    parser.add_argument(
        "--log-level",
        choices=[level.value for level in LogLevel],
        default=None,
        help="Set logging level (env: INPUT_LOG_LEVEL, default: INFO)",
    )
    parser.add_argument(
        "--no-timestamp", action="store_true", help="Disable timestamps in log output"
    )

    subparsers = parser.add_subparsers(
        dest="action", required=True, help="Available actions"
    )

    # run action
    run_parser = subparsers.add_parser(
        "run", help="Create/update or delete a release version"
    )
    _add_credential_arguments(run_parser)
    run_parser.add_argument(
        "--jira-project", help="Project key, e.g. PROJ (env: INPUT_JIRA_PROJECT)"
    )
    run_parser.add_argument(
        "--release-name", help="Version name to look up (env: INPUT_RELEASE_NAME)"
    )
    run_parser.add_argument(
        "--operation",
        choices=Constants.OPERATIONS,
        help="Operation to perform (env: INPUT_OPERATION)",
    )
    run_parser.add_argument(
        "--tickets", help="Comma-separated issue keys to tag (env: INPUT_TICKETS)"
    )
    run_parser.add_argument(
        "--release-description", help="Version description (env: INPUT_RELEASE_DESCRIPTION)"
    )
    run_parser.add_argument(
        "--release-release-date",
        help="Release date, e.g. 2025-01-31 (env: INPUT_RELEASE_RELEASE_DATE)",
    )
    for flag, help_text in (
        ("--dry-run", "Only print the resolved configuration (env: INPUT_DRY_RUN)"),
        ("--release-released", "Mark the version as released (env: INPUT_RELEASE_RELEASED)"),
        ("--release-archived", "Mark the version as archived (env: INPUT_RELEASE_ARCHIVED)"),
    ):
        dest = flag[2:].replace("-", "_")
        run_parser.add_argument(flag, dest=dest, action="store_const", const=True, help=help_text)
        run_parser.add_argument(
            f"--no-{flag[2:]}", dest=dest, action="store_const", const=False,
            help=f"Override {flag} to false",
        )
    run_parser.set_defaults(func=action_run)

    # test-auth action
    test_auth_parser = subparsers.add_parser(
        "test-auth", help="Test Jira authentication"
    )
    _add_credential_arguments(test_auth_parser)
    test_auth_parser.set_defaults(func=action_test_auth)

    # create-config action
    create_config_parser = subparsers.add_parser(
        "create-config", help="Create a sample config file"
    )
    create_config_parser.set_defaults(func=action_create_config)

    return parser


def main(argv: Optional[Sequence[str]] = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    log_level_name = args.log_level or os.environ.get("INPUT_LOG_LEVEL", "").strip().upper()
    try:
        log_level = LogLevel(log_level_name or LogLevel.INFO.value)
    except ValueError:
        log_level = LogLevel.INFO
    setup_logging(log_level, not args.no_timestamp)

    logger.info(f"Starting jira-vrsnmngr with action: {args.action}")

    try:
        args.func(args)
    except KeyboardInterrupt:
        logger.info("Operation cancelled by user")
        print("\nOperation cancelled.")
        return 1
    except JiraError as e:
        report_failure(str(e))
        return 1
    return 0


if __name__ == "__main__":
    sys.exit(main())
