"""Jira REST API v2 client."""

import json
import logging
import socket
import urllib.error
import urllib.parse
import urllib.request

from gojira.config import Config, DEFAULT_ISSUE_TYPE_IDS
from gojira.errors import (
    InvalidArgument,
    JiraBadStatus,
    JiraMalformedResponse,
    JiraUnconfigured,
    JiraUnreachable,
)
from gojira.jira.models import Issue, IssueType

logger = logging.getLogger(__name__)

SEARCH_FIELDS = "summary,issuetype,project,status"


class JiraClient:
    """Bearer-token client for the handful of endpoints gojira needs."""

    DEFAULT_TIMEOUT = 30

    def __init__(
        self,
        base_url: str,
        token: str,
        issue_type_ids: dict[str, str] | None = None,
        default_project: str = "",
        timeout: int = DEFAULT_TIMEOUT,
    ):
        self.base_url = base_url.rstrip('/')
        self.token = token
        self.issue_type_ids = {**DEFAULT_ISSUE_TYPE_IDS, **(issue_type_ids or {})}
        self.default_project = default_project
        self.timeout = timeout

    @classmethod
    def from_config(cls, config: Config) -> 'JiraClient':
        if not config.jira_configured:
            raise JiraUnconfigured(
                "Jira URL or token not configured. Run:\n"
                "  gojira config --jira-url https://your.jira --jira-token TOKEN"
            )
        return cls(
            config.jira_url,
            config.jira_token,
            issue_type_ids=config.jira_issue_types,
            default_project=config.default_jira,
        )

    def _request(self, method: str, path: str, payload: dict | None = None, expected: int = 200) -> dict:
        """Make a single API call and decode the JSON answer."""
        url = f"{self.base_url}{path}"
        data = json.dumps(payload).encode('utf-8') if payload is not None else None
        req = urllib.request.Request(
            url,
            data=data,
            method=method,
            headers={
                "Authorization": f"Bearer {self.token}",
                "Content-Type": "application/json",
            },
        )
        logger.debug("Jira %s %s", method, url)

        try:
            with urllib.request.urlopen(req, timeout=self.timeout) as response:
                status = response.status
                body = response.read()
        except urllib.error.HTTPError as e:
            raise JiraBadStatus(f"Jira returned HTTP {e.code} for {method} {path}", status_code=e.code) from e
        except urllib.error.URLError as e:
            raise JiraUnreachable(f"Could not reach Jira at {self.base_url}: {e.reason}") from e
        except (socket.timeout, TimeoutError) as e:
            raise JiraUnreachable(f"Jira request timed out after {self.timeout}s") from e
        except OSError as e:
            raise JiraUnreachable(f"Connection to Jira lost: {e}") from e

        if status != expected:
            raise JiraBadStatus(f"Jira returned HTTP {status} for {method} {path}", status_code=status)

        try:
            result = json.loads(body.decode('utf-8'))
        except (json.JSONDecodeError, UnicodeDecodeError) as e:
            raise JiraMalformedResponse(f"Jira returned invalid JSON for {method} {path}") from e
        if not isinstance(result, dict):
            raise JiraMalformedResponse(f"Jira returned an unexpected payload for {method} {path}")
        return result

    def get_issue(self, key: str) -> Issue:
        result = self._request("GET", f"/rest/api/2/issue/{urllib.parse.quote(key)}")
        return self._decode_issue(result, key)

    def _decode_issue(self, result: dict, key: str) -> Issue:
        fields = result.get("fields")
        if not isinstance(fields, dict):
            raise JiraMalformedResponse(f"Issue {key}: response has no 'fields' object")

        summary = fields.get("summary")
        if not isinstance(summary, str):
            raise JiraMalformedResponse(f"Issue {key}: summary is missing")

        issue_type = fields.get("issuetype")
        if not isinstance(issue_type, dict):
            raise JiraMalformedResponse(f"Issue {key}: response has no 'issuetype' object")

        project = fields.get("project")
        if not isinstance(project, dict):
            raise JiraMalformedResponse(f"Issue {key}: response has no 'project' object")

        description = fields.get("description")
        status = fields.get("status")
        return Issue(
            key=key,
            summary=summary,
            description=description if isinstance(description, str) else "",
            type=IssueType.from_jira(issue_type.get("name", "")),
            project_key=project.get("key", "") if isinstance(project.get("key"), str) else "",
            status=status.get("name", "") if isinstance(status, dict) else "",
        )

    def create_issue(self, issue: Issue) -> str:
        """Create the issue and return the new key."""
        project = issue.project_key or self.default_project
        if not project:
            raise InvalidArgument("No Jira project given and no default project configured")

        type_id = self.issue_type_ids.get(issue.type.value, DEFAULT_ISSUE_TYPE_IDS[issue.type.value])
        payload = {
            "fields": {
                "project": {"key": project},
                "summary": issue.summary,
                "description": issue.description,
                "issuetype": {"id": type_id},
            }
        }
        result = self._request("POST", "/rest/api/2/issue", payload, expected=201)

        key = result.get("key")
        if not isinstance(key, str) or not key:
            raise JiraMalformedResponse("Jira did not return the key of the created issue")
        return key

    def search_issues(
        self,
        project: str,
        assignee: str | None = None,
        status: str | None = None,
        limit: int = 10,
    ) -> list[Issue]:
        clauses = [f'project = "{project}"']
        if assignee:
            clauses.append(f'assignee = "{assignee}"')
        if status:
            clauses.append(f'status = "{status}"')
        jql = " AND ".join(clauses) + " ORDER BY updated DESC"

        query = urllib.parse.urlencode({
            "jql": jql,
            "fields": SEARCH_FIELDS,
            # Each of the four columns may hold `limit` issues
            "maxResults": max(limit, 1) * 4,
        })
        result = self._request("GET", f"/rest/api/2/search?{query}")

        raw_issues = result.get("issues")
        if not isinstance(raw_issues, list):
            raise JiraMalformedResponse("Search response has no 'issues' list")
        return [self._decode_issue(raw, raw.get("key", "") if isinstance(raw, dict) else "")
                for raw in raw_issues if isinstance(raw, dict)]
