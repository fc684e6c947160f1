"""HTTP client for the content platform's embeddings and project APIs."""

from __future__ import annotations

import logging
from collections.abc import Mapping, Sequence
from typing import Any

import httpx

from sanity_schema_tools.configuration.runtime_settings import ApiSettings

logger = logging.getLogger(__name__)

PERSONAL_ORGANIZATION_ID = "personal"


class PlatformApiError(Exception):
    """Raised when a platform API call fails."""


class SanityApiClient:
    """Thin synchronous wrapper over the platform HTTP endpoints."""

    def __init__(
        self,
        settings: ApiSettings,
        *,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._settings = settings
        headers = {"Accept": "application/json"}
        if settings.token:
            headers["Authorization"] = f"Bearer {settings.token}"
        self._client = httpx.Client(
            headers=headers,
            timeout=settings.timeout_seconds,
            transport=transport,
        )

    def close(self) -> None:
        self._client.close()

    def __enter__(self) -> SanityApiClient:
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def list_embeddings_indices(self, project_id: str, dataset: str) -> Any:
        """List embeddings indices configured for a project dataset."""
        return self._request("GET", self._project_url(project_id, f"embeddings-index/{dataset}"))

    def semantic_search(
        self,
        query: str,
        *,
        project_id: str,
        dataset: str,
        index_name: str,
        max_results: int = 10,
        types: str | Sequence[str] | None = None,
    ) -> Any:
        """Query an embeddings index and return the matching documents."""
        body: dict[str, Any] = {"query": query, "maxResults": max_results}
        type_filter = _normalize_types(types)
        if type_filter:
            body["filter"] = {"type": type_filter}
        url = self._project_url(project_id, f"embeddings-index/query/{dataset}/{index_name}")
        return self._request("POST", url, json=body)

    def list_organizations_and_projects(self) -> list[dict[str, Any]]:
        """Return organizations with their projects nested under `projects`."""
        organizations = self._request("GET", self._global_url("organizations"))
        projects = self._request("GET", self._global_url("projects"))
        return group_projects_by_organization(
            organizations if isinstance(organizations, list) else [],
            projects if isinstance(projects, list) else [],
        )

    def list_studios(self, project_id: str) -> dict[str, Any]:
        """Return the studio applications registered for a project."""
        applications = self._request(
            "GET", self._global_url(f"projects/{project_id}/user-applications")
        )
        studios = [
            {
                "id": application.get("id"),
                "title": application.get("title"),
                "url": _studio_url(application),
                "type": application.get("urlType"),
            }
            for application in (applications if isinstance(applications, list) else [])
            if isinstance(application, Mapping) and application.get("type", "studio") == "studio"
        ]
        if not studios:
            return {
                "studios": [],
                "message": "No studios found. Deploy one with 'npx sanity deploy'.",
            }
        return {"studios": studios}

    def _project_url(self, project_id: str, path: str) -> str:
        settings = self._settings
        return f"https://{project_id}.{settings.api_host}/{settings.api_version}/{path}"

    def _global_url(self, path: str) -> str:
        return f"https://{self._settings.api_host}/{self._settings.api_version}/{path}"

    def _request(self, method: str, url: str, **kwargs: Any) -> Any:
        logger.debug("%s %s", method, url)
        try:
            response = self._client.request(method, url, **kwargs)
            response.raise_for_status()
        except httpx.HTTPStatusError as exc:
            raise PlatformApiError(
                f"{method} {url} failed with status {exc.response.status_code}: "
                f"{_error_detail(exc.response)}"
            ) from exc
        except httpx.HTTPError as exc:
            raise PlatformApiError(f"{method} {url} failed: {exc}") from exc
        try:
            return response.json()
        except ValueError as exc:
            raise PlatformApiError(f"{method} {url} returned invalid JSON.") from exc


def group_projects_by_organization(
    organizations: Sequence[Any], projects: Sequence[Any]
) -> list[dict[str, Any]]:
    """Nest projects under their organization; unowned projects go to a personal bucket.

    Entries that are not JSON objects are skipped.
    """
    grouped: dict[str, dict[str, Any]] = {}
    for organization in organizations:
        if not isinstance(organization, Mapping):
            continue
        organization_id = organization.get("id")
        if not isinstance(organization_id, str):
            continue
        grouped[organization_id] = {
            "id": organization_id,
            "name": organization.get("name"),
            "projects": [],
        }
    for project in projects:
        if not isinstance(project, Mapping):
            continue
        owner = project.get("organizationId")
        organization_id = owner if isinstance(owner, str) and owner else PERSONAL_ORGANIZATION_ID
        bucket = grouped.setdefault(
            organization_id,
            {"id": organization_id, "name": "Personal projects", "projects": []},
        )
        bucket["projects"].append({"id": project.get("id"), "name": project.get("displayName")})
    return list(grouped.values())


def _normalize_types(types: str | Sequence[str] | None) -> list[str]:
    if types is None:
        return []
    if isinstance(types, str):
        return [types] if types else []
    return [item for item in types if isinstance(item, str) and item]


def _studio_url(application: Mapping[str, Any]) -> str | None:
    app_host = application.get("appHost")
    if not isinstance(app_host, str) or not app_host:
        return None
    if application.get("urlType") == "external":
        return app_host
    return f"https://{app_host}.sanity.studio/"


def _error_detail(response: httpx.Response) -> str:
    try:
        payload = response.json()
    except ValueError:
        return response.text or response.reason_phrase
    if isinstance(payload, Mapping):
        for key in ("message", "error"):
            if isinstance(payload.get(key), str):
                return payload[key]
    return response.reason_phrase
