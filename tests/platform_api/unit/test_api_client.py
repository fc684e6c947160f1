"""Platform API client tests."""

from __future__ import annotations

import json

import httpx
import pytest
from sanity_schema_tools.configuration.runtime_settings import ApiSettings
from sanity_schema_tools.platform_api.api_client import (
    PlatformApiError,
    SanityApiClient,
    group_projects_by_organization,
)


class _RecordingHandler:
    """Mock transport handler returning canned JSON per path."""

    def __init__(self, responses: dict[str, httpx.Response]) -> None:
        self._responses = responses
        self.requests: list[httpx.Request] = []

    def __call__(self, request: httpx.Request) -> httpx.Response:
        self.requests.append(request)
        return self._responses.get(request.url.path, httpx.Response(404, json={"message": "nope"}))


def _client(handler: _RecordingHandler, token: str | None = "secret") -> SanityApiClient:
    return SanityApiClient(
        ApiSettings(token=token, api_version="v2024-10-01"),
        transport=httpx.MockTransport(handler),
    )


def test_list_embeddings_indices_calls_project_host_with_bearer_token() -> None:
    handler = _RecordingHandler(
        {"/v2024-10-01/embeddings-index/production": httpx.Response(200, json=[{"indexName": "a"}])}
    )

    with _client(handler) as client:
        result = client.list_embeddings_indices("abc123", "production")

    assert result == [{"indexName": "a"}]
    request = handler.requests[0]
    assert request.method == "GET"
    assert request.url.host == "abc123.api.sanity.io"
    assert request.headers["Authorization"] == "Bearer secret"


def test_semantic_search_posts_query_with_type_filter() -> None:
    path = "/v2024-10-01/embeddings-index/query/production/posts"
    handler = _RecordingHandler({path: httpx.Response(200, json=[{"score": 0.9}])})

    with _client(handler) as client:
        result = client.semantic_search(
            "winter recipes",
            project_id="abc123",
            dataset="production",
            index_name="posts",
            max_results=3,
            types="post",
        )

    assert result == [{"score": 0.9}]
    request = handler.requests[0]
    assert request.method == "POST"
    assert json.loads(request.content) == {
        "query": "winter recipes",
        "maxResults": 3,
        "filter": {"type": ["post"]},
    }


def test_semantic_search_omits_filter_without_types() -> None:
    path = "/v2024-10-01/embeddings-index/query/production/posts"
    handler = _RecordingHandler({path: httpx.Response(200, json=[])})

    with _client(handler) as client:
        client.semantic_search("q", project_id="abc123", dataset="production", index_name="posts")

    assert json.loads(handler.requests[0].content) == {"query": "q", "maxResults": 10}


def test_client_without_token_sends_no_authorization_header() -> None:
    handler = _RecordingHandler(
        {"/v2024-10-01/embeddings-index/production": httpx.Response(200, json=[])}
    )

    with _client(handler, token=None) as client:
        client.list_embeddings_indices("abc123", "production")

    assert "Authorization" not in handler.requests[0].headers


def test_http_error_status_raises_platform_api_error_with_detail() -> None:
    handler = _RecordingHandler(
        {
            "/v2024-10-01/embeddings-index/production": httpx.Response(
                401, json={"message": "Unauthorized - Session not found"}
            )
        }
    )

    with _client(handler) as client, pytest.raises(PlatformApiError) as exc_info:
        client.list_embeddings_indices("abc123", "production")

    assert "401" in str(exc_info.value)
    assert "Session not found" in str(exc_info.value)


def test_transport_error_raises_platform_api_error() -> None:
    def _fail(request: httpx.Request) -> httpx.Response:
        raise httpx.ConnectError("connection refused", request=request)

    client = SanityApiClient(ApiSettings(token=None), transport=httpx.MockTransport(_fail))

    with client, pytest.raises(PlatformApiError, match="connection refused"):
        client.list_embeddings_indices("abc123", "production")


def test_list_organizations_and_projects_groups_projects() -> None:
    handler = _RecordingHandler(
        {
            "/v2024-10-01/organizations": httpx.Response(200, json=[{"id": "o1", "name": "Acme"}]),
            "/v2024-10-01/projects": httpx.Response(
                200,
                json=[
                    {"id": "p1", "displayName": "Blog", "organizationId": "o1"},
                    {"id": "p2", "displayName": "Sandbox", "organizationId": None},
                ],
            ),
        }
    )

    with _client(handler) as client:
        result = client.list_organizations_and_projects()

    assert handler.requests[0].url.host == "api.sanity.io"
    assert result == [
        {"id": "o1", "name": "Acme", "projects": [{"id": "p1", "name": "Blog"}]},
        {
            "id": "personal",
            "name": "Personal projects",
            "projects": [{"id": "p2", "name": "Sandbox"}],
        },
    ]


def test_list_studios_maps_hosted_and_external_studios() -> None:
    handler = _RecordingHandler(
        {
            "/v2024-10-01/projects/p1/user-applications": httpx.Response(
                200,
                json=[
                    {"id": "s1", "title": "Main", "appHost": "acme", "urlType": "internal"},
                    {
                        "id": "s2",
                        "title": "Self hosted",
                        "appHost": "https://studio.acme.test",
                        "urlType": "external",
                    },
                    {"id": "c1", "type": "coreApp", "appHost": "tool"},
                ],
            )
        }
    )

    with _client(handler) as client:
        result = client.list_studios("p1")

    assert result == {
        "studios": [
            {"id": "s1", "title": "Main", "url": "https://acme.sanity.studio/", "type": "internal"},
            {
                "id": "s2",
                "title": "Self hosted",
                "url": "https://studio.acme.test",
                "type": "external",
            },
        ]
    }


def test_list_studios_reports_when_none_exist() -> None:
    handler = _RecordingHandler(
        {"/v2024-10-01/projects/p1/user-applications": httpx.Response(200, json=[])}
    )

    with _client(handler) as client:
        result = client.list_studios("p1")

    assert result["studios"] == []
    assert "npx sanity deploy" in result["message"]


def test_group_projects_keeps_empty_organizations() -> None:
    grouped = group_projects_by_organization([{"id": "o1", "name": "Empty"}], [])

    assert grouped == [{"id": "o1", "name": "Empty", "projects": []}]


def test_group_projects_skips_entries_that_are_not_objects() -> None:
    grouped = group_projects_by_organization(
        ["oops", {"id": "o1", "name": "Acme"}],
        ["oops", None, {"id": "p1", "displayName": "Blog", "organizationId": "o1"}],
    )

    assert grouped == [{"id": "o1", "name": "Acme", "projects": [{"id": "p1", "name": "Blog"}]}]
