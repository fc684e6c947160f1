"""Platform API exports."""

from .api_client import PlatformApiError, SanityApiClient, group_projects_by_organization

__all__ = [
    "PlatformApiError",
    "SanityApiClient",
    "group_projects_by_organization",
]
