# ABOUTME: Lookup, services, articles, and status endpoints of the LinkdAPI catalog.
# ABOUTME: Resolves geo IDs, skills, titles, and service categories; reads articles and services.

from typing import Any

from linkdapi.endpoints.base import EndpointGroup, api_path


class LookupEndpoints(EndpointGroup):
    """Name lookups that return IDs usable as search filters."""

    def geo_name_lookup(self, query: str) -> Any:
        """Search locations and return their geo IDs."""
        return self._get(api_path("geos/name-lookup"), {"query": query})

    def title_skills_lookup(self, query: str) -> Any:
        """Return relevant skills and titles with their IDs."""
        return self._get(api_path("g/title-skills-lookup"), {"query": query})

    def services_lookup(self, query: str) -> Any:
        """Return matching service categories with their IDs."""
        return self._get(api_path("g/services-lookup"), {"query": query})


class ServiceEndpoints(EndpointGroup):
    """Services offered by members, by vanity name."""

    def get_service_details(self, vanityname: str) -> Any:
        return self._get(api_path("services/service/details"), {"vanityname": vanityname})

    def get_similar_services(self, vanityname: str) -> Any:
        return self._get(api_path("services/service/similar"), {"vanityname": vanityname})


class ArticleEndpoints(EndpointGroup):
    """Articles published by profiles."""

    def get_all_articles(self, urn: str, start: int = 0) -> Any:
        """Get all articles published by a profile."""
        return self._get(api_path("articles/all"), {"urn": urn, "start": start})

    def get_article_info(self, url: str) -> Any:
        """Get article details from its full URL."""
        return self._get(api_path("articles/article/info"), {"url": url})

    def get_article_reactions(self, urn: str, start: int = 0) -> Any:
        """Get reactions to an article, using the thread URN from get_article_info."""
        return self._get(api_path("articles/article/reactions"), {"urn": urn, "start": start})


class SystemEndpoints(EndpointGroup):
    """Service health."""

    def get_service_status(self) -> Any:
        """Get API service status."""
        return self._get("status/")
