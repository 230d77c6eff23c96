# ABOUTME: Search endpoints of the LinkdAPI catalog.
# ABOUTME: Searches people, companies, services, schools, and posts with typed filters.

from typing import Any

from linkdapi.endpoints.base import EndpointGroup, api_path, build_filter
from linkdapi.endpoints.filters import (
    CompanySearchFilter,
    PeopleSearchFilter,
    PostSearchFilter,
    ServiceSearchFilter,
)


class SearchEndpoints(EndpointGroup):
    """Filtered searches.

    Every search accepts either a filter model or the model's fields as
    keyword arguments.
    """

    def search_people(self, filter: PeopleSearchFilter | None = None, **options: Any) -> Any:
        people_filter = build_filter(PeopleSearchFilter, filter, options)
        return self._get(api_path("search/people"), people_filter.to_params())

    def search_companies(self, filter: CompanySearchFilter | None = None, **options: Any) -> Any:
        company_filter = build_filter(CompanySearchFilter, filter, options)
        return self._get(api_path("search/companies"), company_filter.to_params())

    def search_services(self, filter: ServiceSearchFilter | None = None, **options: Any) -> Any:
        service_filter = build_filter(ServiceSearchFilter, filter, options)
        return self._get(api_path("search/services"), service_filter.to_params())

    def search_schools(self, keyword: str | None = None, start: int = 0) -> Any:
        """Search educational institutions."""
        return self._get(api_path("search/schools"), {"start": start, "keyword": keyword})

    def search_posts(self, filter: PostSearchFilter | None = None, **options: Any) -> Any:
        """Search posts; pagination starts at 10 and sorts by relevance by default."""
        post_filter = build_filter(PostSearchFilter, filter, options)
        return self._get(api_path("search/posts"), post_filter.to_params())
