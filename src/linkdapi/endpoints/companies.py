# ABOUTME: Company endpoints of the LinkdAPI catalog.
# ABOUTME: Looks up company info, employees, jobs, posts, and affiliated pages.

from typing import Any

from linkdapi.endpoints.base import EndpointGroup, api_path
from linkdapi.errors import MissingParameterError
from linkdapi.http.request import ListParam, join_values


class CompanyEndpoints(EndpointGroup):
    """Company lookups by ID, name, or universal name."""

    def company_name_lookup(self, query: str) -> Any:
        """Search companies by name; the query may be a single character."""
        return self._get(api_path("companies/name-lookup"), {"query": query})

    def get_company_info(self, company_id: str | None = None, name: str | None = None) -> Any:
        """Get company details by ID or name.

        Args:
            company_id: The company ID.
            name: The company name. Both are forwarded when both are given.

        Returns:
            The company details payload.

        Raises:
            MissingParameterError: If neither company_id nor name is provided.
        """
        if not company_id and not name:
            raise MissingParameterError("company_id", "name")
        return self._get(api_path("companies/company/info"), {"id": company_id, "name": name})

    def get_similar_companies(self, company_id: str) -> Any:
        return self._get(api_path("companies/company/similar"), {"id": company_id})

    def get_company_employees_data(self, company_id: str) -> Any:
        return self._get(api_path("companies/company/employees-data"), {"id": company_id})

    def get_company_jobs(self, company_ids: ListParam, start: int = 0) -> Any:
        """Get open job listings for one or more companies.

        Args:
            company_ids: A company ID or a list of IDs, sent comma-joined.
            start: Pagination start index.
        """
        return self._get(
            api_path("companies/jobs"),
            {"companyIDs": join_values(company_ids), "start": start},
        )

    def get_company_affiliated_pages(self, company_id: str) -> Any:
        """Get affiliated pages and subsidiaries of a company."""
        return self._get(api_path("companies/company/affiliated-pages"), {"id": company_id})

    def get_company_posts(self, company_id: str, start: int = 0) -> Any:
        return self._get(api_path("companies/company/posts"), {"id": company_id, "start": start})

    def get_company_id(self, universal_name: str) -> Any:
        """Resolve a company universal name to its ID."""
        return self._get(
            api_path("companies/company/universal-name-to-id"),
            {"universalName": universal_name},
        )

    def get_company_details_v2(self, company_id: str) -> Any:
        """Get extended company details such as peopleAlsoFollow and affiliatedByJobs."""
        return self._get(api_path("companies/company/info-v2"), {"id": company_id})
