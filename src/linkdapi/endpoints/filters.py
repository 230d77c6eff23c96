# ABOUTME: Typed search filter models for the LinkdAPI search endpoints.
# ABOUTME: Each model converts its optional fields into the flat query parameters the API expects.

from typing import Annotated

from pydantic import BaseModel, ConfigDict, Field

from linkdapi.http.request import ParamValue, format_flag, join_values

ListFilter = str | list[str] | None


class SearchFilter(BaseModel):
    """Base for search filters: pagination start plus keyword."""

    model_config = ConfigDict(frozen=True, extra="forbid")

    keyword: Annotated[str | None, Field(description="Search keyword")] = None

    start: Annotated[int, Field(description="Pagination start index", ge=0)] = 0

    def to_params(self) -> dict[str, ParamValue]:
        """Return the query parameters for this filter."""
        return {"start": self.start, "keyword": self.keyword}


class JobSearchFilter(SearchFilter):
    """Filters for the jobs search endpoint."""

    location: Annotated[str | None, Field(description="City, state, or region")] = None

    geo_id: Annotated[str | None, Field(description="LinkedIn geographic identifier")] = None

    company_ids: Annotated[ListFilter, Field(description="Company IDs")] = None

    job_types: Annotated[
        ListFilter,
        Field(description="full_time, part_time, contract, temporary, internship, volunteer"),
    ] = None

    experience: Annotated[
        ListFilter,
        Field(description="internship, entry_level, associate, mid_senior, director"),
    ] = None

    regions: Annotated[ListFilter, Field(description="Region codes")] = None

    time_posted: Annotated[str | None, Field(description="any, 24h, 1week, 1month")] = None

    salary: Annotated[str | None, Field(description="any, 40k, 60k, 80k, 100k, 120k")] = None

    work_arrangement: Annotated[ListFilter, Field(description="onsite, remote, hybrid")] = None

    def to_params(self) -> dict[str, ParamValue]:
        return {
            **super().to_params(),
            "location": self.location,
            "geoId": self.geo_id,
            "companyIds": join_values(self.company_ids),
            "jobTypes": join_values(self.job_types),
            "experience": join_values(self.experience),
            "regions": join_values(self.regions),
            "timePosted": self.time_posted,
            "salary": self.salary,
            "workArrangement": join_values(self.work_arrangement),
        }


class JobSearchV2Filter(SearchFilter):
    """Filters for the comprehensive jobs search endpoint."""

    sort_by: Annotated[str | None, Field(description="relevance or date_posted")] = None

    date_posted: Annotated[str | None, Field(description="24h, 1week, or 1month")] = None

    experience: Annotated[ListFilter, Field(description="Experience levels")] = None

    job_types: Annotated[ListFilter, Field(description="Employment types")] = None

    workplace_types: Annotated[ListFilter, Field(description="onsite, remote, hybrid")] = None

    salary: Annotated[str | None, Field(description="Minimum annual salary, e.g. 100k")] = None

    companies: Annotated[ListFilter, Field(description="Company IDs")] = None

    industries: Annotated[ListFilter, Field(description="Industry IDs")] = None

    locations: Annotated[ListFilter, Field(description="Geographic identifiers")] = None

    functions: Annotated[ListFilter, Field(description="Job function codes")] = None

    titles: Annotated[ListFilter, Field(description="Job title IDs")] = None

    benefits: Annotated[ListFilter, Field(description="Benefits, e.g. medical_ins, 401k")] = None

    commitments: Annotated[ListFilter, Field(description="Company values, e.g. dei")] = None

    easy_apply: Annotated[bool | None, Field(description="Only Easy Apply jobs")] = None

    verified_job: Annotated[bool | None, Field(description="Only verified postings")] = None

    under_10_applicants: Annotated[
        bool | None, Field(description="Only jobs with fewer than 10 applicants")
    ] = None

    fair_chance: Annotated[bool | None, Field(description="Only fair chance employers")] = None

    def to_params(self) -> dict[str, ParamValue]:
        return {
            **super().to_params(),
            "sortBy": self.sort_by,
            "datePosted": self.date_posted,
            "experience": join_values(self.experience),
            "jobTypes": join_values(self.job_types),
            "workplaceTypes": join_values(self.workplace_types),
            "salary": self.salary,
            "companies": join_values(self.companies),
            "industries": join_values(self.industries),
            "locations": join_values(self.locations),
            "functions": join_values(self.functions),
            "titles": join_values(self.titles),
            # The API expects this key capitalized.
            "Benefits": join_values(self.benefits),
            "commitments": join_values(self.commitments),
            "easyApply": format_flag(self.easy_apply),
            "verifiedJob": format_flag(self.verified_job),
            "under10Applicants": format_flag(self.under_10_applicants),
            "fairChance": format_flag(self.fair_chance),
        }


class PeopleSearchFilter(SearchFilter):
    """Filters for the people search endpoint."""

    current_company: Annotated[ListFilter, Field(description="Current company IDs")] = None

    first_name: Annotated[str | None, Field(description="First name")] = None

    geo_urn: Annotated[ListFilter, Field(description="Geographic URNs")] = None

    industry: Annotated[ListFilter, Field(description="Industry IDs")] = None

    last_name: Annotated[str | None, Field(description="Last name")] = None

    profile_language: Annotated[str | None, Field(description="Profile language, e.g. en")] = None

    past_company: Annotated[ListFilter, Field(description="Past company IDs")] = None

    school: Annotated[ListFilter, Field(description="School IDs")] = None

    service_category: Annotated[str | None, Field(description="Service category ID")] = None

    title: Annotated[str | None, Field(description="Job title, e.g. founder")] = None

    def to_params(self) -> dict[str, ParamValue]:
        return {
            **super().to_params(),
            "currentCompany": join_values(self.current_company),
            "firstName": self.first_name,
            "geoUrn": join_values(self.geo_urn),
            "industry": join_values(self.industry),
            "lastName": self.last_name,
            "profileLanguage": self.profile_language,
            "pastCompany": join_values(self.past_company),
            "school": join_values(self.school),
            "serviceCategory": self.service_category,
            "title": self.title,
        }


class CompanySearchFilter(SearchFilter):
    """Filters for the company search endpoint."""

    geo_urn: Annotated[ListFilter, Field(description="Geographic URNs")] = None

    company_size: Annotated[
        ListFilter, Field(description="Sizes such as 1-10, 11-50, 10,001+")
    ] = None

    has_jobs: Annotated[bool | None, Field(description="Only companies with job listings")] = None

    industry: Annotated[ListFilter, Field(description="Industry IDs")] = None

    def to_params(self) -> dict[str, ParamValue]:
        return {
            **super().to_params(),
            "geoUrn": join_values(self.geo_urn),
            "companySize": join_values(self.company_size),
            "hasJobs": format_flag(self.has_jobs),
            "industry": join_values(self.industry),
        }


class ServiceSearchFilter(SearchFilter):
    """Filters for the services search endpoint."""

    geo_urn: Annotated[ListFilter, Field(description="Geographic URNs")] = None

    profile_language: Annotated[str | None, Field(description="Profile language, e.g. en")] = None

    service_category: Annotated[ListFilter, Field(description="Service category IDs")] = None

    def to_params(self) -> dict[str, ParamValue]:
        return {
            **super().to_params(),
            "geoUrn": join_values(self.geo_urn),
            "profileLanguage": self.profile_language,
            "serviceCategory": join_values(self.service_category),
        }


class PostSearchFilter(SearchFilter):
    """Filters for the posts search endpoint.

    Unlike the other searches, pagination starts at 10 and results are
    sorted by relevance unless told otherwise.
    """

    start: Annotated[int, Field(description="Pagination start index", ge=0)] = 10

    sort_by: Annotated[str, Field(description="relevance or date_posted")] = "relevance"

    author_company: Annotated[str | None, Field(description="Company ID of the author")] = None

    author_industry: Annotated[str | None, Field(description="Industry ID of the author")] = None

    author_job_title: Annotated[str | None, Field(description="Job title of the author")] = None

    content_type: Annotated[
        str | None,
        Field(description="videos, photos, jobs, liveVideos, documents, collaborativeArticles"),
    ] = None

    date_posted: Annotated[
        str | None, Field(description="past-24h, past-week, past-month, past-year")
    ] = None

    from_member: Annotated[str | None, Field(description="Profile URN of the author")] = None

    from_organization: Annotated[ListFilter, Field(description="Company IDs")] = None

    mentions_member: Annotated[str | None, Field(description="Mentioned profile URN")] = None

    mentions_organization: Annotated[ListFilter, Field(description="Mentioned company IDs")] = None

    def to_params(self) -> dict[str, ParamValue]:
        return {
            "start": self.start,
            "sortBy": self.sort_by,
            "keyword": self.keyword,
            "authorCompany": self.author_company,
            "authorIndustry": self.author_industry,
            "authorJobTitle": self.author_job_title,
            "contentType": self.content_type,
            "datePosted": self.date_posted,
            "fromMember": self.from_member,
            "fromOrganization": join_values(self.from_organization),
            "mentionsMember": self.mentions_member,
            "mentionsOrganization": join_values(self.mentions_organization),
        }
