# ABOUTME: Endpoint catalog package for LinkdAPI resource families.
# ABOUTME: Exports the catalog groups composed by the client and the search filter models.

from linkdapi.endpoints.companies import CompanyEndpoints
from linkdapi.endpoints.filters import (
    CompanySearchFilter,
    JobSearchFilter,
    JobSearchV2Filter,
    PeopleSearchFilter,
    PostSearchFilter,
    ServiceSearchFilter,
)
from linkdapi.endpoints.jobs import JobEndpoints
from linkdapi.endpoints.lookups import (
    ArticleEndpoints,
    LookupEndpoints,
    ServiceEndpoints,
    SystemEndpoints,
)
from linkdapi.endpoints.posts import CommentEndpoints, PostEndpoints
from linkdapi.endpoints.profiles import ProfileEndpoints
from linkdapi.endpoints.search import SearchEndpoints

__all__ = [
    "ArticleEndpoints",
    "CommentEndpoints",
    "CompanyEndpoints",
    "JobEndpoints",
    "LookupEndpoints",
    "PostEndpoints",
    "ProfileEndpoints",
    "SearchEndpoints",
    "ServiceEndpoints",
    "SystemEndpoints",
    "CompanySearchFilter",
    "JobSearchFilter",
    "JobSearchV2Filter",
    "PeopleSearchFilter",
    "PostSearchFilter",
    "ServiceSearchFilter",
]
