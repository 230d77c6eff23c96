# ABOUTME: Job endpoints of the LinkdAPI catalog.
# ABOUTME: Searches jobs and retrieves job details, similar jobs, and hiring teams.

from typing import Any

from linkdapi.endpoints.base import EndpointGroup, api_path, build_filter
from linkdapi.endpoints.filters import JobSearchFilter, JobSearchV2Filter


class JobEndpoints(EndpointGroup):
    """Job search and job detail lookups."""

    def search_jobs(self, filter: JobSearchFilter | None = None, **options: Any) -> Any:
        """Search jobs.

        Args:
            filter: Search criteria. Alternatively pass JobSearchFilter fields
                as keyword arguments.

        Returns:
            The job search results.
        """
        job_filter = build_filter(JobSearchFilter, filter, options)
        return self._get(api_path("jobs/search"), job_filter.to_params())

    def get_job_details(self, job_id: str) -> Any:
        """Get details of an open, actively hiring job."""
        return self._get(api_path("jobs/job/details"), {"jobId": job_id})

    def get_similar_jobs(self, job_id: str) -> Any:
        return self._get(api_path("jobs/job/similar"), {"jobId": job_id})

    def get_people_also_viewed_jobs(self, job_id: str) -> Any:
        return self._get(api_path("jobs/job/people-also-viewed"), {"jobId": job_id})

    def get_job_details_v2(self, job_id: str) -> Any:
        """Get job details for any job status, including closed and expired jobs."""
        return self._get(api_path("jobs/job/details-v2"), {"jobId": job_id})

    def get_hiring_team(self, job_id: str, start: int = 0) -> Any:
        return self._get(api_path("jobs/job/hiring-team"), {"jobId": job_id, "start": start})

    def get_profile_posted_jobs(self, profile_urn: str, start: int = 0, count: int = 25) -> Any:
        """Get jobs posted by a profile."""
        return self._get(
            api_path("jobs/posted-by-profile"),
            {"profileUrn": profile_urn, "start": start, "count": count},
        )

    def search_jobs_v2(self, filter: JobSearchV2Filter | None = None, **options: Any) -> Any:
        """Search jobs with the full filter set, including boolean flags.

        Args:
            filter: Search criteria. Alternatively pass JobSearchV2Filter
                fields as keyword arguments.

        Returns:
            The job search results.
        """
        job_filter = build_filter(JobSearchV2Filter, filter, options)
        return self._get(api_path("search/jobs"), job_filter.to_params())
