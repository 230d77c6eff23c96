# ABOUTME: Tests for the search filter models.
# ABOUTME: Covers query parameter conversion, defaults, unknown fields, and filter construction.

import pytest
from pydantic import ValidationError

from linkdapi.endpoints.base import build_filter
from linkdapi.endpoints.filters import (
    CompanySearchFilter,
    JobSearchFilter,
    JobSearchV2Filter,
    PeopleSearchFilter,
    PostSearchFilter,
    SearchFilter,
)


class TestSearchFilter:
    """Tests for the shared keyword and start fields."""

    def test_defaults(self) -> None:
        assert SearchFilter().to_params() == {"start": 0, "keyword": None}

    def test_negative_start_rejected(self) -> None:
        with pytest.raises(ValidationError):
            SearchFilter(start=-1)

    def test_unknown_field_rejected(self) -> None:
        """Test that misspelled filter names fail instead of being dropped."""
        with pytest.raises(ValidationError):
            JobSearchFilter(keywrod="python")  # type: ignore[call-arg]

    def test_filters_are_frozen(self) -> None:
        job_filter = JobSearchFilter(keyword="python")
        with pytest.raises(ValidationError):
            job_filter.keyword = "rust"  # type: ignore[misc]


class TestJobSearchFilter:
    """Tests for jobs search parameters."""

    def test_list_fields_joined(self) -> None:
        params = JobSearchFilter(
            job_types=["full_time", "contract"],
            experience=["mid_senior", "director"],
            regions="US",
        ).to_params()

        assert params["jobTypes"] == "full_time,contract"
        assert params["experience"] == "mid_senior,director"
        assert params["regions"] == "US"

    def test_unset_fields_are_none(self) -> None:
        params = JobSearchFilter().to_params()
        assert params["location"] is None
        assert params["companyIds"] is None


class TestJobSearchV2Filter:
    """Tests for comprehensive jobs search parameters."""

    def test_flags_serialized_only_when_set(self) -> None:
        params = JobSearchV2Filter(verified_job=True, under_10_applicants=False).to_params()

        assert params["verifiedJob"] == "true"
        assert params["under10Applicants"] == "false"
        assert params["easyApply"] is None
        assert params["fairChance"] is None

    def test_benefits_key_is_capitalized(self) -> None:
        params = JobSearchV2Filter(benefits=["medical_ins"]).to_params()
        assert params["Benefits"] == "medical_ins"
        assert "benefits" not in params


class TestOtherFilters:
    """Tests for people, company, and post filters."""

    def test_people_filter_names(self) -> None:
        params = PeopleSearchFilter(
            first_name="Ada", last_name="Lovelace", past_company=["1", "2"]
        ).to_params()

        assert params["firstName"] == "Ada"
        assert params["lastName"] == "Lovelace"
        assert params["pastCompany"] == "1,2"

    def test_company_has_jobs_flag(self) -> None:
        assert CompanySearchFilter(has_jobs=True).to_params()["hasJobs"] == "true"
        assert CompanySearchFilter().to_params()["hasJobs"] is None

    def test_post_filter_defaults(self) -> None:
        """Test that post search starts at 10 and sorts by relevance."""
        post_filter = PostSearchFilter()
        assert post_filter.start == 10
        assert post_filter.sort_by == "relevance"
        assert list(post_filter.to_params())[:3] == ["start", "sortBy", "keyword"]

    def test_post_filter_mentions(self) -> None:
        params = PostSearchFilter(
            mentions_member="u1", mentions_organization=["1441", "1035"]
        ).to_params()
        assert params["mentionsMember"] == "u1"
        assert params["mentionsOrganization"] == "1441,1035"


class TestBuildFilter:
    """Tests for choosing between a filter object and keyword options."""

    def test_returns_given_filter(self) -> None:
        job_filter = JobSearchFilter(keyword="python")
        assert build_filter(JobSearchFilter, job_filter, {}) is job_filter

    def test_builds_from_options(self) -> None:
        built = build_filter(JobSearchFilter, None, {"keyword": "python", "start": 25})
        assert built == JobSearchFilter(keyword="python", start=25)

    def test_builds_default_filter(self) -> None:
        assert build_filter(PostSearchFilter, None, {}) == PostSearchFilter()

    def test_filter_and_options_rejected(self) -> None:
        with pytest.raises(TypeError):
            build_filter(JobSearchFilter, JobSearchFilter(), {"keyword": "python"})
