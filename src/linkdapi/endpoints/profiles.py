# ABOUTME: Profile endpoints of the LinkdAPI catalog.
# ABOUTME: Looks up profile overview, details, experience, skills, and related data.

from typing import Any

from linkdapi.endpoints.base import EndpointGroup, api_path
from linkdapi.errors import MissingParameterError


class ProfileEndpoints(EndpointGroup):
    """Profile lookups by username or URN."""

    def get_profile_overview(self, username: str) -> Any:
        """Get basic profile information by username."""
        return self._get(api_path("profile/overview"), {"username": username})

    def get_profile_details(self, urn: str) -> Any:
        """Get profile details by URN."""
        return self._get(api_path("profile/details"), {"urn": urn})

    def get_contact_info(self, username: str) -> Any:
        """Get email, phone and website details for a profile."""
        return self._get(api_path("profile/contact-info"), {"username": username})

    def get_full_experience(self, urn: str) -> Any:
        return self._get(api_path("profile/full-experience"), {"urn": urn})

    def get_certifications(self, urn: str) -> Any:
        return self._get(api_path("profile/certifications"), {"urn": urn})

    def get_education(self, urn: str) -> Any:
        return self._get(api_path("profile/education"), {"urn": urn})

    def get_skills(self, urn: str) -> Any:
        return self._get(api_path("profile/skills"), {"urn": urn})

    def get_social_matrix(self, username: str) -> Any:
        """Get connection and follower counts by username."""
        return self._get(api_path("profile/social-matrix"), {"username": username})

    def get_recommendations(self, urn: str) -> Any:
        """Get given and received recommendations."""
        return self._get(api_path("profile/recommendations"), {"urn": urn})

    def get_similar_profiles(self, urn: str) -> Any:
        return self._get(api_path("profile/similar"), {"urn": urn})

    def get_profile_about(self, urn: str) -> Any:
        """Get last update and verification info for a profile."""
        return self._get(api_path("profile/about"), {"urn": urn})

    def get_profile_reactions(self, urn: str, cursor: str = "") -> Any:
        """Get all reactions made by a profile.

        Args:
            urn: The profile URN.
            cursor: Pagination cursor; omitted from the request when empty.
        """
        return self._get(api_path("profile/reactions"), {"urn": urn, "cursor": cursor})

    def get_profile_interests(self, urn: str) -> Any:
        return self._get(api_path("profile/interests"), {"urn": urn})

    def get_full_profile(self, username: str | None = None, urn: str | None = None) -> Any:
        """Get the complete profile in a single request.

        Args:
            username: The profile username.
            urn: The profile URN. Both are forwarded when both are given.

        Returns:
            The full profile payload.

        Raises:
            MissingParameterError: If neither username nor urn is provided.
        """
        if not username and not urn:
            raise MissingParameterError("username", "urn")
        return self._get(api_path("profile/full"), {"username": username, "urn": urn})

    def get_profile_services(self, urn: str) -> Any:
        return self._get(api_path("profile/services"), {"urn": urn})

    def get_profile_urn(self, username: str) -> Any:
        """Resolve a username to its profile URN."""
        return self._get(api_path("profile/username-to-urn"), {"username": username})
