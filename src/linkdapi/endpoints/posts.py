# ABOUTME: Post and comment endpoints of the LinkdAPI catalog.
# ABOUTME: Retrieves posts, their comments and likes, and comments made by a profile.

from typing import Any

from linkdapi.endpoints.base import EndpointGroup, api_path
from linkdapi.http.request import ListParam, join_values


class PostEndpoints(EndpointGroup):
    """Posts and their engagement."""

    def get_featured_posts(self, urn: str) -> Any:
        """Get the featured posts of a profile."""
        return self._get(api_path("posts/featured"), {"urn": urn})

    def get_all_posts(self, urn: str, cursor: str = "", start: int = 0) -> Any:
        """Get all posts of a profile.

        Args:
            urn: The profile URN.
            cursor: Pagination cursor; omitted when empty.
            start: Pagination start index.
        """
        return self._get(api_path("posts/all"), {"urn": urn, "cursor": cursor, "start": start})

    def get_post_info(self, urn: str) -> Any:
        return self._get(api_path("posts/info"), {"urn": urn})

    def get_post_comments(
        self, urn: str, start: int = 0, count: int = 10, cursor: str = ""
    ) -> Any:
        """Get comments on a post.

        Args:
            urn: The post URN.
            start: Pagination start index.
            count: Number of comments per page.
            cursor: Pagination cursor; omitted when empty.
        """
        return self._get(
            api_path("posts/comments"),
            {"urn": urn, "start": start, "count": count, "cursor": cursor},
        )

    def get_post_likes(self, urn: str, start: int = 0) -> Any:
        """Get the users who reacted to a post."""
        return self._get(api_path("posts/likes"), {"urn": urn, "start": start})


class CommentEndpoints(EndpointGroup):
    """Comments made by profiles and reactions to them."""

    def get_all_comments(self, urn: str, cursor: str = "") -> Any:
        """Get all comments made by a profile."""
        return self._get(api_path("comments/all"), {"urn": urn, "cursor": cursor})

    def get_comment_likes(self, urns: ListParam, start: int = 0) -> Any:
        """Get the users who reacted to one or more comments.

        Args:
            urns: A comment URN or a list of them.
            start: Pagination start index.
        """
        return self._get(api_path("comments/likes"), {"urn": join_values(urns), "start": start})
