from typing import Any, Dict, Iterator, List

import requests
from dagster import ConfigurableResource, get_dagster_logger

GIST_PAGE_SIZE = 100


class GitHubGistResource(ConfigurableResource):
    """Resource for listing a user's gists and downloading their raw files."""

    github_token: str
    api_base_url: str = "https://api.github.com"
    request_timeout: float = 30.0

    @property
    def auth_headers(self) -> Dict[str, str]:
        return {"Authorization": f"token {self.github_token}"}

    @property
    def headers(self) -> Dict[str, str]:
        return {"Accept": "application/vnd.github+json", **self.auth_headers}

    def get_gist_page(self, username: str, page: int) -> List[Dict[str, Any]]:
        """Fetch one page (1-indexed) of a user's gists."""
        request_url = f"{self.api_base_url.rstrip('/')}/users/{username}/gists"
        response = requests.get(
            request_url,
            params={"per_page": GIST_PAGE_SIZE, "page": page},
            headers=self.headers,
            timeout=self.request_timeout,
        )
        response.raise_for_status()
        return response.json()

    def iter_gist_pages(self, username: str) -> Iterator[List[Dict[str, Any]]]:
        """Yield pages of gists until the API returns an empty page.

        Errors are not retried; they propagate to the caller.
        """
        page = 1
        while True:
            gists = self.get_gist_page(username, page)
            if not gists:
                get_dagster_logger().debug(f"No gists on page {page} for {username}, stopping")
                return

            get_dagster_logger().info(f"Fetched page {page} with {len(gists)} gists for {username}")
            yield gists
            page += 1

    def fetch_raw_content(self, raw_url: str) -> str:
        """Download the raw text of one gist file."""
        response = requests.get(raw_url, headers=self.auth_headers, timeout=self.request_timeout)
        response.raise_for_status()
        return response.text
