"""GitHub API Client

Opens pull requests against the upstream tap through the GitHub REST API.
"""

import json
from typing import Any, Dict
import requests
from src.utils import debug_log
from src.github.constants import GITHUB_API_VERSION, GITHUB_REQUEST_TIMEOUT
from src.homebrew_updater.domains.scm.scm_operations import ScmOperations


class GitHubApiClient(ScmOperations):
    """
    GitHub API client for pull request creation.

    Supports both GitHub.com and GitHub Enterprise through `base_url`.
    """

    def __init__(self, token: str, base_url: str = "https://api.github.com", user_agent: str = "homebrew-updater"):
        """
        Initialize GitHub API client.

        Args:
            token: GitHub authentication token
            base_url: GitHub API base URL (for Enterprise support)
            user_agent: User agent string to identify the client
        """
        self.token = token
        self.base_url = base_url.rstrip("/")
        self.user_agent = user_agent

    def _get_headers(self) -> Dict[str, str]:
        """Generate standard headers for API calls."""
        return {
            "Authorization": f"Bearer {self.token}",
            "Accept": "application/vnd.github+json",
            "X-GitHub-Api-Version": GITHUB_API_VERSION,
            "User-Agent": self.user_agent,
        }

    def create_pull_request(self, owner: str, repo: str, title: str, head: str, base: str, body: str) -> Dict[str, Any]:
        """
        Creates a pull request on `owner/repo`.

        Returns:
            dict: The created pull request (including `number` and `html_url`)

        Raises:
            requests.exceptions.RequestException: On network or HTTP errors
        """
        api_url = f"{self.base_url}/repos/{owner}/{repo}/pulls"
        payload = {
            "title": title,
            "head": head,
            "base": base,
            "body": body,
        }

        debug_log(f"Making POST request to: {api_url}")
        debug_log(f"Payload: {json.dumps(payload)}")
        response = requests.post(api_url, headers=self._get_headers(), json=payload, timeout=GITHUB_REQUEST_TIMEOUT)
        debug_log(f"Pull request API response status code: {response.status_code}")
        response.raise_for_status()

        pull_request = response.json()
        debug_log(f"Opened pull request #{pull_request.get('number')}: {pull_request.get('html_url')}")
        return pull_request
