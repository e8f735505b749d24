"""GitHub API client for the pull request write operations."""

import base64
import os
import logging
from typing import Dict, List
import requests
from requests.adapters import HTTPAdapter
from urllib3.util.retry import Retry

API_URL = os.environ.get('GITHUB_API_URL', 'https://api.github.com')


class GitHubAPIClient:
    """Handles GitHub API requests for one repository with retry logic."""

    def __init__(self, repo: str, token: str = None, api_url: str = API_URL):
        """Initialize the GitHub API client.

        Args:
            repo: Repository in 'owner/name' form
            token: GitHub token for authentication
            api_url: Base URL of the REST API
        """
        self.repo = repo
        self.api_url = api_url.rstrip('/')
        # Use provided token or fall back to environment variable
        self.token = token or os.environ.get('GITHUB_TOKEN')
        self.session = requests.Session()

        adapter = HTTPAdapter(
            max_retries=Retry(
                total=3,
                backoff_factor=0.3,
                status_forcelist=[500, 502, 503, 504],
                allowed_methods=None  # POST is retried too
            )
        )
        self.session.mount('https://', adapter)
        self.session.mount('http://', adapter)
        self.session.headers.update({'Accept': 'application/vnd.github.v3+json'})

        if self.token:
            self.session.headers.update({'Authorization': f'token {self.token}'})
            logging.info("Initialized GitHub API client with token")
        else:
            logging.warning("No GitHub token provided. Write requests will be rejected.")
            logging.warning("Set GITHUB_TOKEN environment variable or pass token as argument.")

    def _url(self, path: str) -> str:
        return f"{self.api_url}/repos/{self.repo}/{path}"

    def _post(self, path: str, payload: Dict) -> Dict:
        """POST a JSON payload and return the decoded response.

        Raises:
            requests.exceptions.HTTPError: If GitHub answers with an error status
        """
        url = self._url(path)
        response = self.session.post(url, json=payload)
        response.raise_for_status()
        result = response.json()
        logging.debug(f"POST {url} -> {result}")
        return result

    def request_reviewers(self, pr_number: int, reviewers: List[str]) -> Dict:
        return self._post(f"pulls/{pr_number}/requested_reviewers", {'reviewers': reviewers})

    def add_assignees(self, pr_number: int, assignees: List[str]) -> Dict:
        return self._post(f"issues/{pr_number}/assignees", {'assignees': assignees})

    def add_labels(self, pr_number: int, labels: List[str]) -> Dict:
        return self._post(f"issues/{pr_number}/labels", {'labels': labels})

    def get_pull_request(self, pr_number: int) -> Dict:
        """Fetch the current state of a pull request."""
        response = self.session.get(self._url(f"pulls/{pr_number}"))
        response.raise_for_status()
        return response.json()

    def get_file_contents(self, path: str, ref: str = None) -> str:
        """Fetch a text file from the repository.

        Args:
            path: Path of the file inside the repository
            ref: Commit sha or branch to read from (default branch if None)

        Returns:
            The decoded file contents
        """
        params = {'ref': ref} if ref else None
        response = self.session.get(self._url(f"contents/{path}"), params=params)
        response.raise_for_status()
        data = response.json()
        return base64.b64decode(data['content']).decode('utf-8')
