"""AtCoder HTTP client: submission history API and submission page scraping."""

import logging
from typing import List, Optional

import requests
from bs4 import BeautifulSoup

from .models import Submission
from ..errors import DecodeError, EmptyContentError, NetworkError, ParseError
from ..utils.rate_limiter import Throttle


logger = logging.getLogger(__name__)


class AtCoderClient:
    """HTTP client for the AtCoder Problems API and AtCoder submission pages."""

    SUBMISSIONS_ENDPOINT = "https://kenkoooo.com/atcoder/atcoder-api/v3/user/submissions"
    SUBMISSIONS_PER_PAGE = 500
    CODE_SELECTOR = ".linenums"
    USER_AGENT = "procon-gardener/1.0 (submission archiver)"

    def __init__(
        self,
        session: Optional[requests.Session] = None,
        throttle: Optional[Throttle] = None,
    ):
        """Initialize the client."""
        self.session = session or requests.Session()
        self.session.headers.update({"User-Agent": self.USER_AGENT})
        # Shared by every page request of the run
        self.throttle = throttle or Throttle(interval=1.5)

    def _get(self, url: str, **kwargs) -> requests.Response:
        """Make GET request, raising NetworkError on failure."""
        try:
            response = self.session.get(url, **kwargs)
            response.raise_for_status()
        except requests.exceptions.ContentDecodingError as e:
            raise DecodeError(f"Cannot decode response body: {e}", url) from e
        except requests.RequestException as e:
            raise NetworkError(f"Request failed: {e}", url) from e
        return response

    def fetch_submissions_page(self, user_id: str, from_second: int) -> List[Submission]:
        """Fetch one page of a user's submissions starting at ``from_second``."""
        params = {"user": user_id, "from_second": str(from_second)}
        logger.info("Requesting %s?user=%s&from_second=%d", self.SUBMISSIONS_ENDPOINT, user_id, from_second)

        # requests decodes the gzip body transparently
        response = self._get(
            self.SUBMISSIONS_ENDPOINT,
            params=params,
            headers={"Accept-Encoding": "gzip"},
        )
        try:
            data = response.json()
        except (ValueError, requests.RequestException) as e:
            raise DecodeError(f"Malformed submissions response: {e}", response.url) from e

        if not isinstance(data, list):
            raise DecodeError("Submissions response is not a JSON array", response.url)
        try:
            return [Submission.from_json(record) for record in data]
        except DecodeError as e:
            raise DecodeError(str(e), response.url) from e

    def fetch_submissions(self, user_id: str) -> List[Submission]:
        """
        Fetch the whole submission history of a user.
        Pages are requested until one comes back shorter than a full page.
        """
        submissions: List[Submission] = []
        from_second = 0
        while True:
            page = self.fetch_submissions_page(user_id, from_second)
            submissions.extend(page)
            if len(page) < self.SUBMISSIONS_PER_PAGE:
                logger.debug("Fetched %d submissions of %s", len(submissions), user_id)
                return submissions
            from_second = page[-1].epoch_second

    def scrape_source(self, submission: Submission) -> List[str]:
        """
        Scrape the source code blocks of a submission page, in document order.
        Raises EmptyContentError if any block is empty.
        """
        url = submission.url
        self.throttle.wait()
        logger.info("Requesting %s", url)
        response = self._get(url)

        soup = BeautifulSoup(response.text, "html.parser")
        blocks = soup.select(self.CODE_SELECTOR)
        if not blocks:
            raise ParseError(f"No {self.CODE_SELECTOR} code block found", url)

        codes = [block.get_text() for block in blocks]
        if any(code == "" for code in codes):
            raise EmptyContentError("Empty source code block", url)
        return codes

    def close(self):
        """Close the HTTP session."""
        self.session.close()
