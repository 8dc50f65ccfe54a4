import os
import shutil

# Let the package import on machines without a git binary; git tests skip there.
os.environ.setdefault("GIT_PYTHON_REFRESH", "quiet")

import pytest
import requests

from procon_gardener.client.models import Submission


requires_git = pytest.mark.skipif(shutil.which("git") is None, reason="git binary not available")


def make_submission(id=1, epoch_second=1_500_000_000, contest_id="abc100", problem_id="abc100_a",
                    result="AC", language="C++14 (GCC 5.4.1)", user_id="tourist", execution_time=12):
    return Submission(
        id=id,
        epoch_second=epoch_second,
        problem_id=problem_id,
        contest_id=contest_id,
        user_id=user_id,
        language=language,
        point=100.0,
        length=256,
        result=result,
        execution_time=execution_time,
    )


def submission_json(submission):
    return {
        "id": submission.id,
        "epoch_second": submission.epoch_second,
        "problem_id": submission.problem_id,
        "contest_id": submission.contest_id,
        "user_id": submission.user_id,
        "language": submission.language,
        "point": submission.point,
        "length": submission.length,
        "result": submission.result,
        "execution_time": submission.execution_time,
    }


def code_page(*codes):
    blocks = "".join(f'<pre class="prettyprint linenums">{code}</pre>' for code in codes)
    return f"<html><body><div id='submission-code'>{blocks}</div></body></html>"


class FakeResponse:
    def __init__(self, url, json_data=None, text="", status_code=200, json_error=None):
        self.url = url
        self.status_code = status_code
        self.text = text
        self._json = json_data
        self._json_error = json_error

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error for url: {self.url}", response=self)

    def json(self):
        if self._json_error is not None:
            raise self._json_error
        return self._json


class FakeSession:
    """Stand-in for requests.Session; ``handler(url, params)`` returns a FakeResponse."""

    def __init__(self, handler):
        self.handler = handler
        self.headers = {}
        self.calls = []
        self.closed = False

    def get(self, url, params=None, headers=None, **kwargs):
        self.calls.append({"url": url, "params": params, "headers": headers})
        return self.handler(url, params)

    def close(self):
        self.closed = True


class FakeClock:
    def __init__(self, now=1000.0):
        self.now = now
        self.sleeps = []

    def __call__(self):
        return self.now

    def sleep(self, seconds):
        self.sleeps.append(seconds)
        self.now += seconds


@pytest.fixture
def clock():
    return FakeClock()
