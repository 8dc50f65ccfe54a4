"""Data models for AtCoder entities."""

from dataclasses import dataclass
from typing import Any, Dict, Optional

from ..errors import DecodeError


ACCEPTED = "AC"
SUBMISSION_URL = "https://atcoder.jp/contests/{contest_id}/submissions/{id}"


@dataclass(frozen=True)
class Submission:
    """Represents one judged submission as reported by the results API."""

    id: int
    epoch_second: int
    problem_id: str
    contest_id: str
    user_id: str
    language: str
    point: float
    length: int
    result: str
    execution_time: Optional[int] = None

    @classmethod
    def from_json(cls, data: Dict[str, Any]) -> "Submission":
        """Build a submission from one record of the API response."""
        if not isinstance(data, dict):
            raise DecodeError(f"Submission record is not an object: {data!r}")

        try:
            execution_time = data.get("execution_time")
            return cls(
                id=int(data["id"]),
                epoch_second=int(data["epoch_second"]),
                problem_id=str(data["problem_id"]),
                contest_id=str(data["contest_id"]),
                user_id=str(data["user_id"]),
                language=str(data["language"]),
                point=float(data.get("point", 0.0)),
                length=int(data.get("length", 0)),
                result=str(data["result"]),
                execution_time=int(execution_time) if execution_time is not None else None,
            )
        except KeyError as e:
            raise DecodeError(f"Submission record is missing {e}") from e
        except (TypeError, ValueError) as e:
            raise DecodeError(f"Submission record has a malformed field: {e}") from e

    @property
    def is_accepted(self) -> bool:
        return self.result == ACCEPTED

    @property
    def url(self) -> str:
        """Public page of this submission."""
        return SUBMISSION_URL.format(contest_id=self.contest_id, id=self.id)
