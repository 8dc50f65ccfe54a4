"""Client module for AtCoder interaction."""

from .client import AtCoderClient
from .models import ACCEPTED, Submission

__all__ = ["AtCoderClient", "Submission", "ACCEPTED"]
