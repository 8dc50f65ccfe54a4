"""
Fixed-interval request throttle.

Keeps consecutive page requests to the judge at least ``interval`` seconds
apart, measured from the start of the previous request.
"""

import logging
import time
from typing import Callable, Optional


logger = logging.getLogger(__name__)


class Throttle:
    def __init__(
        self,
        interval: float = 1.5,
        clock: Callable[[], float] = time.monotonic,
        sleep: Callable[[float], None] = time.sleep,
    ):
        """
        Args:
            interval: minimum spacing in seconds between request starts
            clock: monotonic time source
            sleep: blocking sleep function
        """
        self.interval = interval
        self.clock = clock
        self.sleep = sleep
        self.last: Optional[float] = None

    def wait(self) -> None:
        """Block until the next request may start, then mark it started."""
        if self.last is not None:
            remaining = self.last + self.interval - self.clock()
            if remaining > 0:
                logger.debug("Throttling for %.2fs", remaining)
                self.sleep(remaining)
        self.last = self.clock()
