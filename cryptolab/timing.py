"""Wall-clock timing of long-running operations."""

from __future__ import annotations

import sys
import time
from typing import Callable, Optional, TextIO


class Stopwatch:
    """Context manager that measures a block and reports how long it took.

    On leaving the block a line of the form
    ``Operation Finished. It took: <seconds> seconds !!!`` is written to
    the given stream (standard output by default) unless ``report`` is false.
    """

    def __init__(
        self,
        stream: Optional[TextIO] = None,
        *,
        clock: Callable[[], float] = time.monotonic,
        report: bool = True,
    ) -> None:
        self._stream = stream
        self._clock = clock
        self._report = report
        self._start: Optional[float] = None
        self._end: Optional[float] = None

    def __enter__(self) -> "Stopwatch":
        self._start = self._clock()
        self._end = None
        return self

    def __exit__(self, *args: object) -> None:
        self._end = self._clock()
        if self._report:
            stream = self._stream if self._stream is not None else sys.stdout
            print(
                f"Operation Finished. It took: {self.elapsed():g} seconds !!!",
                file=stream,
            )

    def elapsed(self) -> float:
        """Seconds since the block was entered, up to its end if it has ended."""
        if self._start is None:
            raise RuntimeError("stopwatch has not been started")
        end = self._end if self._end is not None else self._clock()
        return end - self._start