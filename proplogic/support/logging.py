"""Logging helpers of :class:`.qm.QuineMcCluskey`. The log messages of a call
show the time elapsed since the call started, and the timing statistics of
the call are measured with :class:`Timer`.
"""
import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Formatter of the :mod:`proplogic.qm` logger. It provides the format
    field `delta`, the time elapsed since the current call of the minimizer
    started, e.g. ``0:00:00.012``.
    """

    _time_since_start_time = time.time() - logging._startTime  # type: ignore

    def format(self, record: logging.LogRecord) -> str:
        timestamp = record.relativeCreated / 1000 - self._time_since_start_time
        record.delta = str(datetime.timedelta(seconds=timestamp))[:-3]
        return super().format(record)

    def set_reference_time(self, reference_time: float) -> None:
        """Measure `delta` from `reference_time`, given as by
        :func:`.time.time`.
        """
        self._time_since_start_time = reference_time - logging._startTime  # type: ignore


class Timer:
    """Stopwatch for the `time_*` statistics of the minimizer.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Seconds since creation or the last :meth:`.reset`.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        self._reference_time = time.time()
