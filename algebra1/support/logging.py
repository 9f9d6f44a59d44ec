import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Log the time relative to a reference time by adding an attribute
    `delta` to the :class:`.logging.LogRecord`. The reference time is
    typically the start of a computation, e.g., of a call to
    :func:`algebra1.sqf.sqf`.

    >>> import logging, sys, time
    >>> logger = logging.getLogger('demo')
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> delta_time_formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(delta_time_formatter)
    >>> logger.addHandler(stream_handler)
    >>> delta_time_formatter.set_reference_time(time.time())
    >>> time.sleep(0.01)
    >>> logger.warning('degree 12')  # doctest: +SKIP
    0:00:00.012: degree 12
    """

    _time_since_start_time = time.time() - logging._startTime  # type: ignore

    def format(self, record: logging.LogRecord) -> str:
        timestamp = record.relativeCreated / 1000 - self._time_since_start_time
        delta = datetime.timedelta(seconds=timestamp)
        record.delta = str(delta)[:-3]
        return super().format(record)

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`, as returned by :func:`.time.time`.
        """
        self._time_since_start_time = reference_time - logging._startTime  # type: ignore


class Timer:
    """Wall time in seconds since the last :meth:`.reset`. Instances are
    implicitly reset when they are created.

    >>> import time
    >>> timer = Timer()
    >>> time.sleep(0.01)
    >>> timer.get() >= 0.01
    True
    >>> timer.reset()
    >>> timer.get() < 0.01
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        """Get the wall time since last :meth:`.reset` in seconds.
        """
        return time.time() - self._reference_time

    def reset(self) -> None:
        """Reset the timer to 0.0 seconds.
        """
        self._reference_time = time.time()
