import datetime
import logging
import time


class DeltaTimeFormatter(logging.Formatter):
    """Adds an attribute `delta` to each :class:`.logging.LogRecord`, which
    holds the time elapsed since a reference time. The reference time is the
    creation of the formatter until :meth:`set_reference_time` is called.

    >>> import logging, sys
    >>> logger = logging.getLogger('cpc.demo')
    >>> logger.propagate = False
    >>> stream_handler = logging.StreamHandler(stream=sys.stdout)
    >>> formatter = DeltaTimeFormatter('%(delta)s: %(message)s')
    >>> stream_handler.setFormatter(formatter)
    >>> logger.addHandler(stream_handler)
    >>> formatter.set_reference_time(time.time())
    >>> logger.warning('parsed P ∧ Q')  # doctest: +SKIP
    0:00:00.001: parsed P ∧ Q
    >>> logger.removeHandler(stream_handler)
    """

    def __init__(self, *args, **kwargs) -> None:
        super().__init__(*args, **kwargs)
        self._reference_time = time.time()

    def format(self, record: logging.LogRecord) -> str:
        delta = datetime.timedelta(seconds=max(0.0, record.created - self._reference_time))
        record.delta = str(delta)[:-3] if delta.microseconds else f'{delta}.000'
        return super().format(record)

    def get_reference_time(self) -> float:
        """Get the reference time in seconds since the :ref:`epoch <epoch>`.
        This is compatible with the output of :func:`.time.time`.
        """
        return self._reference_time

    def set_reference_time(self, reference_time: float) -> None:
        """Set the reference time to `reference_time` seconds since the
        :ref:`epoch <epoch>`.
        """
        self._reference_time = reference_time


class Timer:
    """Wall time in seconds since the last :meth:`reset`. A new timer is
    reset on creation.

    >>> timer = Timer()
    >>> timer.get() >= 0.0
    True
    """

    def __init__(self) -> None:
        self.reset()

    def get(self) -> float:
        return time.time() - self._reference_time

    def reset(self) -> None:
        self._reference_time = time.time()
