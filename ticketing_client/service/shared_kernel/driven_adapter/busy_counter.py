from collections.abc import Iterator
from contextlib import contextmanager


class BusyCounter:
    """Counts in-flight remote calls; busy while at least one is running"""

    def __init__(self) -> None:
        self._in_flight = 0

    @property
    def is_busy(self) -> bool:
        return self._in_flight > 0

    @contextmanager
    def track(self) -> Iterator[None]:
        self._in_flight += 1
        try:
            yield
        finally:
            self._in_flight -= 1
