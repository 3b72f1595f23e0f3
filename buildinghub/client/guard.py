from contextlib import asynccontextmanager
from typing import Set

from buildinghub.client.errors import SubmissionInProgress


class InFlightGuard:
    """
    Refuses a second submission of the same mutation while the first one
    is awaiting its response. Keys are released whatever the outcome.
    """

    def __init__(self):
        self._keys: Set[str] = set()

    def is_in_flight(self, key: str) -> bool:
        return key in self._keys

    @asynccontextmanager
    async def hold(self, key: str):
        if key in self._keys:
            raise SubmissionInProgress(key)
        self._keys.add(key)
        try:
            yield
        finally:
            self._keys.discard(key)
