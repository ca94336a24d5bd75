"""
Activity service.

Owns the summary currently shown for each identity and runs refresh cycles:
fetch all three sources, aggregate, publish. A failed cycle keeps the
previous summary and flags the state as an error; a summary is never built
from incomplete inputs.

Every refresh takes a generation number from one service-wide counter and
records it as the latest for its identity. When a cycle finishes after a
newer one has started, its result is discarded, so the displayed summary is
always from the most recently started cycle that completed.
"""

import itertools
import logging
from dataclasses import replace
from datetime import UTC, datetime

from cachetools import LRUCache  # type: ignore[import-untyped]

from app.config import Settings
from app.config import settings as default_settings
from app.services.activity.aggregator import aggregate_activity
from app.services.activity.types import ActivityState, ActivityStatus
from app.services.github.exceptions import ActivityFetchError
from app.services.github.read_operations import GitHubActivityReader

logger = logging.getLogger(__name__)

STATS_UNAVAILABLE_MESSAGE = "Unable to load GitHub stats right now."


class ActivityService:
    """In-memory activity state with last-writer-wins refreshes."""

    def __init__(
        self,
        reader: GitHubActivityReader | None = None,
        config: Settings | None = None,
    ):
        self.config = config or default_settings
        self.reader = reader or GitHubActivityReader(self.config)
        self._states: LRUCache[str, ActivityState] = LRUCache(
            maxsize=self.config.activity_cache_size
        )
        # Never restarts, so a number is never issued twice
        self._generation_counter = itertools.count(1)
        # identity -> generation of its most recently started cycle
        self._latest: dict[str, int] = {}
        # generations of cycles still awaiting their fetch
        self._in_flight: set[int] = set()

    @property
    def default_identity(self) -> str:
        return self.config.github_username

    def get_state(self, identity: str) -> ActivityState:
        """Return the current state, or a loading state if never refreshed."""
        state = self._states.get(identity)
        if state is None:
            return ActivityState(identity=identity)
        return state

    def _is_current(self, identity: str, generation: int) -> bool:
        return self._latest.get(identity) == generation

    def _prune_latest(self) -> None:
        """Forget identities that fell out of the LRU cache and have nothing in flight."""
        if len(self._latest) <= self.config.activity_cache_size * 2:
            return
        self._latest = {
            key: generation
            for key, generation in self._latest.items()
            if key in self._states or generation in self._in_flight
        }

    def _publish(self, identity: str, generation: int, state: ActivityState) -> ActivityState:
        if not self._is_current(identity, generation):
            logger.info(
                f"Discarding stale activity result for {identity} "
                f"(generation {generation}, latest {self._latest.get(identity)})"
            )
            return self.get_state(identity)
        self._states[identity] = state
        self._prune_latest()
        return state

    async def refresh(self, identity: str | None = None) -> ActivityState:
        """
        Run one refresh cycle for an identity.

        Args:
            identity: GitHub login, defaults to the configured username

        Returns:
            The state after this cycle. If a newer cycle started while this
            one was in flight, the newer cycle's state is returned instead.
        """
        identity = identity or self.default_identity
        generation = next(self._generation_counter)
        self._latest[identity] = generation
        self._in_flight.add(generation)

        previous = self.get_state(identity)
        self._states[identity] = replace(previous, status=ActivityStatus.LOADING, error=None)

        try:
            raw = await self.reader.fetch(identity)
        except ActivityFetchError as e:
            logger.warning(f"Activity refresh failed for {identity}: {e}")
            return self._publish(
                identity,
                generation,
                replace(
                    previous,
                    status=ActivityStatus.ERROR,
                    error=STATS_UNAVAILABLE_MESSAGE,
                ),
            )
        finally:
            self._in_flight.discard(generation)

        summary = aggregate_activity(raw)
        logger.info(
            f"Activity refreshed for {identity}: "
            f"{summary.counters.repositories} repos, "
            f"{len(summary.monthly_series)} active months, "
            f"{len(summary.language_distribution)} languages"
        )
        return self._publish(
            identity,
            generation,
            ActivityState(
                identity=identity,
                status=ActivityStatus.READY,
                summary=summary,
                error=None,
                updated_at=datetime.now(UTC),
            ),
        )


activity_service = ActivityService()
