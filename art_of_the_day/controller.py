"""Retry controller: resolves one displayable artwork per cycle."""

from __future__ import annotations

import random
from typing import Callable

from .adapters.base import ArtworkSource
from .candidates import DEFAULT_N_MAX, select_candidate
from .errors import ArtFetchError, ValidationError
from .models import ArtworkRecord, CycleState, ImageRecord, ResolutionResult

DEFAULT_MAX_ATTEMPTS = 10


class RetryController:
    """
    Runs resolution cycles against an artwork source.

    A cycle draws a fresh candidate, fetches its artwork, and fetches the
    image only once the artwork is accepted. Any failure moves on to a new
    candidate straight away, up to max_attempts. The cycle ends by calling
    exactly one of on_resolved / on_giving_up, and the trigger is disabled
    from the start of the cycle until its very last call.

    One controller belongs to one page session; its attempt counter is not
    shared with any other controller.
    """

    short_name = "CYCLE"

    _log_callback: Callable[[str, str], None] | None = None

    def __init__(
        self,
        source: ArtworkSource,
        on_resolved: Callable[[ArtworkRecord, ImageRecord], None],
        on_giving_up: Callable[[ArtFetchError], None],
        set_trigger_enabled: Callable[[bool], None],
        max_attempts: int = DEFAULT_MAX_ATTEMPTS,
        n_max: int = DEFAULT_N_MAX,
        rng: random.Random | None = None,
    ) -> None:
        if max_attempts < 1:
            raise ValueError(f"max_attempts must be at least 1, got {max_attempts}")
        if n_max < 1:
            raise ValueError(f"n_max must be at least 1, got {n_max}")
        self.source = source
        self.max_attempts = max_attempts
        self.n_max = n_max
        self._rng = rng or random.Random()
        self._on_resolved = on_resolved
        self._on_giving_up = on_giving_up
        self._set_trigger_enabled = set_trigger_enabled

        self._state = CycleState.IDLE
        self._attempt_count = 0

    @property
    def state(self) -> CycleState:
        return self._state

    @property
    def attempt_count(self) -> int:
        return self._attempt_count

    def set_logger(self, callback: Callable[[str, str], None]) -> None:
        """Set logging callback. Signature: callback(level, message)."""
        self._log_callback = callback

    def _log(self, level: str, message: str) -> None:
        if self._log_callback:
            self._log_callback(level, f"[{self.short_name}] {message}")

    def _log_info(self, message: str) -> None:
        self._log("INFO", message)

    def _log_warning(self, message: str) -> None:
        self._log("WARN", message)

    def _log_error(self, message: str) -> None:
        self._log("ERROR", message)

    def resolve(self) -> ResolutionResult:
        """
        Run one resolution cycle to completion.

        Returns:
            ResolutionResult in state SUCCESS or GIVING_UP

        Raises:
            RuntimeError: if a cycle is already in flight
        """
        if self._state is not CycleState.IDLE:
            raise RuntimeError(f"Resolution cycle already in progress ({self._state.value})")

        self._state = CycleState.FETCHING
        self._attempt_count = 0

        try:
            self._set_trigger_enabled(False)
            return self._run_cycle()
        finally:
            # Every path re-enables the trigger, and it is always the last call
            self._state = CycleState.IDLE
            self._set_trigger_enabled(True)

    def _run_cycle(self) -> ResolutionResult:
        result = ResolutionResult(state=CycleState.FETCHING)
        self._log_info(f"Cycle started via {self.source.short_name} (max_attempts={self.max_attempts})")

        seen: set[int] = set()

        while True:
            self._state = CycleState.FETCHING
            candidate = self._next_candidate(seen)
            result.attempts += 1

            try:
                artwork = self.source.fetch_artwork(candidate)
                image = self.source.fetch_image(artwork)

            except ArtFetchError as e:
                self._attempt_count += 1
                result.error = e
                result.failures.append(f"{candidate}: {e}")

                kind = f"rejected ({e.reason.value})" if isinstance(e, ValidationError) else type(e).__name__
                self._log_warning(
                    f"Attempt {self._attempt_count}/{self.max_attempts} failed for "
                    f"candidate {candidate}: {kind}: {e}"
                )

                if self._attempt_count >= self.max_attempts:
                    return self._give_up(result, e)

                # No backoff between attempts
                self._state = CycleState.RETRYING
                continue

            return self._succeed(result, artwork, image)

    def _next_candidate(self, seen: set[int]) -> int:
        """Draw a candidate not yet tried in this cycle, while any remain."""
        candidate = select_candidate(self.n_max, self._rng)
        while candidate in seen and len(seen) < self.n_max:
            candidate = select_candidate(self.n_max, self._rng)
        seen.add(candidate)
        return candidate

    def _succeed(self, result: ResolutionResult, artwork: ArtworkRecord,
                 image: ImageRecord) -> ResolutionResult:
        self._state = CycleState.SUCCESS
        self._attempt_count = 0
        result.state = CycleState.SUCCESS
        result.artwork = artwork
        result.image = image
        result.error = None

        self._log_info(f"Resolved artwork {artwork.id} after {result.attempts} attempt(s)")
        self._on_resolved(artwork, image)
        return result

    def _give_up(self, result: ResolutionResult, error: ArtFetchError) -> ResolutionResult:
        self._state = CycleState.GIVING_UP
        self._attempt_count = 0
        result.state = CycleState.GIVING_UP

        self._log_error(f"Giving up after {result.attempts} attempts: {error}")
        self._on_giving_up(error)
        return result
