"""Session controller: IDLE -> ANALYZING -> DONE, then a delayed consensus reveal."""

import asyncio
import contextlib
import logging
from collections.abc import Callable
from datetime import datetime
from pathlib import Path

from config.config_loader import AppConfig
from consilium.consensus import evaluate_consensus
from consilium.credentials import has_api_key
from consilium.fallbacks import CONNECTION_FAILED_RESPONSES
from consilium.fetcher import ProviderFactory, fetch_responses
from consilium.models import (
    EMPTY_RESPONSES,
    ConsensusState,
    FetchOutcome,
    FetchResult,
    PersonaResponseSet,
    SessionState,
)
from consilium.prompts import EmptyQueryError, build_director_prompt
from consilium.providers.gemini import GeminiProvider
from consilium.report import save_report

logger = logging.getLogger(__name__)

Listener = Callable[["SessionController"], None]


class SessionController:
    """Owns one session's query, state, responses and consensus.

    Construct one per active session. State can be polled through the
    read-only properties or observed with subscribe(). At most one fetch
    is in flight; submissions while ANALYZING are dropped.
    """

    def __init__(
        self,
        config: AppConfig,
        api_key: str | None,
        *,
        provider_factory: ProviderFactory = GeminiProvider,
    ) -> None:
        self._config = config
        self._api_key = api_key
        self._provider_factory = provider_factory

        self._state = SessionState.IDLE
        self._query = ""
        self._responses: PersonaResponseSet = EMPTY_RESPONSES
        self._consensus: ConsensusState | None = None
        self._last_fetch: FetchResult | None = None

        self._reveal_task: asyncio.Task | None = None
        self._listeners: list[Listener] = []
        self._closed = False

    @property
    def state(self) -> SessionState:
        return self._state

    @property
    def query(self) -> str:
        return self._query

    @property
    def responses(self) -> PersonaResponseSet:
        return self._responses

    @property
    def consensus(self) -> ConsensusState | None:
        return self._consensus

    @property
    def last_fetch(self) -> FetchResult | None:
        return self._last_fetch

    @property
    def is_online(self) -> bool:
        return has_api_key(self._api_key)

    @property
    def is_processing(self) -> bool:
        return self._state is SessionState.ANALYZING

    @property
    def closed(self) -> bool:
        return self._closed

    def subscribe(self, listener: Listener) -> Callable[[], None]:
        """Register a change listener. Returns a callable that unsubscribes it."""
        self._listeners.append(listener)

        def unsubscribe() -> None:
            if listener in self._listeners:
                self._listeners.remove(listener)

        return unsubscribe

    def _notify(self) -> None:
        for listener in list(self._listeners):
            try:
                listener(self)
            except Exception:
                logger.exception("Session listener failed")

    def _set_state(self, state: SessionState) -> None:
        logger.debug("Session state %s -> %s", self._state.value, state.value)
        self._state = state
        self._notify()

    def _cancel_reveal(self) -> None:
        if self._reveal_task is not None and not self._reveal_task.done():
            self._reveal_task.cancel()
        self._reveal_task = None

    async def submit(self, query: str) -> bool:
        """Run one fetch cycle. Returns False if the submission was dropped.

        Dropped when the query is empty/whitespace, a cycle is already
        ANALYZING, or the session is closed.
        """
        if self._closed:
            logger.debug("Submit ignored: session closed")
            return False
        if self.is_processing:
            logger.debug("Submit ignored: already analyzing")
            return False
        try:
            prompt = build_director_prompt(query, self._config.prompts.director)
        except EmptyQueryError:
            logger.debug("Submit ignored: empty query")
            return False

        self._cancel_reveal()
        self._query = query.strip()
        self._responses = EMPTY_RESPONSES
        self._consensus = None
        self._last_fetch = None
        self._set_state(SessionState.ANALYZING)

        try:
            result = await fetch_responses(
                prompt,
                self._api_key,
                self._config.model,
                locked_delay_sec=self._config.session.locked_delay_sec,
                provider_factory=self._provider_factory,
            )
        except asyncio.CancelledError:
            self._finish(FetchResult(FetchOutcome.FAILED, CONNECTION_FAILED_RESPONSES), reveal=False)
            raise
        except Exception:
            logger.exception("Fetch cycle failed")
            result = FetchResult(FetchOutcome.FAILED, CONNECTION_FAILED_RESPONSES)

        self._finish(result)
        return True

    def _finish(self, result: FetchResult, reveal: bool = True) -> None:
        self._last_fetch = result
        self._responses = result.responses
        self._set_state(SessionState.DONE)
        if reveal:
            self._reveal_task = asyncio.create_task(self._reveal_consensus(result.responses))

    async def _reveal_consensus(self, responses: PersonaResponseSet) -> None:
        await asyncio.sleep(self._config.session.consensus_delay_sec)
        self._consensus = evaluate_consensus(responses)
        logger.info("Consensus: %s", self._consensus.value)
        self._notify()

    async def wait_for_consensus(self) -> ConsensusState | None:
        """Wait for the pending consensus reveal, if any, and return the result."""
        task = self._reveal_task
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task
        return self._consensus

    def close(self) -> None:
        """Cancel any pending reveal and reject further submissions."""
        self._closed = True
        self._cancel_reveal()

    async def __aenter__(self) -> "SessionController":
        return self

    async def __aexit__(self, *exc_info) -> None:
        task = self._reveal_task
        self.close()
        if task is not None:
            with contextlib.suppress(asyncio.CancelledError):
                await task

    def export_report(self, output_dir: Path | None = None, now: datetime | None = None) -> Path:
        """Write the plain-text report for the completed cycle.

        Raises:
            RuntimeError: If no cycle has completed with a consensus attached.
        """
        if self._state is not SessionState.DONE or self._consensus is None:
            raise RuntimeError("No completed analysis to export")
        return save_report(
            query=self._query,
            responses=self._responses,
            consensus=self._consensus,
            output_dir=output_dir or self._config.session.output_dir,
            now=now,
        )
