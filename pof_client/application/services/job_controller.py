"""Job lifecycle controller: one active proof job, polled on a fixed interval.

State machine: IDLE -> SUBMITTING -> POLLING -> IDLE. The poll timer is an
asyncio task; each tick starts at most one status check and skips the tick
while the previous periodic check is still in flight. Every check is
tagged with the session token it was issued for, and results whose token
no longer matches the active session are dropped.
"""

from __future__ import annotations

import asyncio
import itertools
from collections.abc import Callable
from dataclasses import dataclass
from typing import Any

from pof_client.application.interfaces.backend import IProofBackend
from pof_client.core.config import get_settings
from pof_client.domain.enums import ControllerState
from pof_client.domain.exceptions import (
    AlreadyActiveError,
    NoActiveJobError,
    PollingStoppedError,
)
from pof_client.domain.value_objects import JobHandle, JobStatus, ProofRequest
from pof_client.shared.telemetry.logging import get_logger

logger = get_logger(__name__)

StatusListener = Callable[[JobStatus], Any]
ErrorListener = Callable[[Exception], Any]


@dataclass(eq=False)
class _PollSession:
    """Binds one job handle to its timer task and final result."""

    token: int
    handle: JobHandle
    result: asyncio.Future[JobStatus]
    timer: asyncio.Task[None] | None = None
    tick_check: asyncio.Task[None] | None = None


def _cancel(task: asyncio.Task[Any] | None) -> None:
    if task is not None and not task.done() and task is not asyncio.current_task():
        task.cancel()


class ProofJobController:
    """Submits an async proof job and polls it until a terminal status.

    Only one job is tracked at a time. The final status (or the error that
    ended polling) is available from wait_for_result() and is also passed to
    the optional on_complete / on_error listeners; on_status receives each
    non-terminal status.
    """

    def __init__(
        self,
        backend: IProofBackend,
        *,
        poll_interval_seconds: float | None = None,
        on_status: StatusListener | None = None,
        on_complete: StatusListener | None = None,
        on_error: ErrorListener | None = None,
    ) -> None:
        interval = (
            poll_interval_seconds
            if poll_interval_seconds is not None
            else get_settings().poll_interval_seconds
        )
        if interval <= 0:
            raise ValueError("poll_interval_seconds must be greater than 0")
        self._backend = backend
        self._interval = interval
        self._on_status = on_status
        self._on_complete = on_complete
        self._on_error = on_error
        self._tokens = itertools.count(1)
        self._state = ControllerState.IDLE
        self._submit_token: int | None = None
        self._session: _PollSession | None = None
        self._last_result: asyncio.Future[JobStatus] | None = None

    @property
    def state(self) -> ControllerState:
        return self._state

    @property
    def poll_interval_seconds(self) -> float:
        return self._interval

    def get_active_job(self) -> JobHandle | None:
        """Return the handle being polled, or None."""
        return self._session.handle if self._session is not None else None

    async def start_job(self, request: ProofRequest) -> JobHandle:
        """Submit a proof job and start polling it.

        Returns after the submit call completes. Raises AlreadyActiveError
        while another job is being submitted or polled; submit failures
        return the controller to IDLE and propagate.
        """
        if self._state is not ControllerState.IDLE:
            active = self.get_active_job()
            raise AlreadyActiveError(active.job_id if active else None)

        token = next(self._tokens)
        # wait_for_result() waits on this from SUBMITTING onward.
        result: asyncio.Future[JobStatus] = asyncio.get_running_loop().create_future()
        self._state = ControllerState.SUBMITTING
        self._submit_token = token
        self._last_result = result
        try:
            handle = await self._backend.generate_proof_async(request)
        except asyncio.CancelledError:
            self._abort_submit(token, result, PollingStoppedError())
            raise
        except Exception as e:
            self._abort_submit(token, result, e)
            raise

        if self._submit_token != token:
            logger.info(
                "Polling stopped while submitting; proof job %s is not tracked",
                handle.job_id,
            )
            return handle
        self._submit_token = None

        session = _PollSession(token=token, handle=handle, result=result)
        self._session = session
        session.timer = asyncio.create_task(
            self._run_timer(session), name=f"proof-job-poll-{handle.job_id}"
        )
        self._state = ControllerState.POLLING
        logger.info(
            "Proof job %s submitted for deal %s; polling every %ss",
            handle.job_id,
            request.deal_id,
            self._interval,
        )
        return handle

    async def check_now(self) -> JobStatus:
        """Check the active job once, outside the timer.

        A terminal result ends the session like a periodic one. Errors end
        the session and are re-raised. Raises NoActiveJobError when no job
        is being polled.
        """
        session = self._session
        if session is None:
            raise NoActiveJobError()
        try:
            status = await self._backend.check_job_status(session.handle.job_id)
        except Exception as e:
            self._fail(session.token, e)
            raise
        self._apply(session.token, status)
        return status

    def stop_polling(self) -> None:
        """Cancel the timer and clear the active job. Idempotent; safe in any state."""
        if self._submit_token is not None and self._last_result is not None:
            self._resolve(self._last_result, error=PollingStoppedError())
        self._submit_token = None
        self._state = ControllerState.IDLE
        session = self._session
        if session is None:
            return
        self._end_session(session)
        self._resolve(session.result, error=PollingStoppedError(session.handle.job_id))
        logger.info("Stopped polling proof job %s", session.handle.job_id)

    async def wait_for_result(self) -> JobStatus:
        """Wait for the final status of the current (or most recent) job.

        A job still being submitted counts as current. Raises whatever ended
        it: the submit error, TransportError, MalformedResponseError, or
        PollingStoppedError. Cancelling the waiter does not stop polling.
        """
        if self._last_result is None:
            raise NoActiveJobError("No proof job has been started")
        return await asyncio.shield(self._last_result)

    async def aclose(self) -> None:
        self.stop_polling()

    async def __aenter__(self) -> ProofJobController:
        return self

    async def __aexit__(self, *exc_info: object) -> None:
        await self.aclose()

    def _abort_submit(
        self, token: int, result: asyncio.Future[JobStatus], error: Exception
    ) -> None:
        if self._submit_token == token:
            self._submit_token = None
            self._state = ControllerState.IDLE
        self._resolve(result, error=error)

    async def _run_timer(self, session: _PollSession) -> None:
        while self._session is session:
            await asyncio.sleep(self._interval)
            if self._session is not session:
                return
            if session.tick_check is not None and not session.tick_check.done():
                logger.debug(
                    "Skipping poll tick for job %s: previous check still in flight",
                    session.handle.job_id,
                )
                continue
            session.tick_check = asyncio.create_task(self._periodic_check(session))

    async def _periodic_check(self, session: _PollSession) -> None:
        try:
            status = await self._backend.check_job_status(session.handle.job_id)
        except Exception as e:
            self._fail(session.token, e)
            return
        self._apply(session.token, status)

    def _is_current(self, token: int) -> bool:
        return self._session is not None and self._session.token == token

    def _apply(self, token: int, status: JobStatus) -> None:
        if not self._is_current(token):
            logger.debug(
                "Discarding stale status %s for job %s", status.state.value, status.job_id
            )
            return
        session = self._session
        if not status.is_terminal:
            logger.debug("Proof job %s is %s", status.job_id, status.state.value)
            self._notify(self._on_status, status)
            return
        self._end_session(session)
        self._resolve(session.result, result=status)
        logger.info("Proof job %s finished: %s", status.job_id, status.state.value)
        self._notify(self._on_complete, status)

    def _fail(self, token: int, error: Exception) -> None:
        if not self._is_current(token):
            logger.debug("Discarding stale error for session %s: %s", token, error)
            return
        session = self._session
        self._end_session(session)
        self._resolve(session.result, error=error)
        logger.warning(
            "Polling proof job %s failed: %s", session.handle.job_id, error
        )
        self._notify(self._on_error, error)

    def _end_session(self, session: _PollSession) -> None:
        if self._session is session:
            self._session = None
            self._state = ControllerState.IDLE
        _cancel(session.timer)
        _cancel(session.tick_check)

    @staticmethod
    def _resolve(
        future: asyncio.Future[JobStatus],
        *,
        result: JobStatus | None = None,
        error: Exception | None = None,
    ) -> None:
        if future.done():
            return
        if error is not None:
            future.set_exception(error)
            # Mark retrieved: nobody is required to await the result.
            future.exception()
        else:
            future.set_result(result)

    @staticmethod
    def _notify(listener: Callable[[Any], Any] | None, value: Any) -> None:
        if listener is None:
            return
        try:
            listener(value)
        except Exception:
            logger.exception("Proof job listener %r raised", listener)
