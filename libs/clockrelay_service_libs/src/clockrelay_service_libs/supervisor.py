"""
Supervised execution of one or more Hypercorn servers in one event loop.

Each server runs in its own asyncio task. A crash in one server is logged and
recorded in its ServerOutcome; the remaining servers keep serving until the
shared shutdown event is set or they stop on their own.
"""

from __future__ import annotations

import asyncio
from collections.abc import Awaitable, Callable, Sequence
from dataclasses import dataclass
from typing import Any

from hypercorn.asyncio import serve as hypercorn_serve
from hypercorn.config import Config

from clockrelay_service_libs.config import ServiceSettings
from clockrelay_service_libs.logging_utils import create_service_logger

ServeCallable = Callable[..., Awaitable[Any]]


@dataclass(frozen=True)
class ServerSpec:
    """One ASGI application and the Hypercorn config it is served with."""

    name: str
    app: Any
    config: Config

    @classmethod
    def from_settings(cls, name: str, app: Any, settings: ServiceSettings) -> ServerSpec:
        config = Config()
        config.bind = [settings.bind_address]
        config.worker_class = "asyncio"
        config.loglevel = settings.LOG_LEVEL.lower()
        config.graceful_timeout = settings.GRACEFUL_TIMEOUT
        config.keep_alive_timeout = settings.KEEP_ALIVE_TIMEOUT
        config.accesslog = "-"
        config.errorlog = "-"
        return cls(name=name, app=app, config=config)


@dataclass
class ServerOutcome:
    """Final state of a supervised server."""

    name: str
    error: BaseException | None = None
    restarts: int = 0

    @property
    def failed(self) -> bool:
        return self.error is not None


class ServerSupervisor:
    """Run servers concurrently, isolating failures between them.

    Args:
        specs: Servers to run; names must be unique
        serve: Coroutine function with Hypercorn's ``serve(app, config, *,
            shutdown_trigger)`` signature
        max_restarts: Restarts allowed per server after a crash (0 = never)
        restart_delay: Seconds to wait before restarting a crashed server
        logger: Logger to report lifecycle events on
    """

    def __init__(
        self,
        specs: Sequence[ServerSpec],
        *,
        serve: ServeCallable = hypercorn_serve,
        max_restarts: int = 0,
        restart_delay: float = 1.0,
        logger: Any | None = None,
    ) -> None:
        if not specs:
            raise ValueError("At least one server spec is required")
        names = [spec.name for spec in specs]
        if len(set(names)) != len(names):
            raise ValueError(f"Server names must be unique, got {names}")
        if max_restarts < 0:
            raise ValueError("max_restarts must be >= 0")

        self._specs = list(specs)
        self._serve = serve
        self._max_restarts = max_restarts
        self._restart_delay = restart_delay
        self._logger = logger or create_service_logger("clockrelay.supervisor")

    async def run(self, shutdown_event: asyncio.Event | None = None) -> list[ServerOutcome]:
        """Serve until every server has stopped; return one outcome per spec, in order."""
        event = shutdown_event or asyncio.Event()
        tasks = [
            asyncio.create_task(self._supervise(spec, event), name=f"server:{spec.name}")
            for spec in self._specs
        ]
        outcomes = await asyncio.gather(*tasks)

        failed = [outcome.name for outcome in outcomes if outcome.failed]
        if failed:
            self._logger.error("Supervised servers exited with failures", failed_servers=failed)
        else:
            self._logger.info("All supervised servers stopped cleanly")
        return list(outcomes)

    async def _supervise(self, spec: ServerSpec, shutdown_event: asyncio.Event) -> ServerOutcome:
        outcome = ServerOutcome(name=spec.name)

        while True:
            self._logger.info("Starting server", server=spec.name, bind=spec.config.bind)
            try:
                await self._serve(spec.app, spec.config, shutdown_trigger=shutdown_event.wait)
            except asyncio.CancelledError:
                raise
            except Exception as e:
                outcome.error = e
                self._logger.error(
                    "Server task failed",
                    server=spec.name,
                    error=str(e),
                    error_type=type(e).__name__,
                    exc_info=True,
                )
            else:
                outcome.error = None
                self._logger.info("Server stopped", server=spec.name)
                return outcome

            if shutdown_event.is_set() or outcome.restarts >= self._max_restarts:
                self._logger.critical(
                    "Server will not be restarted",
                    server=spec.name,
                    restarts=outcome.restarts,
                )
                return outcome

            outcome.restarts += 1
            self._logger.warning(
                "Restarting server",
                server=spec.name,
                attempt=outcome.restarts,
                delay_seconds=self._restart_delay,
            )
            try:
                await asyncio.wait_for(shutdown_event.wait(), timeout=self._restart_delay)
            except TimeoutError:
                continue
            # Shutdown requested while waiting to restart
            return outcome
