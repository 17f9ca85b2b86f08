"""ClockRelay operations CLI.

Runs the Provider and Gateway services under the server supervisor and
checks running deployments.

Usage:
    clockrelay serve-stack
    clockrelay serve-gateway --max-restarts 3
    clockrelay health-check
    clockrelay smoke --gateway-url http://localhost:3000
"""

from __future__ import annotations

import asyncio
import json
import signal
from collections.abc import Sequence

import httpx
import typer
from hypercorn.asyncio import serve

from clockrelay_service_libs.config import ServiceSettings
from clockrelay_service_libs.logging_utils import configure_service_logging
from clockrelay_service_libs.supervisor import ServerOutcome, ServerSpec, ServerSupervisor
from services.cli.smoke import SmokeSuite, measure_latency, wait_until_ready
from services.gateway_service import config as gateway_config
from services.gateway_service.app.main import create_app as create_gateway_app
from services.provider_service import config as provider_config
from services.provider_service.app import create_app as create_provider_app

app = typer.Typer(help="ClockRelay service runner and deployment checks")

DEFAULT_GATEWAY_URL = "http://localhost:3000"
DEFAULT_PROVIDER_URL = "http://localhost:4000"


def _provider_spec(settings: provider_config.Settings) -> ServerSpec:
    return ServerSpec.from_settings(
        settings.SERVICE_NAME, create_provider_app(settings=settings), settings
    )


def _gateway_spec(settings: gateway_config.Settings) -> ServerSpec:
    return ServerSpec.from_settings(
        settings.SERVICE_NAME, create_gateway_app(settings=settings), settings
    )


async def _run_until_signalled(supervisor: ServerSupervisor) -> list[ServerOutcome]:
    shutdown_event = asyncio.Event()
    loop = asyncio.get_running_loop()
    for sig in (signal.SIGINT, signal.SIGTERM):
        try:
            loop.add_signal_handler(sig, shutdown_event.set)
        except NotImplementedError:
            # Signal handlers are unavailable on Windows event loops
            break
    return await supervisor.run(shutdown_event)


def _configure_logging(log_name: str, settings: ServiceSettings) -> None:
    # Runs before any app is built so startup lines use the final renderer
    configure_service_logging(
        log_name, environment=settings.ENVIRONMENT.value, log_level=settings.LOG_LEVEL
    )


def _serve(specs: Sequence[ServerSpec], max_restarts: int, restart_delay: float) -> None:
    supervisor = ServerSupervisor(
        specs, serve=serve, max_restarts=max_restarts, restart_delay=restart_delay
    )
    outcomes = asyncio.run(_run_until_signalled(supervisor))

    failed = [outcome for outcome in outcomes if outcome.failed]
    for outcome in failed:
        typer.secho(
            f"{outcome.name} crashed after {outcome.restarts} restart(s): {outcome.error}",
            fg=typer.colors.RED,
            err=True,
        )
    if failed:
        raise typer.Exit(code=1)


MAX_RESTARTS_OPTION = typer.Option(0, min=0, help="Restarts allowed per server after a crash")
RESTART_DELAY_OPTION = typer.Option(1.0, min=0.0, help="Seconds to wait before a restart")


@app.command("serve-provider")
def serve_provider(
    max_restarts: int = MAX_RESTARTS_OPTION,
    restart_delay: float = RESTART_DELAY_OPTION,
) -> None:
    """Run the Provider Service (api2)."""
    settings = provider_config.get_settings()
    _configure_logging("api2", settings)
    _serve([_provider_spec(settings)], max_restarts, restart_delay)


@app.command("serve-gateway")
def serve_gateway(
    max_restarts: int = MAX_RESTARTS_OPTION,
    restart_delay: float = RESTART_DELAY_OPTION,
) -> None:
    """Run the Gateway Service (api1)."""
    settings = gateway_config.get_settings()
    _configure_logging("api1", settings)
    _serve([_gateway_spec(settings)], max_restarts, restart_delay)


@app.command("serve-stack")
def serve_stack(
    max_restarts: int = MAX_RESTARTS_OPTION,
    restart_delay: float = RESTART_DELAY_OPTION,
) -> None:
    """Run the Provider and Gateway services in one process.

    A crash in one server does not stop the other; the exit code is 1 if any
    server crashed.
    """
    gateway_settings = gateway_config.get_settings()
    _configure_logging("clockrelay", gateway_settings)
    specs = [_provider_spec(provider_config.get_settings()), _gateway_spec(gateway_settings)]
    _serve(specs, max_restarts, restart_delay)


@app.command("health-check")
def health_check(
    gateway_url: str = typer.Option(DEFAULT_GATEWAY_URL, help="Gateway base URL"),
    provider_url: str = typer.Option(DEFAULT_PROVIDER_URL, help="Provider base URL"),
) -> None:
    """Print the /health payload of both services."""
    healthy = True
    with httpx.Client(timeout=10.0) as client:
        for label, base_url in (("API1", gateway_url), ("API2", provider_url)):
            typer.echo(f"Checking {label} health...")
            try:
                response = client.get(f"{base_url.rstrip('/')}/health")
                response.raise_for_status()
                payload = response.json()
            except (httpx.HTTPError, ValueError) as e:
                typer.secho(f"{label} unhealthy: {e}", fg=typer.colors.RED, err=True)
                healthy = False
                continue
            typer.echo(json.dumps(payload, indent=2))

    if not healthy:
        raise typer.Exit(code=1)


@app.command()
def smoke(
    gateway_url: str = typer.Option(DEFAULT_GATEWAY_URL, help="Gateway base URL"),
    provider_url: str = typer.Option(DEFAULT_PROVIDER_URL, help="Provider base URL"),
    wait_seconds: float = typer.Option(30.0, min=0.0, help="How long to wait for readiness"),
    latency_requests: int = typer.Option(
        100, min=0, help="Sequential Gateway /time requests for the latency report (0 = skip)"
    ),
) -> None:
    """Run end-to-end checks against running services."""
    gateway_url = gateway_url.rstrip("/")
    provider_url = provider_url.rstrip("/")

    with httpx.Client(timeout=10.0) as client:
        typer.echo("Waiting for services to be ready...")
        if not wait_until_ready(
            client, [f"{gateway_url}/health", f"{provider_url}/health"], wait_seconds
        ):
            typer.secho("Services did not become ready", fg=typer.colors.YELLOW, err=True)

        results = SmokeSuite(client, gateway_url, provider_url).run()
        for result in results:
            if result.passed:
                typer.echo(f"{result.name}: " + typer.style("PASS", fg=typer.colors.GREEN))
            else:
                typer.echo(
                    f"{result.name}: "
                    + typer.style("FAIL", fg=typer.colors.RED)
                    + f" ({result.detail})"
                )

        if latency_requests:
            try:
                total_ms, avg_ms = measure_latency(
                    client, f"{gateway_url}/time", latency_requests
                )
            except httpx.HTTPError as e:
                typer.secho(f"Performance: unavailable ({e})", fg=typer.colors.YELLOW)
            else:
                typer.echo(
                    f"Performance: {latency_requests} requests completed in {total_ms:.0f}ms "
                    f"(avg: {avg_ms:.1f}ms per request)"
                )

    passed = sum(1 for result in results if result.passed)
    failed = len(results) - passed
    typer.echo("Test Summary:")
    typer.echo(f"Tests Passed: {passed}")
    typer.echo(f"Tests Failed: {failed}")
    typer.echo(f"Total Tests: {len(results)}")

    if failed:
        typer.secho("Some tests failed!", fg=typer.colors.RED)
        raise typer.Exit(code=1)
    typer.secho("All tests passed!", fg=typer.colors.GREEN)
