"""End-to-end smoke checks against running Gateway and Provider services.

Each check issues one HTTP request and records a CheckResult; a failing check
never stops the suite.
"""

from __future__ import annotations

import time
from collections.abc import Callable, Iterable
from dataclasses import dataclass
from typing import Any

import httpx

TIME_FIELDS = ("timestamp", "timezone", "request_id", "source")
HEALTH_FIELDS = ("status", "service", "timestamp")
ECHO_TIMEZONES = ("UTC", "EST", "PST", "CET")


@dataclass(frozen=True)
class CheckResult:
    name: str
    passed: bool
    detail: str = ""


class SmokeSuite:
    """Checks run against a Gateway and a Provider base URL.

    Args:
        client: Synchronous httpx client used for every request
        gateway_url: Gateway base URL, e.g. http://localhost:3000
        provider_url: Provider base URL, e.g. http://localhost:4000
    """

    def __init__(self, client: httpx.Client, gateway_url: str, provider_url: str) -> None:
        self._client = client
        self._gateway_url = gateway_url.rstrip("/")
        self._provider_url = provider_url.rstrip("/")

    def run(self) -> list[CheckResult]:
        gw, pv = self._gateway_url, self._provider_url
        results = [
            self.check_json("API1 Health Check", f"{gw}/health", HEALTH_FIELDS),
            self.check_json("API2 Health Check", f"{pv}/health", HEALTH_FIELDS),
            self.check_status("API1 Root", f"{gw}/"),
            self.check_status("API2 Root", f"{pv}/"),
            self.check_json("API1 Time (UTC)", f"{gw}/time", TIME_FIELDS),
            self.check_json("API1 Time (EST)", f"{gw}/time?timezone=EST", TIME_FIELDS),
            self.check_json("API1 Time (PST)", f"{gw}/time?timezone=PST", TIME_FIELDS),
            self.check_json("API2 Time Direct", f"{pv}/time", TIME_FIELDS),
            self.check_json("API2 Time (CET)", f"{pv}/time?timezone=CET", TIME_FIELDS),
            self.check_status("API1 Invalid Timezone", f"{gw}/time?timezone=INVALID"),
            self.check_field("API Flow", f"{gw}/time", "source", "api1->api2"),
        ]
        results.extend(
            self.check_field(f"Timezone {tz}", f"{gw}/time?timezone={tz}", "timezone", tz)
            for tz in ECHO_TIMEZONES
        )
        return results

    def check_status(self, name: str, url: str, expected_status: int = 200) -> CheckResult:
        response, error = self._get(url, expected_status)
        if response is None:
            return CheckResult(name, False, error)
        return CheckResult(name, True)

    def check_json(self, name: str, url: str, required_fields: Iterable[str]) -> CheckResult:
        response, error = self._get(url, expected_status=200)
        if response is None:
            return CheckResult(name, False, error)
        body, error = _json_object(response)
        if body is None:
            return CheckResult(name, False, error)
        missing = [field for field in required_fields if field not in body]
        if missing:
            return CheckResult(name, False, f"Missing field: {', '.join(missing)}")
        return CheckResult(name, True)

    def check_field(self, name: str, url: str, field: str, expected: Any) -> CheckResult:
        response, error = self._get(url)
        if response is None:
            return CheckResult(name, False, error)
        body, error = _json_object(response)
        if body is None:
            return CheckResult(name, False, error)
        actual = body.get(field)
        if actual != expected:
            return CheckResult(name, False, f"Expected: {expected}, Got: {actual}")
        return CheckResult(name, True)

    def _get(
        self, url: str, expected_status: int | None = None
    ) -> tuple[httpx.Response | None, str]:
        try:
            response = self._client.get(url)
        except httpx.HTTPError as e:
            return None, f"{type(e).__name__}: {e}"
        if expected_status is not None and response.status_code != expected_status:
            return None, f"Expected: {expected_status}, Got: {response.status_code}"
        return response, ""


def _json_object(response: httpx.Response) -> tuple[dict[str, Any] | None, str]:
    try:
        body = response.json()
    except ValueError:
        return None, "Response is not JSON"
    if not isinstance(body, dict):
        return None, "Response is not a JSON object"
    return body, ""


def wait_until_ready(
    client: httpx.Client,
    health_urls: Iterable[str],
    timeout_seconds: float,
    interval_seconds: float = 1.0,
    sleep: Callable[[float], None] = time.sleep,
) -> bool:
    """Poll every health URL until all answer, or give up after timeout_seconds."""
    urls = list(health_urls)
    deadline = time.monotonic() + timeout_seconds
    while True:
        if all(_is_up(client, url) for url in urls):
            return True
        if time.monotonic() >= deadline:
            return False
        sleep(interval_seconds)


def _is_up(client: httpx.Client, url: str) -> bool:
    try:
        return client.get(url).status_code == 200
    except httpx.HTTPError:
        return False


def measure_latency(client: httpx.Client, url: str, requests: int) -> tuple[float, float]:
    """Issue sequential GETs; return (total_ms, average_ms)."""
    if requests < 1:
        raise ValueError("requests must be >= 1")
    started = time.perf_counter()
    for _ in range(requests):
        client.get(url)
    total_ms = (time.perf_counter() - started) * 1000
    return total_ms, total_ms / requests
