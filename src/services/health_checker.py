# src/services/health_checker.py

"""Catalog API connectivity health checker."""

import asyncio
import logging
import time
from dataclasses import dataclass

from src.config.settings import Settings
from src.services.api_client import ApiClient

logger = logging.getLogger("catalog_admin.health")

_HEALTH_TIMEOUT = 10  # seconds per endpoint


@dataclass
class HealthResult:
    """Result of a single endpoint health check."""

    endpoint_id: str
    status: str  # "ok", "slow", "down"
    latency_ms: float
    message: str


def probe_endpoint(
    endpoint: dict[str, str],
    client: ApiClient | None = None,
) -> HealthResult:
    """Probe a single read-only endpoint for connectivity."""
    endpoint_id = endpoint["id"]
    owned = client is None
    if client is None:
        client = ApiClient("health")

    start = time.monotonic()
    try:
        resp = client.session.get(
            client.url(endpoint["path"]),
            headers=client.settings.DEFAULT_HEADERS,
            timeout=_HEALTH_TIMEOUT,
        )
        elapsed_ms = (time.monotonic() - start) * 1000

        if resp.status_code != 200:
            return HealthResult(
                endpoint_id=endpoint_id,
                status="down",
                latency_ms=elapsed_ms,
                message=f"HTTP {resp.status_code}",
            )

        if elapsed_ms > Settings.HEALTH_SLOW_MS:
            return HealthResult(
                endpoint_id=endpoint_id,
                status="slow",
                latency_ms=elapsed_ms,
                message="High latency",
            )

        return HealthResult(
            endpoint_id=endpoint_id,
            status="ok",
            latency_ms=elapsed_ms,
            message="",
        )

    except Exception as exc:
        elapsed_ms = (time.monotonic() - start) * 1000
        return HealthResult(
            endpoint_id=endpoint_id,
            status="down",
            latency_ms=elapsed_ms,
            message=str(exc)[:80],
        )
    finally:
        if owned:
            client.close()


class HealthChecker:
    """Runs concurrent health probes against the catalog endpoints."""

    def __init__(self) -> None:
        self.endpoints = Settings.HEALTH_ENDPOINTS

    async def check_all(self) -> list[HealthResult]:
        """Probe every registered endpoint concurrently."""
        tasks = [
            asyncio.to_thread(probe_endpoint, endpoint)
            for endpoint in self.endpoints
        ]
        results: list[HealthResult] = list(
            await asyncio.gather(*tasks)
        )
        for r in results:
            logger.info(
                "Health check %s: %s (%.0fms) %s",
                r.endpoint_id,
                r.status,
                r.latency_ms,
                r.message,
            )
        return results
