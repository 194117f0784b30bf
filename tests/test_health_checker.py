# tests/test_health_checker.py

"""Tests for the catalog API health checker."""

import asyncio
import unittest
from unittest.mock import MagicMock, patch

from src.services.health_checker import (
    HealthChecker,
    HealthResult,
    probe_endpoint,
)


class TestProbeEndpoint(unittest.TestCase):
    """Tests for the per-endpoint health probe function."""

    def _make_endpoint(self) -> dict[str, str]:
        """Build a minimal endpoint config dict."""
        return {"id": "products", "label": "Products", "path": "/products"}

    def _make_client(self) -> MagicMock:
        client = MagicMock()
        client.url.return_value = "https://api.test/products"
        client.settings.DEFAULT_HEADERS = {}
        return client

    def test_ok_status(self) -> None:
        """A fast 200 response should return 'ok' status."""
        client = self._make_client()
        client.session.get.return_value = MagicMock(status_code=200)

        result = probe_endpoint(self._make_endpoint(), client)

        self.assertEqual(result.status, "ok")
        self.assertEqual(result.endpoint_id, "products")
        self.assertGreaterEqual(result.latency_ms, 0)

    def test_down_on_http_error(self) -> None:
        """A non-200 response should return 'down' status."""
        client = self._make_client()
        client.session.get.return_value = MagicMock(status_code=503)

        result = probe_endpoint(self._make_endpoint(), client)

        self.assertEqual(result.status, "down")
        self.assertIn("503", result.message)

    def test_down_on_exception(self) -> None:
        """A network error should return 'down' status."""
        client = self._make_client()
        client.session.get.side_effect = ConnectionError(
            "Connection refused"
        )

        result = probe_endpoint(self._make_endpoint(), client)

        self.assertEqual(result.status, "down")
        self.assertIn("Connection refused", result.message)

    @patch("src.services.health_checker.Settings")
    def test_slow_status(self, mock_settings: MagicMock) -> None:
        """A 200 over the latency threshold should return 'slow'."""
        mock_settings.HEALTH_SLOW_MS = -1.0
        client = self._make_client()
        client.session.get.return_value = MagicMock(status_code=200)

        result = probe_endpoint(self._make_endpoint(), client)

        self.assertEqual(result.status, "slow")

    @patch("src.services.health_checker.ApiClient")
    def test_built_client_is_closed(self, mock_client_cls: MagicMock) -> None:
        """A client built for the check is closed, even on failure."""
        client = self._make_client()
        client.session.get.side_effect = ConnectionError("reset")
        mock_client_cls.return_value = client

        result = probe_endpoint(self._make_endpoint())

        self.assertEqual(result.status, "down")
        mock_client_cls.assert_called_once_with("health")
        client.close.assert_called_once()
        client.url.assert_called_once_with("/products")

    def test_supplied_client_left_open(self) -> None:
        client = self._make_client()
        client.session.get.return_value = MagicMock(status_code=200)

        probe_endpoint(self._make_endpoint(), client)

        client.close.assert_not_called()


class TestHealthChecker(unittest.TestCase):
    """Tests for the concurrent HealthChecker."""

    @patch("src.services.health_checker.probe_endpoint")
    def test_check_all_probes_every_endpoint(
        self, mock_probe: MagicMock,
    ) -> None:
        mock_probe.side_effect = lambda endpoint: HealthResult(
            endpoint_id=endpoint["id"],
            status="ok",
            latency_ms=12.0,
            message="",
        )
        checker = HealthChecker()

        results = asyncio.run(checker.check_all())

        self.assertEqual(
            [r.endpoint_id for r in results],
            [e["id"] for e in checker.endpoints],
        )
        self.assertTrue(all(r.status == "ok" for r in results))


if __name__ == "__main__":
    unittest.main()
