import asyncio

import httpx
import pytest

from aleo_stake.adapters.staking import compute_total_stake
from aleo_stake.core.http import ExplorerHTTP
from conftest import API_ROOT, NETWORK


def run(coro):
    return asyncio.run(coro)


def mock_transport(routes):
    def handler(request: httpx.Request) -> httpx.Response:
        path = request.url.path
        if path not in routes:
            return httpx.Response(404, json={"error": "not found"})
        status, body = routes[path]
        if isinstance(body, str):
            return httpx.Response(status, text=body)
        return httpx.Response(status, json=body)

    return httpx.MockTransport(handler)


class TestExplorerHTTP:
    def test_get_decodes_json(self):
        transport = mock_transport({"/v1/mainnet/latest/height": (200, 12345)})

        async def fetch():
            async with ExplorerHTTP(timeout=5, transport=transport) as http:
                return await http.get(f"{API_ROOT}/{NETWORK}/latest/height")

        assert run(fetch()) == 12345

    def test_error_status_raises(self):
        transport = mock_transport({"/v1/mainnet/latest/height": (503, {"error": "down"})})

        async def fetch():
            async with ExplorerHTTP(timeout=5, transport=transport) as http:
                return await http.get(f"{API_ROOT}/{NETWORK}/latest/height")

        with pytest.raises(httpx.HTTPStatusError):
            run(fetch())

    def test_invalid_json_raises_value_error(self):
        transport = mock_transport({"/v1/mainnet/latest/height": (200, "<html>oops</html>")})

        async def fetch():
            async with ExplorerHTTP(timeout=5, transport=transport) as http:
                return await http.get(f"{API_ROOT}/{NETWORK}/latest/height")

        with pytest.raises(ValueError):
            run(fetch())

    def test_requires_context_manager(self):
        with pytest.raises(RuntimeError):
            run(ExplorerHTTP(timeout=5).get(f"{API_ROOT}/{NETWORK}/latest/height"))


class TestEndToEnd:
    def test_fallback_over_http(self):
        transport = mock_transport({
            "/v1/mainnet/latest/committee": (500, {"error": "boom"}),
            "/v1/mainnet/committee": (200, {"committee": ["aleo1a", "aleo1b"]}),
            "/v1/mainnet/latest/height": (200, {"height": 88}),
            "/v1/mainnet/block/88/history/bonded": (200, [
                ["aleo1a", "microcredits: 4000000"],
                ["aleo1b", "6000000u64"],
                ["aleo1z", "microcredits: 1"],
            ]),
        })

        async def compute():
            async with ExplorerHTTP(timeout=5, transport=transport) as http:
                return await compute_total_stake(http.get, api_root=API_ROOT, network=NETWORK)

        result = run(compute())
        assert result.total_micro == 10_000_000
        assert result.source == "bonded"
        assert result.height == 88
