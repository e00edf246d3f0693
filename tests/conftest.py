import pytest
import httpx

API_ROOT = "https://explorer.test/v1"
NETWORK = "mainnet"


class FakeExplorer:
    """
    Async stand-in for the HTTP collaborator.

    routes maps a path suffix ("latest/committee", "latest/height", ...)
    to a response body, or to an exception instance to raise.
    """

    def __init__(self, routes):
        self.routes = dict(routes)
        self.calls = []

    def _resolve(self, url):
        matches = [key for key in self.routes if url.endswith("/" + key)]
        if not matches:
            request = httpx.Request("GET", url)
            raise httpx.HTTPStatusError(
                "404 Not Found", request=request, response=httpx.Response(404, request=request)
            )
        return self.routes[max(matches, key=len)]

    async def get(self, url):
        self.calls.append(url)
        result = self._resolve(url)
        if isinstance(result, Exception):
            raise result
        return result

    def called(self, suffix):
        return any(url.endswith("/" + suffix) for url in self.calls)


@pytest.fixture
def explorer_factory():
    return FakeExplorer


@pytest.fixture
def connect_error():
    return httpx.ConnectError("connection refused", request=httpx.Request("GET", API_ROOT))


@pytest.fixture
def pair_committee():
    return [
        ["aleo1alpha", "microcredits: 1000000"],
        ["aleo1beta", "2500000u64"],
        ["aleo1gamma", 500],
    ]


@pytest.fixture
def bonded_rows():
    return [
        ["aleo1alpha", "microcredits: 10"],
        ["aleo1beta", "20u64"],
        ["aleo1outsider", "microcredits: 999999"],
    ]


class RecordingAccumulator:
    """Accumulator that records every reporting call"""

    def __init__(self):
        self.calls = []


class CGTokenAccumulator(RecordingAccumulator):
    def addCGToken(self, symbol, amount):
        self.calls.append(("addCGToken", symbol, amount))


class GasTokenAccumulator(RecordingAccumulator):
    def addGasToken(self, symbol, amount, options):
        self.calls.append(("addGasToken", symbol, amount, options))


class GenericAccumulator(RecordingAccumulator):
    def add(self, identifier, amount):
        self.calls.append(("add", identifier, amount))


class FullAccumulator(CGTokenAccumulator, GenericAccumulator):
    pass


@pytest.fixture
def accumulators():
    return {
        "cg": CGTokenAccumulator,
        "gas": GasTokenAccumulator,
        "generic": GenericAccumulator,
        "full": FullAccumulator,
    }
