"""
Shared fixtures: order payloads, stub clients, and fake remote services.
"""

import asyncio
from typing import Any, Optional
from unittest.mock import AsyncMock, Mock

import pytest
import pytest_asyncio
from aiohttp import web
from aiohttp.test_utils import TestServer

from proofgate.schemas.order import OrderAction, PolicyVerdict, RiskProof
from proofgate.services.clients import (
    LegResult,
    PolicyServiceClient,
    RiskProofServiceClient,
)

OK_PROOF_BODY = {"proof_id": "p1", "hash": "0xabc", "ok": True, "var_value": 0.0}
OK_POLICY_BODY = {"verdict_id": "v1", "allow": True, "reasons": []}


@pytest.fixture
def action() -> OrderAction:
    return OrderAction(symbol="AAPL", side="buy", qty=1)


@pytest.fixture
def ok_proof() -> RiskProof:
    return RiskProof.model_validate(OK_PROOF_BODY)


@pytest.fixture
def ok_policy() -> PolicyVerdict:
    return PolicyVerdict.model_validate(OK_POLICY_BODY)


def make_proof_client(result: Any = None, side_effect: Any = None) -> Mock:
    """Stub risk-proof client returning `result` (or raising `side_effect`)."""
    client = Mock(spec=RiskProofServiceClient)
    client.name = "RiskProofService"
    client.prove = AsyncMock(return_value=result, side_effect=side_effect)
    client.health_check = AsyncMock(return_value=True)
    return client


def make_policy_client(result: Any = None, side_effect: Any = None) -> Mock:
    """Stub policy client returning `result` (or raising `side_effect`)."""
    client = Mock(spec=PolicyServiceClient)
    client.name = "PolicyService"
    client.evaluate = AsyncMock(return_value=result, side_effect=side_effect)
    client.health_check = AsyncMock(return_value=True)
    return client


@pytest.fixture
def proof_client_factory():
    return make_proof_client


@pytest.fixture
def policy_client_factory():
    return make_policy_client


@pytest.fixture
def healthy_proof_client(ok_proof) -> Mock:
    return make_proof_client(LegResult.success(ok_proof))


@pytest.fixture
def healthy_policy_client(ok_policy) -> Mock:
    return make_policy_client(LegResult.success(ok_policy))


# =============================================================================
# FAKE REMOTE SERVICES
# =============================================================================


class FakeRemote:
    """
    Configurable stand-in for the risk-proof or policy service.

    status / body / raw_body / delay can be changed between requests.
    """

    def __init__(self, body: dict):
        self.status = 200
        self.body: Optional[dict] = body
        self.raw_body: Optional[str] = None
        self.delay = 0.0
        self.requests: list[Any] = []
        self.lookups: list[str] = []
        self.base_url = ""

    async def _respond(self) -> web.Response:
        if self.delay:
            await asyncio.sleep(self.delay)
        if self.raw_body is not None:
            return web.Response(
                text=self.raw_body,
                status=self.status,
                content_type="application/json",
            )
        return web.json_response(self.body, status=self.status)

    async def handle_post(self, request: web.Request) -> web.Response:
        self.requests.append(await request.json())
        return await self._respond()

    async def handle_lookup(self, request: web.Request) -> web.Response:
        self.lookups.append(request.match_info["resource_id"])
        return await self._respond()

    def build_app(self, post_path: str, collection: str) -> web.Application:
        app = web.Application()
        app.router.add_post(post_path, self.handle_post)
        app.router.add_get(f"/{collection}/{{resource_id}}", self.handle_lookup)
        return app


async def _start(remote: FakeRemote, post_path: str, collection: str):
    server = TestServer(remote.build_app(post_path, collection))
    await server.start_server()
    remote.base_url = str(server.make_url("")).rstrip("/")
    return server


@pytest_asyncio.fixture
async def proof_remote():
    remote = FakeRemote(dict(OK_PROOF_BODY))
    server = await _start(remote, "/prove", "proofs")
    yield remote
    await server.close()


@pytest_asyncio.fixture
async def policy_remote():
    remote = FakeRemote(dict(OK_POLICY_BODY))
    server = await _start(remote, "/evaluate", "verdicts")
    yield remote
    await server.close()
