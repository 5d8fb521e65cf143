# tests/resolver/test_resolver.py
"""
Tests for the Resolver using a fake cluster-state reader and respx for the
agent's HTTP endpoint.
"""

import httpx
import pytest
import respx
from httpx import Response

from realloc.core.exceptions import ClusterLookupError, ContainerNotFoundError, TransportError
from realloc.models.resources import ResourceKind
from realloc.resolver import AgentClient, ResizeValues, Resolver
from realloc.resolver.resolver import build_requests

AGENT_URL = "http://10.0.0.12:8000/"
AGENT_OUTPUT = '{"output": "abc123\\n"}'


@pytest.fixture
def echoed():
    return []


@pytest.fixture
def resolver(config, fake_reader, echoed):
    return Resolver(config, reader=fake_reader, agent=AgentClient(config), echo=echoed.append)


def test_build_requests_keeps_fixed_order():
    requests = build_requests("abc123", ResizeValues(bandwidth="10Mbps", cpu="500m", memory="256Mi"))

    assert [r.kind for r in requests] == [ResourceKind.CPU, ResourceKind.MEMORY, ResourceKind.BANDWIDTH]
    assert all(r.container == "abc123" for r in requests)


def test_build_requests_skips_empty_values():
    requests = build_requests("abc123", ResizeValues(cpu="", memory="256Mi"))
    assert [(r.kind, r.raw_value) for r in requests] == [(ResourceKind.MEMORY, "256Mi")]


@pytest.mark.asyncio
async def test_resolve(resolver, fake_reader):
    target = await resolver.resolve("web-7d4b9c", "web")

    assert target.host == "10.0.0.12"
    assert target.container_id == "abc123"
    assert fake_reader.reads == [("web-7d4b9c", "default")]


@pytest.mark.asyncio
async def test_resolve_uses_given_namespace(resolver, fake_reader):
    await resolver.resolve("web-7d4b9c", "web", namespace="shop")
    assert fake_reader.reads == [("web-7d4b9c", "shop")]


@pytest.mark.asyncio
@respx.mock
async def test_resize_cpu_sends_runtime_id(resolver, echoed):
    route = respx.post(AGENT_URL).mock(return_value=Response(200, text=AGENT_OUTPUT))

    responses = await resolver.resize("web-7d4b9c", "web", ResizeValues(cpu="500m"))

    assert route.call_count == 1
    sent = route.calls.last.request
    assert sent.url.params["resource"] == "cpu"
    assert sent.url.params["value"] == "500m"
    assert sent.url.params["container"] == "abc123"
    assert responses == [AGENT_OUTPUT]
    assert echoed == responses


@pytest.mark.asyncio
@respx.mock
async def test_resize_sends_in_order(resolver):
    route = respx.post(AGENT_URL).mock(return_value=Response(200, json={"output": ""}))

    await resolver.resize(
        "web-7d4b9c", "web", ResizeValues(cpu="500m", memory="256Mi", bandwidth="10Mbps")
    )

    kinds = [call.request.url.params["resource"] for call in route.calls]
    assert kinds == ["cpu", "memory", "bandwidth"]


@pytest.mark.asyncio
@respx.mock
async def test_resize_prints_agent_errors_verbatim(resolver, echoed):
    respx.post(AGENT_URL).mock(return_value=Response(400, text="cpu must be specified in millicores"))

    await resolver.resize("web-7d4b9c", "web", ResizeValues(cpu="500"))

    assert echoed == ["cpu must be specified in millicores"]


@pytest.mark.asyncio
@respx.mock
async def test_transport_failure_aborts_remaining_sends(resolver, echoed):
    route = respx.post(AGENT_URL).mock(
        side_effect=[Response(200, json={"output": ""}), httpx.ConnectError("connection refused")]
    )

    with pytest.raises(TransportError, match="failed to reach agent"):
        await resolver.resize(
            "web-7d4b9c", "web", ResizeValues(cpu="500m", memory="256Mi", bandwidth="10Mbps")
        )

    assert route.call_count == 2
    assert len(echoed) == 1


@pytest.mark.asyncio
@respx.mock
async def test_lookup_failure_sends_nothing(resolver, fake_reader):
    route = respx.post(AGENT_URL)
    fake_reader.error = 'pods "web-7d4b9c" not found'

    with pytest.raises(ClusterLookupError):
        await resolver.resize("web-7d4b9c", "web", ResizeValues(cpu="500m"))

    assert route.call_count == 0


@pytest.mark.asyncio
@respx.mock
async def test_missing_container_sends_nothing(resolver):
    route = respx.post(AGENT_URL)

    with pytest.raises(ContainerNotFoundError, match="container not found"):
        await resolver.resize("web-7d4b9c", "db", ResizeValues(cpu="500m"))

    assert route.call_count == 0


@pytest.mark.asyncio
async def test_close_releases_reader_and_client(resolver, fake_reader):
    await resolver.close()
    assert fake_reader.closed
