"""Tests for the LangChain StructuredTool binding."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from avni_mcp.avni_client import AvniClient
from avni_mcp.langchain_tools import build_tools
from avni_mcp.tools.registry import TOOLS


def test_one_structured_tool_per_registry_entry() -> None:
    tools = build_tools()

    assert [t.name for t in tools] == [spec.name for spec in TOOLS]
    assert all(t.description for t in tools)


def test_args_schema_keeps_wire_names_and_required_flags() -> None:
    tool = {t.name: t for t in build_tools()}["create_a_user"]
    schema = tool.args_schema.model_json_schema()

    assert set(schema["properties"]) == {
        "orgName",
        "firstName",
        "lastName",
        "email",
        "phoneNumber",
        "groupIds",
    }
    assert sorted(schema["required"]) == ["email", "firstName", "orgName", "phoneNumber"]
    assert schema["properties"]["firstName"]["description"] == "First name of the user"


@pytest.mark.asyncio
async def test_ainvoke_omits_unset_optional_arguments() -> None:
    requests: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": 1, "name": "State", "level": 3.0})

    client = AvniClient(
        base_url="https://avni.test",
        api_key="k",
        transport=httpx.MockTransport(handler),
    )
    tool = {t.name: t for t in build_tools()}["create_location_type"]

    with patch("avni_mcp.tools.locations.get_client", AsyncMock(return_value=client)):
        result = await tool.ainvoke({"name": "State", "level": 3})

    assert result == "Location type 'State' created successfully with ID 1"
    assert json.loads(requests[0].content) == {"name": "State", "level": 3.0}
    await client.close()
