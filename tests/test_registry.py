"""Tests for the tool registry: names, parameter metadata and dispatch."""

from __future__ import annotations

import json
from unittest.mock import AsyncMock, patch

import httpx
import pytest

from avni_mcp.avni_client import AvniClient
from avni_mcp.tools.registry import TOOLS, call_tool, get_tool, to_snake_case

EXPECTED_TOOLS = [
    "get_location_types",
    "get_catchments",
    "get_groups",
    "create_organization",
    "create_a_user",
    "create_location_type",
    "create_location",
    "create_catchment",
    "create_user",
    "create_user_group",
    "create_subject_type",
    "create_program",
    "create_encounter_type",
]


def test_catalog_names() -> None:
    assert [tool.name for tool in TOOLS] == EXPECTED_TOOLS


def test_every_tool_has_description_and_parameter_descriptions() -> None:
    for tool in TOOLS:
        assert tool.description
        for param in tool.parameters:
            assert param.description, f"{tool.name}.{param.name}"


def test_to_snake_case() -> None:
    assert to_snake_case("phoneNumber") == "phone_number"
    assert to_snake_case("locationTypeUuid") == "location_type_uuid"
    assert to_snake_case("name") == "name"


@pytest.mark.parametrize(
    ("tool", "required", "optional"),
    [
        ("get_catchments", [], []),
        ("create_organization", ["name"], []),
        (
            "create_a_user",
            ["orgName", "firstName", "email", "phoneNumber"],
            ["lastName", "groupIds"],
        ),
        ("create_location_type", ["name", "level"], ["parentId"]),
        ("create_location", ["name", "level", "type"], ["parentId"]),
        ("create_catchment", ["name", "locationIds"], []),
        (
            "create_user",
            ["orgName", "username", "name", "email", "phoneNumber"],
            [
                "catchmentId",
                "groupIds",
                "trackLocation",
                "allowTokenApi",
                "beneficiaryMode",
                "disableAutoRefresh",
                "disableAutoSync",
                "enableCallMasking",
                "registerEnrol",
            ],
        ),
        ("create_subject_type", ["name", "type"], ["locationTypeUuid"]),
        ("create_program", ["name", "subjectTypeUuid"], []),
        ("create_encounter_type", ["name", "subjectTypeUuid", "programUuid"], []),
    ],
)
def test_input_schema_required_flags(
    tool: str, required: list[str], optional: list[str]
) -> None:
    schema = get_tool(tool).input_schema()

    assert schema["type"] == "object"
    assert schema["required"] == required
    assert set(schema["properties"]) == set(required + optional)


def test_array_and_enum_schemas() -> None:
    props = get_tool("create_catchment").input_schema()["properties"]
    assert props["locationIds"]["type"] == "array"
    assert props["locationIds"]["items"] == {"type": "integer"}

    props = get_tool("create_subject_type").input_schema()["properties"]
    assert props["type"]["enum"] == ["Person", "Individual", "Group", "Household", "User"]


def test_schema_is_json_serializable() -> None:
    for tool in TOOLS:
        json.dumps(tool.input_schema())


def test_unknown_tool_raises_key_error() -> None:
    with pytest.raises(KeyError):
        get_tool("delete_organization")


@pytest.mark.asyncio
async def test_missing_required_argument_is_reported() -> None:
    result = await call_tool("create_catchment", {"name": "Block A"})
    assert result == "Failed to create catchment: missing required parameter 'locationIds'"


@pytest.mark.asyncio
async def test_call_tool_maps_wire_names_to_keywords() -> None:
    requests: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": 3, "name": "District"})

    client = AvniClient(
        base_url="https://avni.test",
        api_key="k",
        transport=httpx.MockTransport(handler),
    )
    with patch("avni_mcp.tools.locations.get_client", AsyncMock(return_value=client)):
        result = await call_tool(
            "create_location_type",
            {"name": "District", "level": 2, "parentId": 1, "unexpected": True},
        )

    assert result == "Location type 'District' created successfully with ID 3"
    assert json.loads(requests[0].content) == {
        "name": "District",
        "level": 2.0,
        "parentId": 1,
    }

    await client.close()


@pytest.mark.asyncio
async def test_call_tool_without_arguments() -> None:
    client = AvniClient(
        base_url="https://avni.test",
        api_key="k",
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json=[])),
    )
    with patch("avni_mcp.tools.users.get_client", AsyncMock(return_value=client)):
        assert await call_tool("get_groups", None) == "No user groups found."

    await client.close()


@pytest.mark.asyncio
@pytest.mark.parametrize(
    ("tool", "arguments", "expected"),
    [
        (
            "create_organization",
            {"name": None},
            "Failed to create organization: missing required parameter 'name'",
        ),
        (
            "create_catchment",
            {"name": "Block A", "locationIds": None},
            "Failed to create catchment: missing required parameter 'locationIds'",
        ),
        (
            "create_location_type",
            {"name": "District", "level": None},
            "Failed to create location type: missing required parameter 'level'",
        ),
    ],
)
async def test_null_required_argument_is_reported(
    tool: str, arguments: dict[str, object], expected: str
) -> None:
    get_client = AsyncMock()
    with (
        patch("avni_mcp.tools.organisation.get_client", get_client),
        patch("avni_mcp.tools.locations.get_client", get_client),
    ):
        result = await call_tool(tool, arguments)

    assert result == expected
    get_client.assert_not_awaited()


@pytest.mark.asyncio
async def test_null_optional_argument_uses_default() -> None:
    requests: list[httpx.Request] = []

    async def handler(request: httpx.Request) -> httpx.Response:
        requests.append(request)
        return httpx.Response(200, json={"id": 4, "name": "District"})

    client = AvniClient(
        base_url="https://avni.test",
        api_key="k",
        transport=httpx.MockTransport(handler),
    )
    with patch("avni_mcp.tools.locations.get_client", AsyncMock(return_value=client)):
        result = await call_tool(
            "create_location_type", {"name": "District", "level": 2, "parentId": None}
        )

    assert result == "Location type 'District' created successfully with ID 4"
    assert json.loads(requests[0].content) == {"name": "District", "level": 2.0}

    await client.close()
