"""Registry of the tools exposed to a tool host.

Each tool function in this package is paired with the metadata a host needs
to surface it: a stable name, a description, and per-parameter descriptions
and ``required`` flags. Host bindings (``avni_mcp.server`` for MCP,
``avni_mcp.langchain_tools`` for LangChain) are built from ``TOOLS`` and
never inspect the functions themselves.

Parameter names are the camelCase names hosts send on the wire; they are
converted to the functions' snake_case keyword arguments on invocation.
"""

from __future__ import annotations

import logging
import re
from collections.abc import Callable, Coroutine, Mapping
from dataclasses import dataclass, field
from typing import Any

from avni_mcp.tools.app_designer import (
    SUBJECT_TYPE_KINDS,
    create_encounter_type,
    create_program,
    create_subject_type,
)
from avni_mcp.tools.locations import (
    create_catchment,
    create_location,
    create_location_type,
    get_catchments,
    get_location_types,
)
from avni_mcp.tools.organisation import create_organization
from avni_mcp.tools.users import (
    create_a_user,
    create_user,
    create_user_group,
    get_groups,
)

logger = logging.getLogger(__name__)

ToolHandler = Callable[..., Coroutine[Any, Any, str]]

_CAMEL_BOUNDARY = re.compile(r"(?<=[a-z0-9])(?=[A-Z])")


def to_snake_case(name: str) -> str:
    """``phoneNumber`` -> ``phone_number``."""
    return _CAMEL_BOUNDARY.sub("_", name).lower()


@dataclass(frozen=True)
class ToolParameter:
    """One parameter of a tool, as advertised to the host.

    ``type`` is a JSON Schema type name. Arrays also name their ``items``
    type; ``enum`` restricts a string to a fixed set of values.
    """

    name: str
    description: str
    type: str = "string"
    required: bool = True
    items: str | None = None
    enum: tuple[str, ...] | None = None

    @property
    def kwarg(self) -> str:
        return to_snake_case(self.name)

    def json_schema(self) -> dict[str, Any]:
        schema: dict[str, Any] = {"type": self.type, "description": self.description}
        if self.items is not None:
            schema["items"] = {"type": self.items}
        if self.enum is not None:
            schema["enum"] = list(self.enum)
        return schema


@dataclass(frozen=True)
class ToolSpec:
    """A tool: name, description, parameters and implementation.

    ``action`` is the verb phrase used in failure messages
    ("Failed to <action>: ...").
    """

    name: str
    description: str
    handler: ToolHandler
    action: str
    parameters: tuple[ToolParameter, ...] = field(default_factory=tuple)

    def input_schema(self) -> dict[str, Any]:
        """JSON Schema for the tool's arguments object."""
        return {
            "type": "object",
            "properties": {p.name: p.json_schema() for p in self.parameters},
            "required": [p.name for p in self.parameters if p.required],
        }

    async def invoke(self, arguments: Mapping[str, Any] | None = None) -> str:
        """Call the tool with wire-named ``arguments``.

        Unknown argument names are ignored. A required argument that is
        missing or null is reported as a failure string without calling the
        Avni API.
        """
        arguments = arguments or {}
        kwargs: dict[str, Any] = {}
        for param in self.parameters:
            value = arguments.get(param.name)
            if value is not None:
                kwargs[param.kwarg] = value
            elif param.required:
                logger.warning("%s called without '%s'", self.name, param.name)
                return f"Failed to {self.action}: missing required parameter '{param.name}'"
        return await self.handler(**kwargs)


def _param(name: str, description: str, **kwargs: Any) -> ToolParameter:
    return ToolParameter(name=name, description=description, **kwargs)


_GROUP_IDS = _param(
    "groupIds",
    "List of group IDs (use get_groups to find IDs)",
    type="array",
    items="integer",
    required=False,
)

TOOLS: tuple[ToolSpec, ...] = (
    ToolSpec(
        name="get_location_types",
        description=(
            "Retrieve a list of location types for an organization to find IDs "
            "for creating locations or sub-location types"
        ),
        handler=get_location_types,
        action="retrieve location types",
    ),
    ToolSpec(
        name="get_catchments",
        description=(
            "Retrieve a list of catchments for an organization to find IDs "
            "for assigning users"
        ),
        handler=get_catchments,
        action="retrieve catchments",
    ),
    ToolSpec(
        name="get_groups",
        description=(
            "Retrieve a list of user groups for an organization to find IDs "
            "for assigning users"
        ),
        handler=get_groups,
        action="retrieve user groups",
    ),
    ToolSpec(
        name="create_organization",
        description=(
            "Create a new organization in Avni with default settings, "
            "enabling data entry app setup"
        ),
        handler=create_organization,
        action="create organization",
        parameters=(_param("name", "Name of the organization"),),
    ),
    ToolSpec(
        name="create_a_user",
        description=(
            "Create a user for an Avni organization to manage app configuration "
            "and data entry, requires group ID if you also need to assign a "
            "group to the user"
        ),
        handler=create_a_user,
        action="create admin user",
        parameters=(
            _param("orgName", "Organization name"),
            _param("firstName", "First name of the user"),
            _param("lastName", "Last name of the user", required=False),
            _param("email", "Email address"),
            _param("phoneNumber", "Phone number"),
            _GROUP_IDS,
        ),
    ),
    ToolSpec(
        name="create_location_type",
        description=(
            "Create a location type (e.g., State, District) for hierarchical "
            "location setup in Avni"
        ),
        handler=create_location_type,
        action="create location type",
        parameters=(
            _param("name", "Name of the location type"),
            _param(
                "level",
                "Level of the location type (e.g., 3 for State, 2 for District)",
                type="number",
            ),
            _param(
                "parentId",
                "Parent location type ID, if any (use get_location_types to find IDs)",
                type="integer",
                required=False,
            ),
        ),
    ),
    ToolSpec(
        name="create_location",
        description=(
            "Create a real location (e.g., Himachal Pradesh, Kullu) in Avni's "
            "location hierarchy"
        ),
        handler=create_location,
        action="create location",
        parameters=(
            _param("name", "Name of the location"),
            _param("level", "Level of the location (e.g., 1 for Village)", type="integer"),
            _param(
                "type",
                "Type of the location (use get_location_types to find type names)",
            ),
            _param(
                "parentId",
                "Parent location ID",
                type="integer",
                required=False,
            ),
        ),
    ),
    ToolSpec(
        name="create_catchment",
        description="Create a catchment grouping locations for data collection in Avni",
        handler=create_catchment,
        action="create catchment",
        parameters=(
            _param("name", "Name of the catchment"),
            _param(
                "locationIds",
                "List of location IDs",
                type="array",
                items="integer",
            ),
        ),
    ),
    ToolSpec(
        name="create_user",
        description=(
            "Create a user in Avni with customizable settings for data entry "
            "or app access"
        ),
        handler=create_user,
        action="create user",
        parameters=(
            _param("orgName", "Organization name"),
            _param("username", "Username (without org suffix)"),
            _param("name", "Full name of the user"),
            _param("email", "Email address"),
            _param("phoneNumber", "Phone number"),
            _param(
                "catchmentId",
                "Catchment ID (use get_catchments to find IDs)",
                type="integer",
                required=False,
            ),
            _GROUP_IDS,
            _param(
                "trackLocation",
                "Enable location tracking in Field App",
                type="boolean",
                required=False,
            ),
            _param(
                "allowTokenApi",
                "Allow token generation API access",
                type="boolean",
                required=False,
            ),
            _param(
                "beneficiaryMode",
                "Enable beneficiary mode in Field App",
                type="boolean",
                required=False,
            ),
            _param(
                "disableAutoRefresh",
                "Disable dashboard auto-refresh",
                type="boolean",
                required=False,
            ),
            _param(
                "disableAutoSync",
                "Disable auto-sync in Field App",
                type="boolean",
                required=False,
            ),
            _param(
                "enableCallMasking",
                "Enable call masking via Exotel",
                type="boolean",
                required=False,
            ),
            _param(
                "registerEnrol",
                "Enable register and enrol flow",
                type="boolean",
                required=False,
            ),
        ),
    ),
    ToolSpec(
        name="create_user_group",
        description="Create a user group in Avni for assigning roles to users",
        handler=create_user_group,
        action="create user group",
        parameters=(_param("name", "Name of the user group"),),
    ),
    ToolSpec(
        name="create_subject_type",
        description=(
            "Create a subject type (e.g., Person, Household) for data "
            "collection in Avni"
        ),
        handler=create_subject_type,
        action="create subject type",
        parameters=(
            _param("name", "Name of the subject type"),
            _param(
                "type",
                "Type of the subject : Person, Individual, Group, Household or User",
                enum=SUBJECT_TYPE_KINDS,
            ),
            _param(
                "locationTypeUuid",
                "Location type UUID (use get_location_types to find UUIDs)",
                required=False,
            ),
        ),
    ),
    ToolSpec(
        name="create_program",
        description="Create a program in Avni for managing data collection activities",
        handler=create_program,
        action="create program",
        parameters=(
            _param("name", "Name of the program"),
            _param(
                "subjectTypeUuid",
                "Subject type UUID (use create_subject_type to get UUID)",
            ),
        ),
    ),
    ToolSpec(
        name="create_encounter_type",
        description="Create an encounter type for a program and subject type in Avni",
        handler=create_encounter_type,
        action="create encounter type",
        parameters=(
            _param("name", "Name of the encounter type"),
            _param(
                "subjectTypeUuid",
                "Subject type UUID (use create_subject_type to get UUID)",
            ),
            _param("programUuid", "Program UUID (use create_program to get UUID)"),
        ),
    ),
)

_TOOLS_BY_NAME: dict[str, ToolSpec] = {tool.name: tool for tool in TOOLS}


def get_tool(name: str) -> ToolSpec:
    """Look up a tool by name.

    Raises:
        KeyError: If no tool has that name.
    """
    return _TOOLS_BY_NAME[name]


async def call_tool(name: str, arguments: Mapping[str, Any] | None = None) -> str:
    """Invoke the named tool with wire-named arguments."""
    return await get_tool(name).invoke(arguments)
