"""Location hierarchy tools: location types, locations and catchments.

API endpoints used:
- GET  /addressLevelType  — List location types
- POST /addressLevelType  — Create a location type
- POST /locations         — Create locations (batch endpoint, one at a time here)
- GET  /catchment         — List catchments
- POST /catchment         — Create a catchment
"""

from __future__ import annotations

import logging
from typing import Any

from avni_mcp.avni_client import AvniError, get_client, project
from avni_mcp.records import AddressLevelType, Catchment, Location

logger = logging.getLogger(__name__)


async def get_location_types() -> str:
    """List the organisation's location types (IDs are needed to create locations).

    Returns:
        One line per location type with its ID, name and level.
    """
    client = await get_client()

    try:
        raw = await client.get_list("/addressLevelType")
        location_types = project(raw, AddressLevelType)
    except AvniError as e:
        logger.warning("get_location_types failed: %s", e)
        return f"Failed to retrieve location types: {e}"

    if not location_types:
        return "No location types found."

    lines = []
    for t in location_types:
        level = f"{t.level:.1f}" if t.level is not None else "null"
        lines.append(f"ID: {t.id}, Name: {t.name}, Level: {level}")
    return "\n".join(lines)


async def create_location_type(
    name: str,
    level: float,
    parent_id: int | None = None,
) -> str:
    """Create a location type such as State or District.

    Args:
        name: Name of the location type.
        level: Level in the hierarchy (e.g., 3 for State, 2 for District).
        parent_id: ID of the parent location type, if any.

    Returns:
        Confirmation with the new location type's ID.
    """
    client = await get_client()

    # No parent means no parentId key, not "parentId": null.
    payload: dict[str, Any] = {"name": name, "level": float(level)}
    if parent_id is not None:
        payload["parentId"] = parent_id

    try:
        created = await client.post_for_record(
            "/addressLevelType", payload, AddressLevelType
        )
    except AvniError as e:
        logger.warning("create_location_type failed: %s", e)
        return f"Failed to create location type: {e}"

    return f"Location type '{name}' created successfully with ID {created.id}"


async def create_location(
    name: str,
    level: int,
    type: str,  # noqa: A002 - matches the Avni field name
    parent_id: int | None = None,
) -> str:
    """Create a location such as Himachal Pradesh or Kullu.

    Args:
        name: Name of the location.
        level: Level of the location (e.g., 1 for Village).
        type: Name of the location type (see get_location_types).
        parent_id: ID of the parent location, if any.

    Returns:
        Confirmation with the new location's ID.
    """
    client = await get_client()

    parents = [{"id": parent_id}] if parent_id is not None else []
    payload = [
        {
            "name": name,
            "level": level,
            "type": type,
            "parents": parents,
        }
    ]

    try:
        created = await client.post_for_record("/locations", payload, Location)
    except AvniError as e:
        logger.warning("create_location failed: %s", e)
        return f"Failed to create location: {e}"

    return f"Location '{name}' created successfully with ID {created.id}"


async def get_catchments() -> str:
    """List the organisation's catchments.

    Returns:
        One line per catchment with its ID and name.
    """
    client = await get_client()

    try:
        raw = await client.get_list("/catchment")
        catchments = project(raw, Catchment)
    except AvniError as e:
        logger.warning("get_catchments failed: %s", e)
        return f"Failed to retrieve catchments: {e}"

    if not catchments:
        return "No catchments found."

    return "\n".join(f"ID: {c.id}, Name: {c.name}" for c in catchments)


async def create_catchment(name: str, location_ids: list[int]) -> str:
    """Create a catchment grouping locations for data collection.

    Args:
        name: Name of the catchment.
        location_ids: IDs of the locations the catchment covers.

    Returns:
        Confirmation with the new catchment's ID.
    """
    client = await get_client()

    payload = {
        "deleteFastSync": False,
        "name": name,
        "locationIds": list(location_ids),
    }

    try:
        created = await client.post_for_record("/catchment", payload, Catchment)
    except AvniError as e:
        logger.warning("create_catchment failed: %s", e)
        return f"Failed to create catchment: {e}"

    return f"Catchment '{name}' created successfully with ID {created.id}"
