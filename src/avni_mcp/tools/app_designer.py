"""App designer tools: subject types, programs and encounter types.

These entities are identified by UUID rather than numeric ID.

API endpoints used:
- POST /web/subjectType    — Create a subject type
- POST /web/program        — Create a program for a subject type
- POST /web/encounterType  — Create an encounter type for a program
"""

from __future__ import annotations

import logging

from avni_mcp.avni_client import AvniError, get_client
from avni_mcp.naming import slugify
from avni_mcp.records import EncounterType, Program, SubjectType

logger = logging.getLogger(__name__)

SUBJECT_TYPE_KINDS = ("Person", "Individual", "Group", "Household", "User")

# Colour the Avni web app assigns to new programs.
DEFAULT_PROGRAM_COLOUR = "#611717"


async def create_subject_type(
    name: str,
    type: str,  # noqa: A002 - matches the Avni field name
    location_type_uuid: str | None = None,
) -> str:
    """Create a subject type (e.g., Person, Household) for data collection.

    Args:
        name: Name of the subject type.
        type: One of Person, Individual, Group, Household or User.
        location_type_uuid: UUID of the location type subjects register in.

    Returns:
        Confirmation with the new subject type's UUID.
    """
    if type not in SUBJECT_TYPE_KINDS:
        return (
            f"Failed to create subject type: type must be one of "
            f"{', '.join(SUBJECT_TYPE_KINDS)} (got '{type}')"
        )

    client = await get_client()

    payload = {
        "name": name,
        "groupRoles": [],
        "subjectSummaryRule": "",
        "programEligibilityCheckRule": "",
        "shouldSyncByLocation": True,
        "lastNameOptional": False,
        "settings": {
            "displayRegistrationDetails": True,
            "displayPlannedEncounters": True,
        },
        "type": type,
        "active": True,
        # Always a one-element list, even when no UUID was given.
        "locationTypeUUIDs": [location_type_uuid],
    }

    try:
        created = await client.post_for_record("/web/subjectType", payload, SubjectType)
    except AvniError as e:
        logger.warning("create_subject_type failed: %s", e)
        return f"Failed to create subject type: {e}"

    return f"Subject type '{name}' created successfully with UUID {created.uuid}"


async def create_program(name: str, subject_type_uuid: str) -> str:
    """Create a program in Avni for managing data collection activities."""
    client = await get_client()

    payload = {
        "name": name,
        "colour": DEFAULT_PROGRAM_COLOUR,
        "programSubjectLabel": slugify(name),
        "enrolmentSummaryRule": "",
        "subjectTypeUuid": subject_type_uuid,
        "enrolmentEligibilityCheckRule": "",
        "enrolmentEligibilityCheckDeclarativeRule": None,
        "manualEligibilityCheckRequired": False,
        "showGrowthChart": False,
        "allowMultipleEnrolments": True,
        "manualEnrolmentEligibilityCheckRule": "",
    }

    try:
        created = await client.post_for_record("/web/program", payload, Program)
    except AvniError as e:
        logger.warning("create_program failed: %s", e)
        return f"Failed to create program: {e}"

    return f"Program '{name}' created successfully with UUID {created.uuid}"


async def create_encounter_type(
    name: str,
    subject_type_uuid: str,
    program_uuid: str,
) -> str:
    """Create an encounter type for a program and subject type.

    Args:
        name: Name of the encounter type.
        subject_type_uuid: UUID of the subject type (from create_subject_type).
        program_uuid: UUID of the program (from create_program).

    Returns:
        Confirmation with the new encounter type's UUID.
    """
    client = await get_client()

    payload = {
        "name": name,
        "encounterEligibilityCheckRule": name,
        "loaded": True,
        "subjectTypeUuid": subject_type_uuid,
        "programUuid": program_uuid,
    }

    try:
        created = await client.post_for_record(
            "/web/encounterType", payload, EncounterType
        )
    except AvniError as e:
        logger.warning("create_encounter_type failed: %s", e)
        return f"Failed to create encounter type: {e}"

    return f"Encounter type '{name}' created successfully with UUID {created.uuid}"
