"""User and user group tools.

API endpoints used:
- GET  /web/groups  — List user groups
- POST /web/groups  — Create a user group
- POST /user        — Create a user (admin or field user)

Avni usernames are always qualified with the organisation's slug, e.g.
``jo@care_foundation``. The payload's ``ignored`` field carries the
unqualified part.
"""

from __future__ import annotations

import logging

from avni_mcp.avni_client import AvniError, get_client, project
from avni_mcp.naming import qualified_username, username_prefix
from avni_mcp.records import User, UserGroup

logger = logging.getLogger(__name__)

# Settings every user created through these tools starts with.
BASE_USER_SETTINGS = {
    "locale": "en",
    "datePickerMode": "calendar",
    "timePickerMode": "clock",
}


async def get_groups() -> str:
    """List the organisation's user groups.

    Returns:
        One line per user group with its ID and name.
    """
    client = await get_client()

    try:
        raw = await client.get_list("/web/groups")
        groups = project(raw, UserGroup)
    except AvniError as e:
        logger.warning("get_groups failed: %s", e)
        return f"Failed to retrieve user groups: {e}"

    if not groups:
        return "No user groups found."

    return "\n".join(f"ID: {g.id}, Name: {g.name}" for g in groups)


async def create_user_group(name: str) -> str:
    """Create a user group in Avni for assigning roles to users."""
    client = await get_client()

    try:
        created = await client.post_for_record("/web/groups", {"name": name}, UserGroup)
    except AvniError as e:
        logger.warning("create_user_group failed: %s", e)
        return f"Failed to create user group: {e}"

    return f"User group '{name}' created successfully with ID {created.id}"


async def create_a_user(
    org_name: str,
    first_name: str,
    email: str,
    phone_number: str,
    last_name: str | None = None,
    group_ids: list[int] | None = None,
) -> str:
    """Create an admin user for an organisation.

    The username is derived from the first name: its first four
    characters, lowercased, qualified with the organisation slug.

    Args:
        org_name: Organisation name (as given to create_organization).
        first_name: First name of the user.
        email: Email address.
        phone_number: Phone number.
        last_name: Last name of the user, if any.
        group_ids: IDs of the user groups to assign (see get_groups).

    Returns:
        Confirmation with the generated username and the new user's ID.
    """
    client = await get_client()

    prefix = username_prefix(first_name)
    username = qualified_username(prefix, org_name)
    full_name = f"{first_name} {last_name}" if last_name is not None else first_name

    payload = {
        "operatingIndividualScope": "None",
        "username": username,
        "ignored": prefix,
        "name": full_name,
        "email": email,
        "phoneNumber": phone_number,
        "groupIds": list(group_ids) if group_ids is not None else [],
        "settings": {
            "locale": BASE_USER_SETTINGS["locale"],
            "isAllowedToInvokeTokenGenerationAPI": False,
            "datePickerMode": BASE_USER_SETTINGS["datePickerMode"],
            "timePickerMode": BASE_USER_SETTINGS["timePickerMode"],
        },
    }

    try:
        created = await client.post_for_record("/user", payload, User)
    except AvniError as e:
        logger.warning("create_a_user failed: %s", e)
        return f"Failed to create admin user: {e}"

    return f"Admin user '{username}' created successfully with ID {created.id}"


async def create_user(
    org_name: str,
    username: str,
    name: str,
    email: str,
    phone_number: str,
    catchment_id: int | None = None,
    group_ids: list[int] | None = None,
    track_location: bool = False,
    allow_token_api: bool = False,
    beneficiary_mode: bool = False,
    disable_auto_refresh: bool = False,
    disable_auto_sync: bool = False,
    enable_call_masking: bool = False,
    register_enrol: bool = False,
) -> str:
    """Create a user with customisable Field App settings.

    A user with a catchment operates "ByCatchment"; without one the scope
    is "None". ``catchmentId`` is sent even when it is null. A settings flag
    is enabled only by a literal ``True``.

    Args:
        org_name: Organisation name; its slug becomes the username suffix.
        username: Username without the organisation suffix.
        name: Full name of the user.
        email: Email address.
        phone_number: Phone number.
        catchment_id: Catchment to assign (see get_catchments).
        group_ids: IDs of the user groups to assign (see get_groups).
        track_location: Enable location tracking in the Field App.
        allow_token_api: Allow access to the token generation API.
        beneficiary_mode: Enable beneficiary mode in the Field App.
        disable_auto_refresh: Disable dashboard auto-refresh.
        disable_auto_sync: Disable auto-sync in the Field App.
        enable_call_masking: Enable call masking via Exotel.
        register_enrol: Enable the register-and-enrol flow.

    Returns:
        Confirmation with the username and the new user's ID.
    """
    client = await get_client()

    settings = {
        "locale": BASE_USER_SETTINGS["locale"],
        "trackLocation": track_location is True,
        "isAllowedToInvokeTokenGenerationAPI": allow_token_api is True,
        "showBeneficiaryMode": beneficiary_mode is True,
        "disableAutoRefresh": disable_auto_refresh is True,
        "disableAutoSync": disable_auto_sync is True,
        "enableCallMasking": enable_call_masking is True,
        "registerEnrol": register_enrol is True,
        "datePickerMode": BASE_USER_SETTINGS["datePickerMode"],
        "timePickerMode": BASE_USER_SETTINGS["timePickerMode"],
    }
    payload = {
        "operatingIndividualScope": "ByCatchment" if catchment_id is not None else "None",
        "username": qualified_username(username, org_name),
        "ignored": username,
        "name": name,
        "email": email,
        "phoneNumber": phone_number,
        "catchmentId": catchment_id,
        "groupIds": list(group_ids) if group_ids is not None else [],
        "settings": settings,
    }

    try:
        created = await client.post_for_record("/user", payload, User)
    except AvniError as e:
        logger.warning("create_user failed: %s", e)
        return f"Failed to create user: {e}"

    return f"User '{username}' created successfully with ID {created.id}"
