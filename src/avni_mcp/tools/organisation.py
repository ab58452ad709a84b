"""Organisation setup tool.

API endpoints used:
- POST /organisation  — Create an organisation
"""

from __future__ import annotations

import logging

from avni_mcp.avni_client import AvniError, get_client
from avni_mcp.naming import slugify
from avni_mcp.records import Organisation

logger = logging.getLogger(__name__)

# Avni's defaults for a newly created organisation.
DEFAULT_CATEGORY_ID = 1
DEFAULT_STATUS_ID = 1


async def create_organization(name: str) -> str:
    """Create a new organisation with default settings.

    The organisation's database user, schema, media directory and username
    suffix are all derived from its name (see ``naming.slugify``).

    Args:
        name: Name of the organization.

    Returns:
        Confirmation with the new organisation's ID.
    """
    client = await get_client()

    slug = slugify(name)
    payload = {
        "name": name,
        "dbUser": slug,
        "schemaName": slug,
        "mediaDirectory": slug,
        "usernameSuffix": slug,
        "categoryId": DEFAULT_CATEGORY_ID,
        "statusId": DEFAULT_STATUS_ID,
    }

    try:
        created = await client.post_for_record("/organisation", payload, Organisation)
    except AvniError as e:
        logger.warning("create_organization failed: %s", e)
        return f"Failed to create organization: {e}"

    return f"Organization '{name}' created successfully with ID {created.id}"
