"""Permission names and the grants attached to each role."""

from __future__ import annotations

EQUIPMENT_READ = "equipment:read"
EQUIPMENT_UPDATE = "equipment:update"
EQUIPMENT_DELETE = "equipment:delete"
EQUIPMENT_TYPE_READ = "equipment_type:read"
USER_EQUIPMENT_CREATE = "user_equipment:create"
USER_EQUIPMENT_READ = "user_equipment:read"
USER_EQUIPMENT_DELETE = "user_equipment:delete"

ALL_PERMISSIONS: frozenset[str] = frozenset(
    {
        EQUIPMENT_READ,
        EQUIPMENT_UPDATE,
        EQUIPMENT_DELETE,
        EQUIPMENT_TYPE_READ,
        USER_EQUIPMENT_CREATE,
        USER_EQUIPMENT_READ,
        USER_EQUIPMENT_DELETE,
    }
)

# Role names match the rows seeded into the ``roles`` table.
ROLE_PERMISSIONS: dict[str, frozenset[str]] = {
    "admin": ALL_PERMISSIONS,
    "user": frozenset(
        {
            EQUIPMENT_READ,
            EQUIPMENT_TYPE_READ,
            USER_EQUIPMENT_CREATE,
            USER_EQUIPMENT_READ,
            USER_EQUIPMENT_DELETE,
        }
    ),
}


def permissions_for_role(role: str | None) -> frozenset[str]:
    if not role:
        return frozenset()
    return ROLE_PERMISSIONS.get(role.lower(), frozenset())
