"""Permission keys for RBAC."""

from enum import StrEnum


class PermissionKey(StrEnum):
    """Capability tags, each gating one class of user-visible action."""

    VIEW_DASHBOARD = "view-dashboard"
    VIEW_LIST = "view-list"
    EDIT_PATENT = "edit-patent"
    DELETE_PATENT = "delete-patent"
    SEND_EMAIL = "send-email"
    IMPORT_DATA = "import-data"
    EXPORT_DATA = "export-data"
    MANAGE_ACCESS = "manage-access"
    VIEW_LOGS = "view-logs"
    AI_CHAT = "ai-chat"
