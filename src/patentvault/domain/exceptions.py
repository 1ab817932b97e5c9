"""Domain exceptions."""


class PatentVaultError(Exception):
    """Base exception for PatentVault."""

    pass


class PermissionDenied(PatentVaultError):
    """Session does not hold the permission key required for the action."""

    pass


class AuthenticationRequired(PatentVaultError):
    """No authenticated identity and bypass mode is disabled."""

    pass


class NotFound(PatentVaultError):
    """Requested resource was not found."""

    def __init__(self, entity: str, key: str) -> None:
        self.entity = entity
        self.key = key
        super().__init__(f"{entity} not found: {key}")


class ValidationError(PatentVaultError):
    """Validation failed for input data."""

    pass


class DuplicateRoleError(PatentVaultError):
    """Role with the same name (case-insensitive) already exists."""

    pass


class ProtectedRoleError(PatentVaultError):
    """Built-in roles cannot be renamed or deleted."""

    pass


class RoleInUseError(PatentVaultError):
    """Role is still referenced by access rules."""

    pass


class RenameMigrationFailure(PatentVaultError):
    """Role rename failed part way; completed steps were rolled back."""

    pass


class LookupFailure(PatentVaultError):
    """Rule or role store could not be queried."""

    pass


class LogWriteFailure(PatentVaultError):
    """Action log entry could not be persisted."""

    pass
