"""Application ports - interfaces for external adapters."""

from patentvault.application.ports.audit_logger import AuditLogger
from patentvault.application.ports.authentication_provider import AuthenticationProvider
from patentvault.application.ports.ip_lookup import IpLookup
from patentvault.application.ports.notifier import Notifier
from patentvault.application.ports.resolvers import PermissionResolver, RoleResolver
from patentvault.application.ports.text_generator import TextGenerator
from patentvault.application.ports.unit_of_work import UnitOfWork, UnitOfWorkFactory

__all__ = [
    "AuditLogger",
    "AuthenticationProvider",
    "IpLookup",
    "Notifier",
    "PermissionResolver",
    "RoleResolver",
    "TextGenerator",
    "UnitOfWork",
    "UnitOfWorkFactory",
]
