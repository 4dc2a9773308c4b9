"""Domain entity representing an entry of the append-only audit ledger."""

from dataclasses import dataclass
from datetime import datetime
from enum import Enum


class AuditTable(str, Enum):
    """Logical entity types whose writes are recorded in the ledger."""

    MEMBER_PLAN = "members_plans"
    MEMBER = "members"
    USER = "users"
    ADDRESS = "addresses"


class AuditAction(str, Enum):
    """Kinds of mutation recorded in the ledger."""

    INSERT = "insert"
    UPDATE = "update"


AUDIT_DESCRIPTIONS: dict[AuditAction, str] = {
    AuditAction.INSERT: "Registro incluído por usuário",
    AuditAction.UPDATE: "Registro atualizado por usuário",
}


@dataclass(frozen=True)
class AuditLog:
    """A single insert or update performed by an actor."""

    id: int | None
    table_name: str
    action: str
    description: str
    reference_id: int
    user_id: int | None
    created_at: datetime | None


__all__ = ["AUDIT_DESCRIPTIONS", "AuditAction", "AuditLog", "AuditTable"]
