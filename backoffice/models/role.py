"""
Role Model
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from backoffice.utils.formatting import iso_or_none


@dataclass(frozen=True)
class Permission:
    id: str
    name: str
    description: Optional[str]
    module: str
    action: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'module': self.module,
            'action': self.action
        }


@dataclass(frozen=True)
class Role:
    """Named permission set; system roles are managed by the server only"""
    id: str
    name: str
    description: Optional[str]
    is_active: bool
    is_system: bool
    permissions: Tuple[Permission, ...]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    def __repr__(self):
        return f'<Role {self.name or self.id}>'

    @property
    def permission_count(self) -> int:
        return len(self.permissions)

    @property
    def can_edit(self) -> bool:
        return not self.is_system

    @property
    def can_delete(self) -> bool:
        return not self.is_system

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'name': self.name,
            'description': self.description,
            'isActive': self.is_active,
            'isSystem': self.is_system,
            'permissions': [permission.to_dict() for permission in self.permissions],
            'permissionCount': self.permission_count,
            'createdAt': iso_or_none(self.created_at),
            'updatedAt': iso_or_none(self.updated_at),
            'canEdit': self.can_edit,
            'canDelete': self.can_delete
        }
