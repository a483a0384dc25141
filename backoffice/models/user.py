"""
User Model - back-office account as listed for role management
"""

from dataclasses import dataclass
from datetime import datetime
from typing import Any, Dict, Optional, Tuple

from backoffice.utils.formatting import iso_or_none
from .enums import UserStatus


@dataclass(frozen=True)
class User:
    id: str
    email: str
    username: str
    first_name: str
    last_name: str
    status: UserStatus
    roles: Tuple[str, ...]
    last_login_at: Optional[datetime]
    created_at: Optional[datetime]
    updated_at: Optional[datetime]

    def __repr__(self):
        return f'<User {self.username or self.id} {self.status.value}>'

    @property
    def full_name(self) -> str:
        return f'{self.first_name} {self.last_name}'.strip()

    @property
    def is_active(self) -> bool:
        return self.status == UserStatus.ACTIVE

    @property
    def is_locked(self) -> bool:
        return self.status == UserStatus.LOCKED

    def has_role(self, role: str) -> bool:
        return role in self.roles

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary"""
        return {
            'id': self.id,
            'email': self.email,
            'username': self.username,
            'firstName': self.first_name,
            'lastName': self.last_name,
            'fullName': self.full_name,
            'status': self.status.value,
            'roles': list(self.roles),
            'lastLoginAt': iso_or_none(self.last_login_at),
            'createdAt': iso_or_none(self.created_at),
            'updatedAt': iso_or_none(self.updated_at),
            'isActive': self.is_active,
            'isLocked': self.is_locked
        }
