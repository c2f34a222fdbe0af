"""User domain model."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional


@dataclass
class User:
    """Registered account owner. Email is stored lowercased."""

    user_id: str
    email: str
    password_hash: str
    created_at: Optional[datetime] = field(default=None)
