"""
Domain entity for a registered account.
Zero external dependencies — pure Python dataclass only.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class User:
    id: str
    email: str
    password_hash: str
    created_at: int
