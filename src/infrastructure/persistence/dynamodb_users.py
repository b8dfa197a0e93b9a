"""
Infrastructure adapter: DynamoDB → IUserRepository.

Table layout: partition key ``email`` (S); attributes user_id, password_hash,
created_at. A conditional put keeps emails unique.
"""

from typing import Any, Optional

from botocore.exceptions import ClientError

from src.domain.entities.user import User
from src.domain.exceptions import UserExistsError
from src.domain.ports.user_repository_port import IUserRepository


class DynamoDBUserRepository(IUserRepository):
    def __init__(self, table: Any) -> None:
        self._table = table

    def get_by_email(self, email: str) -> Optional[User]:
        item = self._table.get_item(Key={"email": email.lower()}).get("Item")
        if not item:
            return None
        return User(
            id=item["user_id"],
            email=item["email"],
            password_hash=item["password_hash"],
            created_at=int(item.get("created_at", 0)),
        )

    def add(self, user: User) -> None:
        try:
            self._table.put_item(
                Item={
                    "email": user.email,
                    "user_id": user.id,
                    "password_hash": user.password_hash,
                    "created_at": user.created_at,
                },
                ConditionExpression="attribute_not_exists(email)",
            )
        except ClientError as exc:
            if exc.response.get("Error", {}).get("Code") == "ConditionalCheckFailedException":
                raise UserExistsError("Email already registered") from exc
            raise
