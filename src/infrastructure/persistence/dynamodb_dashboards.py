"""
Infrastructure adapter: DynamoDB → IDashboardRepository.

Table layout:
    partition key  owner_id      (S)
    sort key       dashboard_id  (S)
    attributes     name (S), tickers (L of S), created_at (N), updated_at (N)

boto3 hands numbers back as Decimal; they are converted to int on the way out.
"""

import logging
from typing import Any, Optional

from boto3.dynamodb.conditions import Key

from src.domain.entities.dashboard import Dashboard
from src.domain.ports.dashboard_repository_port import IDashboardRepository

logger = logging.getLogger(__name__)


class DynamoDBDashboardRepository(IDashboardRepository):
    def __init__(self, table: Any) -> None:
        """
        Args:
            table: boto3 DynamoDB Table resource (see persistence.dynamodb.dynamodb_table).
        """
        self._table = table

    def list_for_owner(self, owner_id: str) -> list[Dashboard]:
        items: list[dict] = []
        kwargs: dict = {"KeyConditionExpression": Key("owner_id").eq(owner_id)}
        while True:
            response = self._table.query(**kwargs)
            items.extend(response.get("Items", []))
            last_key = response.get("LastEvaluatedKey")
            if not last_key:
                break
            kwargs["ExclusiveStartKey"] = last_key
        return [self._from_item(item) for item in items]

    def get(self, owner_id: str, dashboard_id: str) -> Optional[Dashboard]:
        response = self._table.get_item(
            Key={"owner_id": owner_id, "dashboard_id": dashboard_id}
        )
        item = response.get("Item")
        return self._from_item(item) if item else None

    def save(self, dashboard: Dashboard) -> None:
        self._table.put_item(Item=self._to_item(dashboard))
        logger.debug("Saved dashboard %s (%d tickers)", dashboard.id, len(dashboard.tickers))

    def delete(self, owner_id: str, dashboard_id: str) -> bool:
        response = self._table.delete_item(
            Key={"owner_id": owner_id, "dashboard_id": dashboard_id},
            ReturnValues="ALL_OLD",
        )
        return bool(response.get("Attributes"))

    # ------------------------------------------------------------------
    # Private helpers
    # ------------------------------------------------------------------

    @staticmethod
    def _to_item(dashboard: Dashboard) -> dict:
        return {
            "owner_id": dashboard.owner_id,
            "dashboard_id": dashboard.id,
            "name": dashboard.name,
            "tickers": list(dashboard.tickers),
            "created_at": dashboard.created_at,
            "updated_at": dashboard.updated_at,
        }

    @staticmethod
    def _from_item(item: dict) -> Dashboard:
        return Dashboard(
            id=item["dashboard_id"],
            owner_id=item["owner_id"],
            name=item.get("name", ""),
            tickers=[str(t) for t in item.get("tickers", [])],
            created_at=int(item.get("created_at", 0)),
            updated_at=int(item.get("updated_at", 0)),
        )
