from __future__ import annotations
from typing import Any, Dict, List, Union
import logging
import re

from core.errors import NotFoundError, ValidationError
from .repo import InventoryRepo
from .schemas import InventoryItemIn

logger = logging.getLogger(__name__)

# SERIAL ids live in a PostgreSQL INTEGER column
MAX_ITEM_ID = 2**31 - 1


class InventoryService:
    def __init__(self, repo: InventoryRepo):
        self.repo = repo

    @staticmethod
    def validate(body: InventoryItemIn) -> Dict[str, Any]:
        """
        Name must be a non-empty string and quantity must be present.
        Quantity 0 and negative numbers are accepted as-is.
        """
        if not body.name or body.quantity is None:
            raise ValidationError("Name and quantity are required")
        return body.to_record()

    @staticmethod
    def parse_id(raw: Union[int, str]) -> int:
        """Ids that are not a positive INTEGER can never match a row."""
        if not re.fullmatch(r"[0-9]+", str(raw)):
            raise NotFoundError("Item not found")
        item_id = int(raw)
        if not 0 < item_id <= MAX_ITEM_ID:
            raise NotFoundError("Item not found")
        return item_id

    # ---- Queries ----
    def list_items(self) -> List[Dict[str, Any]]:
        return self.repo.list_items()

    def get_item(self, raw_id: Union[int, str]) -> Dict[str, Any]:
        item = self.repo.get_item(self.parse_id(raw_id))
        if item is None:
            raise NotFoundError("Item not found")
        return item

    # ---- Create/Update/Delete ----
    def create_item(self, body: InventoryItemIn) -> Dict[str, Any]:
        record = self.validate(body)
        item_id = self.repo.create_item(record)
        logger.info(f"Created inventory item {item_id} ({record['name']!r})")
        return {"message": "Item added", "id": item_id}

    def update_item(self, raw_id: Union[int, str], body: InventoryItemIn) -> Dict[str, Any]:
        # Body errors win over an unknown id
        record = self.validate(body)
        item_id = self.parse_id(raw_id)
        if not self.repo.update_item(item_id, record):
            raise NotFoundError("Item not found")
        logger.info(f"Updated inventory item {item_id}")
        return {"message": "Item updated"}

    def delete_item(self, raw_id: Union[int, str]) -> Dict[str, Any]:
        item_id = self.parse_id(raw_id)
        if not self.repo.delete_item(item_id):
            raise NotFoundError("Item not found")
        logger.info(f"Deleted inventory item {item_id}")
        return {"message": "Item deleted"}
