from __future__ import annotations
from typing import Any, Dict, List, Optional
import logging

import psycopg2

from common.deps import db_conn
from common.utils import cursor_to_dict, cursor_to_dicts
from core.config import Settings
from core.errors import StoreError

logger = logging.getLogger(__name__)

ITEM_COLUMNS = "id, name, quantity, price, category, supplier"


class InventoryRepo:
    """
    Record store accessor for the single `inventory` table.
    Every method opens its own connection, runs exactly one statement and
    closes the connection again (see common.deps.db_conn).
    """

    def __init__(self, settings: Settings):
        self.settings = settings

    # -------- Queries --------
    def list_items(self) -> List[Dict[str, Any]]:
        """All items ordered by name ascending."""
        try:
            with db_conn(self.settings) as conn:
                with conn.cursor() as cur:
                    cur.execute(f"SELECT {ITEM_COLUMNS} FROM inventory ORDER BY name")
                    return cursor_to_dicts(cur)
        except psycopg2.Error as e:
            logger.error(f"list_items failed: {e}")
            raise StoreError() from e

    def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        try:
            with db_conn(self.settings) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        f"SELECT {ITEM_COLUMNS} FROM inventory WHERE id = %s",
                        (item_id,),
                    )
                    return cursor_to_dict(cur)
        except psycopg2.Error as e:
            logger.error(f"get_item({item_id}) failed: {e}")
            raise StoreError() from e

    # -------- Mutations --------
    def create_item(self, record: Dict[str, Any]) -> int:
        """Insert a row and return the id the store assigned to it."""
        try:
            with db_conn(self.settings) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        INSERT INTO inventory (name, quantity, price, category, supplier)
                        VALUES (%s, %s, %s, %s, %s)
                        RETURNING id
                        """,
                        (
                            record["name"], record["quantity"], record["price"],
                            record["category"], record["supplier"],
                        ),
                    )
                    return cur.fetchone()[0]
        except psycopg2.Error as e:
            logger.error(f"create_item failed: {e}")
            raise StoreError() from e

    def update_item(self, item_id: int, record: Dict[str, Any]) -> bool:
        """
        Full overwrite of every column. Returns False when no row has this id.
        """
        try:
            with db_conn(self.settings) as conn:
                with conn.cursor() as cur:
                    cur.execute(
                        """
                        UPDATE inventory
                        SET name = %s, quantity = %s, price = %s, category = %s, supplier = %s
                        WHERE id = %s
                        """,
                        (
                            record["name"], record["quantity"], record["price"],
                            record["category"], record["supplier"], item_id,
                        ),
                    )
                    return cur.rowcount > 0
        except psycopg2.Error as e:
            logger.error(f"update_item({item_id}) failed: {e}")
            raise StoreError() from e

    def delete_item(self, item_id: int) -> bool:
        try:
            with db_conn(self.settings) as conn:
                with conn.cursor() as cur:
                    cur.execute("DELETE FROM inventory WHERE id = %s", (item_id,))
                    return cur.rowcount > 0
        except psycopg2.Error as e:
            logger.error(f"delete_item({item_id}) failed: {e}")
            raise StoreError() from e
