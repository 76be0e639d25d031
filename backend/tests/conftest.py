"""Shared fixtures: an app wired to an in-memory repository.

The fake mirrors InventoryRepo's contract (name-sorted listing, store-assigned
ids, bool results for update/delete) so route tests never need PostgreSQL.
"""

from typing import Any, Dict, List, Optional

import pytest
from fastapi.testclient import TestClient

from app import create_app
from common.deps import get_inventory_repo
from core.config import Settings
from core.errors import StoreError


class FakeInventoryRepo:
    def __init__(self):
        self.rows: Dict[int, Dict[str, Any]] = {}
        self.next_id = 1
        self.fail = False

    def _check(self):
        if self.fail:
            raise StoreError()

    def list_items(self) -> List[Dict[str, Any]]:
        self._check()
        return [dict(r) for r in sorted(self.rows.values(), key=lambda r: r["name"])]

    def get_item(self, item_id: int) -> Optional[Dict[str, Any]]:
        self._check()
        row = self.rows.get(item_id)
        return dict(row) if row else None

    def create_item(self, record: Dict[str, Any]) -> int:
        self._check()
        item_id = self.next_id
        self.next_id += 1
        self.rows[item_id] = {"id": item_id, **record}
        return item_id

    def update_item(self, item_id: int, record: Dict[str, Any]) -> bool:
        self._check()
        if item_id not in self.rows:
            return False
        self.rows[item_id] = {"id": item_id, **record}
        return True

    def delete_item(self, item_id: int) -> bool:
        self._check()
        return self.rows.pop(item_id, None) is not None


@pytest.fixture
def settings():
    return Settings(DB_INIT_SCHEMA=False, EXPORT_CURRENCY_SYMBOL="$")


@pytest.fixture
def repo():
    return FakeInventoryRepo()


@pytest.fixture
def app(settings, repo):
    app = create_app(settings)
    app.dependency_overrides[get_inventory_repo] = lambda: repo
    return app


@pytest.fixture
def client(app):
    return TestClient(app)
