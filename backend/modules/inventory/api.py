from __future__ import annotations
from typing import List, Optional

from fastapi import APIRouter, Body, Depends, Path

from common.deps import get_inventory_repo
from .schemas import InventoryItemIn, InventoryItemOut, ItemCreatedOut, MessageOut, ErrorOut
from .service import InventoryService

router = APIRouter()

NOT_FOUND = {404: {"model": ErrorOut}}
STORE_ERROR = {500: {"model": ErrorOut}}


def _svc(repo=Depends(get_inventory_repo)) -> InventoryService:
    return InventoryService(repo)


@router.get("", response_model=List[InventoryItemOut], responses=STORE_ERROR)
def list_inventory(svc: InventoryService = Depends(_svc)):
    """All inventory items, sorted by name"""
    return svc.list_items()


@router.get("/{item_id}", response_model=InventoryItemOut, responses={**NOT_FOUND, **STORE_ERROR})
def get_inventory_item(
        item_id: str = Path(..., title="Inventory item ID"),
        svc: InventoryService = Depends(_svc),
):
    return svc.get_item(item_id)


@router.post("", response_model=ItemCreatedOut, responses={400: {"model": ErrorOut}, **STORE_ERROR})
def add_inventory_item(
        body: Optional[InventoryItemIn] = Body(None),
        svc: InventoryService = Depends(_svc),
):
    """
    # Add a new item. `name` and `quantity` are required; price defaults to 0,
    # category and supplier to an empty string.
    """
    return svc.create_item(body or InventoryItemIn())


@router.put("/{item_id}", response_model=MessageOut,
            responses={400: {"model": ErrorOut}, **NOT_FOUND, **STORE_ERROR})
def update_inventory_item(
        item_id: str = Path(..., title="Inventory item ID"),
        body: Optional[InventoryItemIn] = Body(None),
        svc: InventoryService = Depends(_svc),
):
    """
    # Overwrite every field of an existing item.
    """
    return svc.update_item(item_id, body or InventoryItemIn())


@router.delete("/{item_id}", response_model=MessageOut, responses={**NOT_FOUND, **STORE_ERROR})
def delete_inventory_item(
        item_id: str = Path(..., title="Inventory item ID"),
        svc: InventoryService = Depends(_svc),
):
    return svc.delete_item(item_id)
