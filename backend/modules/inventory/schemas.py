from pydantic import BaseModel
from typing import Any, Dict, Optional

# Inputs
class InventoryItemIn(BaseModel):
    """Body for POST/PUT. Everything is optional here; the service decides what is required."""
    name: Optional[str] = None
    quantity: Optional[int] = None
    price: Optional[float] = None
    category: Optional[str] = None
    supplier: Optional[str] = None

    def to_record(self) -> Dict[str, Any]:
        # Defaults for the optional columns are applied here, never in the repo
        return {
            "name": self.name,
            "quantity": self.quantity,
            "price": self.price or 0,
            "category": self.category or "",
            "supplier": self.supplier or "",
        }

# Outputs
class InventoryItemOut(BaseModel):
    id: int
    name: str
    quantity: int
    price: float = 0
    category: str = ""
    supplier: str = ""

class MessageOut(BaseModel):
    message: str

class ItemCreatedOut(MessageOut):
    id: int

class ErrorOut(BaseModel):
    error: str
