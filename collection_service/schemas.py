# collection_service/schemas.py
from pydantic import BaseModel, ConfigDict
from typing import Optional, Union, Dict, Any


class ProductIn(BaseModel):
    # stored as sent, like a JSON mock server; business rules live in the client,
    # only the types every reader depends on are enforced
    model_config = ConfigDict(extra="allow")

    id: Optional[Union[int, str]] = None
    code: str = ""
    name: str = ""
    importDate: str = ""
    quantity: int = 0
    categoryId: Union[int, str] = ""


def _make_product_dict(product_id: int, p: ProductIn) -> Dict[str, Any]:
    body = p.model_dump()
    body["id"] = product_id
    return body
