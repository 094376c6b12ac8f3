# clothing_catalog/models.py
from pydantic import BaseModel, ConfigDict, Field
from typing import Optional, Union, Dict, Any

Identifier = Union[int, str]

# Shown instead of a category name when a product's categoryId resolves to nothing
UNKNOWN_CATEGORY = "N/A"


class _WireModel(BaseModel):
    # camelCase on the wire, snake_case in Python
    model_config = ConfigDict(populate_by_name=True)


class Category(_WireModel):
    id: Identifier
    name: str


class Product(_WireModel):
    id: Optional[Identifier] = None
    code: str
    name: str
    import_date: str = Field(alias="importDate")
    quantity: int
    category_id: Identifier = Field(alias="categoryId")


class DraftFields(_WireModel):
    """Raw form values of a product being edited.

    Values stay loose (quantity may still be text) until validation accepts them.
    """
    code: str = ""
    name: str = ""
    import_date: str = Field(default="", alias="importDate")
    quantity: Union[int, str] = ""
    category_id: Union[int, str] = Field(default="", alias="categoryId")

    @classmethod
    def from_product(cls, product: Product) -> "DraftFields":
        return cls(
            code=product.code,
            name=product.name,
            import_date=product.import_date,
            quantity=product.quantity,
            category_id=product.category_id,
        )

    def to_payload(self) -> Dict[str, Any]:
        return self.model_dump(by_alias=True)


class NewDraft(BaseModel):
    fields: DraftFields = Field(default_factory=DraftFields)


class ExistingDraft(BaseModel):
    id: Identifier
    fields: DraftFields


Draft = Union[NewDraft, ExistingDraft]


def same_id(a: Optional[Identifier], b: Optional[Identifier]) -> bool:
    if a is None or b is None:
        return False
    return str(a) == str(b)
