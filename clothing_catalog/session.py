# clothing_catalog/session.py
"""
Add/Edit workflow over a single draft.

    CLOSED --open_new()--------> OPEN_NEW
    CLOSED --open_existing(p)--> OPEN_EXISTING
    OPEN_* --submit()----------> SUBMITTING --saved----------> CLOSED
                                            --rejected/failed-> OPEN_* (draft kept)
    any    --cancel()----------> CLOSED

Whether a save creates or replaces a product depends only on the draft type:
NewDraft goes to POST /products, ExistingDraft to PUT /products/{id}.
"""
import logging
from enum import Enum
from typing import Any, Dict, Optional, Protocol

from .errors import SessionBusyError, SessionClosedError, TransportError, ValidationError
from .models import Draft, DraftFields, ExistingDraft, Identifier, NewDraft, Product
from .notices import NoticeBoard, NoticeKind
from .store import CatalogStore
from .validation import cleaned_payload, ensure_valid

logger = logging.getLogger(__name__)

SAVED_MESSAGE = "Product updated successfully!"
SAVE_FAILED_MESSAGE = "Error updating product"


class CollectionWriter(Protocol):
    async def create_product(self, payload: Dict[str, Any]) -> Any: ...

    async def replace_product(self, product_id: Identifier, payload: Dict[str, Any]) -> Any: ...


class SessionState(str, Enum):
    CLOSED = "closed"
    OPEN_NEW = "open-new"
    OPEN_EXISTING = "open-existing"
    SUBMITTING = "submitting"


class SubmitOutcome(str, Enum):
    SAVED = "saved"
    REJECTED = "rejected"
    FAILED = "failed"
    BUSY = "busy"


class EditSession:
    def __init__(self, store: CatalogStore, client: CollectionWriter, notices: Optional[NoticeBoard] = None):
        self.store = store
        self.client = client
        self.notices = notices if notices is not None else NoticeBoard()
        self._draft: Optional[Draft] = None
        self._in_flight: Optional[Draft] = None

    @property
    def draft(self) -> Optional[Draft]:
        return self._draft

    @property
    def state(self) -> SessionState:
        if self._in_flight is not None and self._in_flight is self._draft:
            return SessionState.SUBMITTING
        if isinstance(self._draft, ExistingDraft):
            return SessionState.OPEN_EXISTING
        if isinstance(self._draft, NewDraft):
            return SessionState.OPEN_NEW
        return SessionState.CLOSED

    def open_new(self) -> NewDraft:
        self._ensure_not_submitting()
        self._draft = NewDraft()
        return self._draft

    def open_existing(self, product: Product) -> ExistingDraft:
        self._ensure_not_submitting()
        if product.id is None:
            raise ValueError("cannot edit a product that has no id")
        # fields are copied, edits never reach the store's Product
        self._draft = ExistingDraft(id=product.id, fields=DraftFields.from_product(product))
        return self._draft

    def update(self, **changes: Any) -> DraftFields:
        if self._draft is None:
            raise SessionClosedError("no product is being edited")
        self._ensure_not_submitting()
        unknown = set(changes) - set(DraftFields.model_fields)
        if unknown:
            raise ValueError(f"unknown draft fields: {', '.join(sorted(unknown))}")
        self._draft.fields = DraftFields.model_validate({**self._draft.fields.model_dump(), **changes})
        return self._draft.fields

    def cancel(self) -> None:
        # an in-flight save is not aborted, only forgotten
        self._draft = None

    async def submit(self) -> SubmitOutcome:
        draft = self._draft
        if draft is None:
            raise SessionClosedError("no product is being edited")
        if self.state is SessionState.SUBMITTING:
            logger.warning("Save already in progress, ignoring submit")
            return SubmitOutcome.BUSY

        try:
            ensure_valid(draft.fields)
        except ValidationError as e:
            self.notices.post(e.reason, NoticeKind.ERROR)
            return SubmitOutcome.REJECTED

        # stays SUBMITTING until the post-save refresh has landed
        self._in_flight = draft
        try:
            try:
                await self._save(draft)
            except TransportError as e:
                logger.error("Error updating product: %s", e)
                self.notices.post(SAVE_FAILED_MESSAGE, NoticeKind.ERROR)
                return SubmitOutcome.FAILED

            self.notices.post(SAVED_MESSAGE, NoticeKind.SUCCESS)
            await self.store.refresh_products()
            if self._draft is draft:
                self._draft = None
            return SubmitOutcome.SAVED
        finally:
            if self._in_flight is draft:
                self._in_flight = None

    async def _save(self, draft: Draft) -> Any:
        payload = cleaned_payload(draft.fields)
        if isinstance(draft, ExistingDraft):
            return await self.client.replace_product(draft.id, payload)
        if isinstance(draft, NewDraft):
            return await self.client.create_product(payload)
        raise TypeError(f"unsupported draft type: {type(draft).__name__}")

    def _ensure_not_submitting(self) -> None:
        if self.state is SessionState.SUBMITTING:
            raise SessionBusyError("a save is in progress")
