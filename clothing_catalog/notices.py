# clothing_catalog/notices.py
import asyncio
from enum import Enum
from typing import Optional


class NoticeKind(str, Enum):
    SUCCESS = "success"
    ERROR = "error"


class NoticeBoard:
    """The one status message shown to the user, cleared after `clear_delay` seconds.

    Posting a new message cancels the pending clear of the previous one, so an
    old timer can never wipe a newer message.
    """

    def __init__(self, clear_delay: float = 3.0):
        self.clear_delay = clear_delay
        self.message: str = ""
        self.kind: Optional[NoticeKind] = None
        self._timer: Optional[asyncio.TimerHandle] = None

    def post(self, message: str, kind: NoticeKind = NoticeKind.SUCCESS) -> None:
        self._cancel_timer()
        self.message = message
        self.kind = kind
        loop = asyncio.get_running_loop()
        self._timer = loop.call_later(self.clear_delay, self._expire)

    def clear(self) -> None:
        self._cancel_timer()
        self.message = ""
        self.kind = None

    @property
    def pending(self) -> bool:
        return self._timer is not None

    def _expire(self) -> None:
        self._timer = None
        self.message = ""
        self.kind = None

    def _cancel_timer(self) -> None:
        if self._timer is not None:
            self._timer.cancel()
            self._timer = None
