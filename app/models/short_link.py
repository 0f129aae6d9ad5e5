from datetime import datetime, timedelta, timezone
from typing import Optional

from pydantic import BaseModel, Field


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class ShortLink(BaseModel):
    """
    A generated code together with the URL it was derived from.

    Records are immutable: click tracking, activation and expiry changes all
    return a new ShortLink. Nothing stores them; whoever holds one owns it.
    """

    id: Optional[str] = None
    original_url: str
    short_code: str
    algorithm: Optional[str] = None
    created_by: Optional[str] = None
    created_at: datetime = Field(default_factory=_utcnow)
    expires_at: Optional[datetime] = None
    click_count: int = 0
    is_active: bool = True

    model_config = {"frozen": True}

    def increment_click_count(self) -> "ShortLink":
        return self.model_copy(update={"click_count": self.click_count + 1})

    def activate(self) -> "ShortLink":
        return self.model_copy(update={"is_active": True})

    def deactivate(self) -> "ShortLink":
        return self.model_copy(update={"is_active": False})

    def expires_in_days(self, days: int, now: Optional[datetime] = None) -> "ShortLink":
        # non-positive means never expires
        if days <= 0:
            return self.model_copy(update={"expires_at": None})
        now = now or _utcnow()
        return self.model_copy(update={"expires_at": now + timedelta(days=days)})

    def is_expired(self, now: Optional[datetime] = None) -> bool:
        if self.expires_at is None:
            return False
        return (now or _utcnow()) > self.expires_at

    def is_valid(self, now: Optional[datetime] = None) -> bool:
        return self.is_active and not self.is_expired(now)

    def full_short_url(self, base_url: Optional[str]) -> str:
        if base_url is None or not base_url.strip():
            return self.short_code
        if not base_url.endswith("/"):
            base_url += "/"
        return base_url + self.short_code
