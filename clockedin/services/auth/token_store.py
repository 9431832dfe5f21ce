from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
import logging
from typing import Iterator

from google.oauth2.credentials import Credentials

from clockedin.services.meetings.stats_cache import StatsCache

logger = logging.getLogger(__name__)


@dataclass
class StoredCredential:
    principal_id: str
    credentials: Credentials
    issued_at: datetime = field(default_factory=lambda: datetime.now(tz=timezone.utc))

    @property
    def expires_at(self) -> datetime | None:
        # google-auth reports expiry as naive UTC
        expiry = self.credentials.expiry
        if expiry is None:
            return None
        if expiry.tzinfo is None:
            expiry = expiry.replace(tzinfo=timezone.utc)
        return expiry

    def is_expired(self, now: datetime) -> bool:
        expires_at = self.expires_at
        return expires_at is not None and expires_at <= now


class TokenStore:
    """In-memory OAuth credentials keyed by principal id.

    Removing a credential always invalidates the principal's cached stats.
    """

    def __init__(self, cache: StatsCache) -> None:
        self._cache = cache
        self._records: dict[str, StoredCredential] = {}

    def put(self, principal_id: str, credentials: Credentials) -> StoredCredential:
        record = StoredCredential(principal_id=principal_id, credentials=credentials)
        self._records[principal_id] = record
        return record

    def get(self, principal_id: str) -> StoredCredential | None:
        return self._records.get(principal_id)

    def remove(self, principal_id: str) -> None:
        self._records.pop(principal_id, None)
        self._cache.invalidate(principal_id)

    def sweep(self, now: datetime | None = None) -> list[str]:
        """Drop every credential whose provider expiry has passed; return the removed ids."""
        now = now or datetime.now(tz=timezone.utc)
        removed: list[str] = []
        for principal_id, record in list(self._records.items()):
            try:
                if record.is_expired(now):
                    self.remove(principal_id)
                    removed.append(principal_id)
            except Exception as exc:  # noqa: BLE001
                logger.error("Token sweep failed for principal=%s: %s", principal_id, exc, exc_info=True)
                continue

        if removed:
            logger.info("Token sweep removed %d expired credentials", len(removed))
        return removed

    def clear(self) -> None:
        for principal_id in list(self._records):
            self.remove(principal_id)

    def __iter__(self) -> Iterator[str]:
        return iter(list(self._records))

    def __len__(self) -> int:
        return len(self._records)
