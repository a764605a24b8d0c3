from dataclasses import dataclass
from datetime import datetime
from typing import Any

from sharelinks.models.share_record_model import AccessMode
from sharelinks.utils.helpers import isoformat_utc


@dataclass(frozen=True)
class ShareLink:
    """Result of creating (or listing) a share link."""

    # fmt: off
    url: str                                        # Fully qualified share URL (<base url>/s/<token>)
    token: str                                      # Raw share token embedded in the URL
    document_id: str                                # Shared document
    created_at: datetime                            # Creation instant of the share record
    expires_at: datetime | None = None              # Expiry instant, None if the link never expires
    access_mode: AccessMode = AccessMode.READ_ONLY  # Access granted by the link
    # fmt: on

    def to_dict(self) -> dict[str, Any]:
        return {
            'url': self.url,
            'token': self.token,
            'expiresAt': isoformat_utc(self.expires_at),
        }
