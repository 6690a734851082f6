from datetime import datetime
from typing import Protocol


class ClockPort(Protocol):
    """Source of created_at timestamps for stored submissions."""

    def now(self) -> datetime:
        """Timezone-aware UTC now."""
        ...
