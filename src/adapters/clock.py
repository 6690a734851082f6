from datetime import UTC, datetime


class SystemClock:
    """Wall clock used in production; tests inject a fixed one."""

    def now(self) -> datetime:
        return datetime.now(UTC)
