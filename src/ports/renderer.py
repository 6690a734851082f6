from typing import Protocol


class ShellRendererPort(Protocol):
    def render(self, location: str) -> str:
        """Render markup for the page at `location`, injected into the root element."""
        ...
