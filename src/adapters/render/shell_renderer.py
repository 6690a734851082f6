"""Shell renderers for the front-end bundle.

The marketing pages are rendered by the client bundle. The server only
injects fallback markup into the root element.
"""

import html


class NoScriptShellRenderer:
    """Injects a <noscript> notice; the client bundle renders the page."""

    def __init__(self, site_name: str = "SecureMDM") -> None:
        self.site_name = site_name

    def render(self, location: str) -> str:
        return (
            "<noscript>"
            f"<p>JavaScript is required to view {html.escape(self.site_name)} "
            f"({html.escape(location)}).</p>"
            "</noscript>"
        )
