"""HTML rendering of the Status Page."""

from __future__ import annotations

from html import escape

from .state import PageState

CARDS = (
    ("📚 Documentation", "Learn about Seyali features and API"),
    ("📊 Dashboard", "Access your dashboard"),
    ("⚙️ Settings", "Configure your application"),
    ("💬 Support", "Get help from our team"),
)

PAGE_TEMPLATE = """<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>Seyali - Home</title>
  <meta name="description" content="Seyali application">
  <link rel="icon" href="/favicon.ico">
</head>
<body>
  <main class="main">
    <h1 class="title">Welcome to <span class="highlight">Seyali</span></h1>

    <div class="status">
      <h3>System Status</h3>
{status_block}
    </div>

    <div class="grid">
{cards}
    </div>
  </main>

  <footer class="footer">
    <p>Powered by Seyali © 2024</p>
  </footer>
</body>
</html>
"""


def render_status_block(state: PageState, api_url: str) -> str:
    lines = [f'      <p id="connection"><strong>Backend:</strong> {escape(state.connection.label)}</p>']
    if state.message:
        lines.append(f'      <p id="message"><strong>Message:</strong> {escape(state.message)}</p>')
    if state.status is not None:
        lines.extend(
            [
                '      <div id="backend-status" style="margin-top: 10px; font-size: 14px;">',
                f"        <p>Backend: {escape(state.status.backend)}</p>",
                f"        <p>Database: {escape(state.status.database)}</p>",
                f"        <p>Redis: {escape(state.status.redis)}</p>",
                "      </div>",
            ]
        )
    lines.append(
        f'      <p id="api-url" style="margin-top: 10px; font-size: 12px; color: #666;">API URL: {escape(api_url)}</p>'
    )
    return "\n".join(lines)


def render_cards() -> str:
    return "\n".join(
        f'      <div class="card">\n        <h2>{escape(title)}</h2>\n        <p>{escape(text)}</p>\n      </div>'
        for title, text in CARDS
    )


def render_home(state: PageState, api_url: str) -> str:
    return PAGE_TEMPLATE.format(status_block=render_status_block(state, api_url), cards=render_cards())
