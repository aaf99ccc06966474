"""
Server-rendered pages for the browser.

•  /                → front page explaining how to obtain and use a token
•  /view/<token>    → token details followed by every entry logged under it
"""
import html
import json
from typing import Any

from observer.schemas.entries import EntryResponse
from observer.schemas.tokens import TokenResponse


def _html_page(title: str, body: str) -> str:
    return f"""<!DOCTYPE html>
<html lang="en">
<head>
  <meta charset="utf-8">
  <title>{html.escape(title)}</title>
  <link rel="stylesheet" href="/assets/site.css">
</head>
<body>
{body}
</body>
</html>
"""


def _fmt(value: Any) -> str:
    if value is None:
        return ""
    if isinstance(value, str):
        return html.escape(value)
    if hasattr(value, "isoformat"):
        return html.escape(value.isoformat(timespec="seconds"))
    return html.escape(json.dumps(value, indent=2, sort_keys=True, default=str))


def render_front_page() -> str:
    body = """
<h1>Observer</h1>
<p>Remote logging for anything that can speak HTTP.</p>
<ol>
  <li>Create a token: <code>POST /api/token</code></li>
  <li>Log under it: <code>POST /api/entry</code> with
      <code>{"token": "&lt;token&gt;", "payload": ...}</code></li>
  <li>Read the log at <code>/view/&lt;token&gt;</code></li>
</ol>
"""
    return _html_page("Observer", body)


def render_token_page(token: TokenResponse, entries: list[EntryResponse]) -> str:
    description = token.description or "No description is set."
    rows = "\n".join(
        "<tr>"
        f"<td>{_fmt(entry.created)}</td>"
        f"<td>{_fmt(entry.type)}</td>"
        f"<td>{_fmt(entry.message)}</td>"
        f"<td><pre>{_fmt(entry.data)}</pre></td>"
        "</tr>"
        for entry in entries
    )
    if not rows:
        rows = '<tr><td colspan="4">No entries have been logged yet.</td></tr>'

    body = f"""
<h1>Token {_fmt(token.token)}</h1>
<dl>
  <dt>Description</dt><dd class="description">{_fmt(description)}</dd>
  <dt>Created</dt><dd>{_fmt(token.created)}</dd>
  <dt>Changed</dt><dd>{_fmt(token.changed)}</dd>
  <dt>Expires</dt><dd>{_fmt(token.expire) or "Never"}</dd>
</dl>
<h2>{len(entries)} entries</h2>
<table class="entries">
  <thead><tr><th>Created</th><th>Type</th><th>Message</th><th>Data</th></tr></thead>
  <tbody>
{rows}
  </tbody>
</table>
"""
    return _html_page(f"Observer - {token.token}", body)
