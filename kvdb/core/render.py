"""
HTML rendering for the store page
"""
from html import escape
from typing import Iterable, Optional, Tuple

from .actions import Action

_BUTTONS = {
    Action.INSERT: ("Insert", "POST"),
    Action.DELETE: ("Delete", "DELETE"),
}


def render_row(action: Action, key: Optional[str] = None, value: Optional[str] = None) -> str:
    """
    Render one table row wrapping its own form.

    A row with a key shows it as text and submits it in a hidden input;
    a row without one gets empty text inputs.
    """
    button, verb = _BUTTONS[action]

    if key is not None:
        key_field = f'<input type="hidden" name="key" value="{escape(key)}">{escape(key)}'
    else:
        key_field = '<input type="text" name="key">'

    if value is not None:
        value_field = escape(value)
    else:
        value_field = '<input type="text" name="value">'

    cells = "".join([
        f"<td>{key_field}</td>",
        f"<td>{value_field}</td>",
        f'<td><input type="submit" value="{button}"></td>',
    ])
    return (
        f'<tr><form method="POST">{cells}'
        f'<input type="hidden" name="action" value="{verb}"></form></tr>'
    )


def render_page(entries: Iterable[Tuple[str, str]]) -> str:
    """Full page: a delete row per entry followed by a blank insert row."""
    rows = "".join(render_row(Action.DELETE, key, value) for key, value in entries)
    return f"<html><body><table>{rows}{render_row(Action.INSERT)}</table></body></html>"
