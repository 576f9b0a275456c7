"""
Form action resolution

HTML forms can only submit GET and POST, so the page sends the intended
verb in a hidden ``action`` field and the server dispatches on that.
"""

from enum import Enum
from typing import Dict, Optional

from .errors import InvalidActionError


class Action(str, Enum):
    LIST = "list"
    INSERT = "insert"
    DELETE = "delete"
    UNSUPPORTED = "unsupported"


# PUT is a recognised verb but has no handler; it answers 405.
_ACTIONS: Dict[str, Action] = {
    "GET": Action.LIST,
    "POST": Action.INSERT,
    "PUT": Action.UNSUPPORTED,
    "DELETE": Action.DELETE,
}


def resolve_action(raw: Optional[str]) -> Action:
    """
    Map the ``action`` form field to an Action.

    Args:
        raw: Field value, or None when the form did not send one

    Returns:
        The resolved Action (LIST when the field is absent)

    Raises:
        InvalidActionError: If the value is not an exact, upper-case verb
    """
    if raw is None:
        return Action.LIST
    try:
        return _ACTIONS[raw]
    except KeyError:
        raise InvalidActionError() from None
