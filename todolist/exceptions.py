"""Application errors raised below the HTTP layer.

Routes and the handlers registered in ``main.py`` translate these into
responses; services never build HTTP errors themselves.
"""

from typing import Any, Dict, Optional


class TodoListError(Exception):
    """Base class for todolist errors.

    ``message`` is safe to return to the client, ``context`` is for logs only.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class TaskValidationError(TodoListError, ValueError):
    """A task field failed validation; nothing was persisted."""

    def __init__(
        self,
        field: str,
        message: str,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field

    def as_detail(self) -> Dict[str, str]:
        return {"field": self.field, "message": self.message}
