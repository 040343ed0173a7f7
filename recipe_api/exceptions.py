"""
Recipe API errors.

Handlers and the data layer raise these; the app turns them into JSON
responses carrying ``status_code``.
"""


class RecipeAPIError(Exception):
    status_code = 500

    def __init__(self, message: str):
        self.message = message
        super().__init__(message)

    def as_dict(self) -> dict:
        return {"detail": self.message}


class NotFoundError(RecipeAPIError):
    """Requested resource (e.g. a category) does not exist."""

    status_code = 404


class ValidationError(RecipeAPIError):
    """Request body is missing fields or references unknown data."""

    status_code = 400
