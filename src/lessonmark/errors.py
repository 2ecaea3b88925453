"""Exception classes for lessonmark.

Parsing, inline tokenizing and code lexing never raise: malformed input
falls back to literal text. These exceptions cover the surfaces around
the tree (rendering and serialization).
"""

from __future__ import annotations


class LessonmarkError(Exception):
    """Base exception for all lessonmark errors.

    Subclass this for specific error categories.
    """

    pass


class RenderError(LessonmarkError):
    """Error during HTML rendering.

    Raised when the renderer is handed something that is not an AST node.
    """

    pass


class SerializationError(LessonmarkError):
    """Error while rebuilding an AST from serialized data.

    Raised when a payload is not an object, carries an unknown or missing
    ``_type`` discriminator, or has a location or token missing a field.
    """

    def __init__(self, message: str, type_name: str | None = None) -> None:
        """Initialize serialization error.

        Args:
            message: Description of the error
            type_name: The offending ``_type`` value (optional)
        """
        self.type_name = type_name
        if type_name is not None:
            message = f"{message}: {type_name!r}"
        super().__init__(message)
