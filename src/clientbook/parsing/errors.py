"""Parse-stage errors."""

from __future__ import annotations

from clientbook.domain.errors import ClientbookError

MESSAGE_UNKNOWN_COMMAND = "Unknown command"
MESSAGE_INVALID_COMMAND_FORMAT = "Invalid command format! \n{usage}"
MESSAGE_INVALID_INDEX = "Index is not a non-zero unsigned integer."
MESSAGE_DUPLICATE_FIELDS = "Multiple values specified for the following single-valued field(s): "


class ParseError(ClientbookError):
    """Raised when command text cannot be turned into a command.

    Attributes:
        message: User-facing text, shown verbatim.
        code: Error code carried into the ServiceResult.
    """

    def __init__(self, message: str, *, code: str = "INVALID_FORMAT") -> None:
        super().__init__(message)
        self.message = message
        self.code = code


def invalid_format(usage: str) -> ParseError:
    return ParseError(MESSAGE_INVALID_COMMAND_FORMAT.format(usage=usage))
