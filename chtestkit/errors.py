"""Error codes and the exception hierarchy used by the client."""

from __future__ import annotations

from dataclasses import dataclass
from enum import IntEnum
from typing import Optional


class ErrorCodes(IntEnum):
    """Server error codes the client knows by name."""

    CHECKSUM_DOESNT_MATCH = 40
    CANNOT_PARSE_DATETIME = 41
    UNKNOWN_FUNCTION = 46
    UNKNOWN_IDENTIFIER = 47
    TABLE_ALREADY_EXISTS = 57
    UNKNOWN_TABLE = 60
    SYNTAX_ERROR = 62
    UNKNOWN_DATABASE = 81
    DATABASE_ALREADY_EXISTS = 82
    UNKNOWN_PACKET_FROM_CLIENT = 99
    UNEXPECTED_PACKET_FROM_CLIENT = 101
    RECEIVED_DATA_FOR_WRONG_QUERY_ID = 103
    ENGINE_REQUIRED = 119
    READONLY = 164
    UNKNOWN_USER = 192
    WRONG_PASSWORD = 193
    REQUIRED_PASSWORD = 194
    IP_ADDRESS_NOT_ALLOWED = 195
    LIMIT_EXCEEDED = 290
    UNKNOWN_DATABASE_ENGINE = 336
    UNKNOWN_EXCEPTION = 1002


class Error(RuntimeError):
    """Base class of every error raised by the package."""


class ValidationError(Error):
    """Invalid user input, such as bad column types or arguments."""


class ProtocolError(Error):
    """I/O, serialization or checksum failures."""


class UnimplementedError(Error):
    """A feature that is not supported."""


class InternalAssertionError(Error):
    """An internal consistency check failed."""


class OpenSSLError(Error):
    """A TLS layer failure."""


class LZ4Error(Error):
    """A compression failure."""


@dataclass
class ServerExceptionInfo:
    """Exception details as reported by the server."""

    code: int = 0
    name: str = ""
    display_text: str = ""
    stack_trace: str = ""
    nested: Optional["ServerExceptionInfo"] = None


class ServerException(Error):
    """An exception received from the server."""

    def __init__(self, exception: ServerExceptionInfo) -> None:
        super().__init__(exception.display_text)
        self._exception = exception

    @property
    def code(self) -> int:
        return self._exception.code

    @property
    def exception(self) -> ServerExceptionInfo:
        return self._exception

    def __str__(self) -> str:
        return self._exception.display_text


ServerError = ServerException