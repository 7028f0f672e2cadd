"""Custom exception hierarchy for the metasearch engine layer.

All package exceptions inherit from :class:`MetasearchError`, which carries
an optional ``engine_name`` so the aggregator can tell which upstream
provider (e.g. "qwant", "duckduckgo") produced the failure.

    MetasearchError  (base -- catch-all for any metasearch error)
    +-- ConfigurationError       (unknown engine name, bad settings)
    +-- EngineError              (closed taxonomy raised by engine adapters)
        +-- EmptyResultSet       (upstream explicitly reported zero results)
        +-- RequestError         (transport / network failure)
        +-- UnexpectedError      (selectors, headers, parse infrastructure)

Engine errors also keep an ordered ``context`` chain.  Every fallible
boundary (construction, header build, fetch, parse) attaches one entry
before re-raising, and the original exception is preserved as
``__cause__`` through ``raise ... from exc``.
"""

from __future__ import annotations

from enum import Enum


class MetasearchError(Exception):
    """Base exception for all metasearch errors.

    The ``__str__`` method prefixes the engine name in brackets for log
    scanning, e.g. ``[qwant] Error occurred while requesting data``.
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        engine_name: str | None = None,
    ) -> None:
        self._message = message
        self._engine_name = engine_name
        super().__init__(self._message)

    @property
    def message(self) -> str:
        return self._message

    @property
    def engine_name(self) -> str | None:
        return self._engine_name

    def __str__(self) -> str:
        if self._engine_name:
            return f"[{self._engine_name}] {self._message}"
        return self._message


class ConfigurationError(MetasearchError):
    """Raised when configuration is invalid, e.g. an unknown engine name."""

    def __init__(
        self,
        message: str = "Invalid or missing configuration",
        engine_name: str | None = None,
    ) -> None:
        super().__init__(message=message, engine_name=engine_name)


# ---------------------------------------------------------------------------
# Engine errors
# ---------------------------------------------------------------------------


class EngineErrorKind(str, Enum):  # noqa: UP042
    """Tag of the closed engine failure taxonomy."""

    EMPTY_RESULT_SET = "EMPTY_RESULT_SET"
    REQUEST_ERROR = "REQUEST_ERROR"
    UNEXPECTED_ERROR = "UNEXPECTED_ERROR"


class EngineError(MetasearchError):
    """Base for failures an engine adapter can signal to its caller.

    Callers normally branch on the concrete subclass; ``kind`` exposes the
    same information as a plain value for logging and serialization.
    """

    kind: EngineErrorKind = EngineErrorKind.UNEXPECTED_ERROR

    def __init__(
        self,
        message: str = "An unexpected error occurred while processing the data",
        engine_name: str | None = None,
        context: list[str] | tuple[str, ...] | None = None,
    ) -> None:
        super().__init__(message=message, engine_name=engine_name)
        self._context: list[str] = list(context or [])

    @property
    def context(self) -> tuple[str, ...]:
        return tuple(self._context)

    def attach(self, context: str, engine_name: str | None = None) -> EngineError:
        """Append one context entry and return ``self`` for re-raising.

        *engine_name* fills in the engine when the error was raised by
        engine-agnostic code such as the result parser.
        """
        self._context.append(context)
        if engine_name and self._engine_name is None:
            self._engine_name = engine_name
        return self

    def __str__(self) -> str:
        base = super().__str__()
        if self._context:
            return f"{base}: {' -> '.join(self._context)}"
        return base


class EmptyResultSet(EngineError):
    """Raised when the upstream engine explicitly reports no results.

    Not a provider failure: the aggregator should treat it as "this engine
    had nothing", distinct from both success and :class:`RequestError`.
    """

    kind = EngineErrorKind.EMPTY_RESULT_SET

    def __init__(
        self,
        message: str = "The upstream search engine returned an empty result set",
        engine_name: str | None = None,
        context: list[str] | tuple[str, ...] | None = None,
    ) -> None:
        super().__init__(message=message, engine_name=engine_name, context=context)


class RequestError(EngineError):
    """Raised when fetching the upstream page fails (network, timeout, HTTP status)."""

    kind = EngineErrorKind.REQUEST_ERROR

    def __init__(
        self,
        message: str = "Error occurred while requesting data from upstream search engine",
        engine_name: str | None = None,
        context: list[str] | tuple[str, ...] | None = None,
    ) -> None:
        super().__init__(message=message, engine_name=engine_name, context=context)


class UnexpectedError(EngineError):
    """Raised for malformed configuration, header construction or parse failures."""

    kind = EngineErrorKind.UNEXPECTED_ERROR

    def __init__(
        self,
        message: str = "An unexpected error occurred while processing the data",
        engine_name: str | None = None,
        context: list[str] | tuple[str, ...] | None = None,
    ) -> None:
        super().__init__(message=message, engine_name=engine_name, context=context)
