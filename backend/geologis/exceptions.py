"""
Geologis Backend — Custom Exception Hierarchy
===============================================

What:  Defines application-specific exceptions for different error scenarios.
How:   Each exception class carries a message, an optional context dict, the
       envelope `status` string and the HTTP status code. Global exception
       handlers (registered in main.py) render them as

           {"error": {"status": ..., "message": ..., "support": ...}}

Who:   Raised by services; caught by global handlers.

Exception Hierarchy:
    GeologisError (base)
    ├── InvalidArgumentsError        → 400 invalid-arguments
    ├── InvalidParametersError       → 400 invalid-parameters
    ├── NotFoundError                → 404 not-found (or the relayed upstream code)
    ├── InternalError                → 500 internal
    │   ├── DatasetUnavailableError
    │   └── UpstreamUnavailableError
    └── ContractViolationError       → 500 internal
        ├── InvalidDataError         (normalizer given a non-list)
        ├── InvalidPaginationInputError
        └── ArgumentsRequiredError   (derive_count without default/length)

Not-found inside the core is signalled with None; the service layer turns
None into NotFoundError. Contract violations are programmer errors and are
never shown to the caller beyond a generic internal message.
"""

from typing import Any, Dict, Optional


class GeologisError(Exception):
    """
    Base exception for all Geologis application errors.

    Attributes:
        message:      User-facing error description (safe to return in API response)
        context:      Additional debug info (logged but NOT returned to client)
        status:       Machine-readable envelope status
        status_code:  HTTP status code used by the global handler
    """

    status: str = "internal"
    status_code: int = 500

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class InvalidArgumentsError(GeologisError):
    """
    Raised when a required argument is missing or malformed.

    When:    Empty city name, unknown country code on a city search,
             queryamount above the allowed maximum, malformed country code.
    HTTP:    400 Bad Request
    """

    status = "invalid-arguments"
    status_code = 400

    def __init__(
        self,
        message: str = "Invalid arguments",
        field: Optional[str] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if field:
            ctx["field"] = field
        super().__init__(message=message, context=ctx)
        self.field = field


class InvalidParametersError(GeologisError):
    """
    Raised when a path parameter names something that does not exist as a
    parameter value (e.g. an unknown continent code for a country listing).
    """

    status = "invalid-parameters"
    status_code = 400

    def __init__(
        self,
        message: str = "Invalid parameters",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class NotFoundError(GeologisError):
    """
    Raised when no record matches the request.

    When:    Unknown country/continent code, empty name search, or a non-OK
             answer from the upstream city lookup.
    HTTP:    404 Not Found by default; upstream failures relay the upstream
             status code instead.
    """

    status = "not-found"
    status_code = 404

    def __init__(
        self,
        message: str = "The requested resource was not found",
        status_code: Optional[int] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
        if status_code:
            self.status_code = status_code


class InternalError(GeologisError):
    """
    Raised for unexpected failures the caller cannot fix.

    Security Note:
        Only `message` reaches the client (plus the support contact).
        Everything in `context` is logged server-side only.
    """

    status = "internal"
    status_code = 500

    def __init__(
        self,
        message: str = "Something unknown went wrong",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class DatasetUnavailableError(InternalError):
    """Raised when a static dataset table cannot be read."""

    def __init__(
        self,
        dataset: str = "countries",
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        ctx["dataset"] = dataset
        super().__init__(
            message=f"An error occurred retrieving {dataset} info",
            context=ctx,
        )
        self.dataset = dataset


class UpstreamUnavailableError(InternalError):
    """
    Raised when the city lookup provider cannot be reached at all
    (DNS failure, refused connection, transport timeout).

    A non-OK HTTP answer is NOT this error: it is relayed as NotFoundError.
    """

    def __init__(
        self,
        message: str = "Something unknown went wrong",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ContractViolationError(GeologisError):
    """
    Base for programmer errors raised by the core helpers.

    These indicate a caller passed something the function never accepts;
    the global handler maps them to a generic internal error.
    """

    status = "internal"
    status_code = 500


class InvalidDataError(ContractViolationError):
    """Raised when the city normalizer is handed something that is not a list."""

    status = "invalid-data"

    def __init__(
        self,
        message: str = "invalid Data",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class InvalidPaginationInputError(ContractViolationError):
    """Raised when paginate() receives a non-sequence or a non-positive count."""

    def __init__(
        self,
        message: str = "Invalid data to paginate",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)


class ArgumentsRequiredError(ContractViolationError):
    """Raised when derive_count() has no default count or an empty sequence."""

    def __init__(
        self,
        message: str = "All arguments are required",
        context: Optional[Dict[str, Any]] = None,
    ):
        super().__init__(message=message, context=context)
