"""
Static descriptor tables for every lookup-based error category.

Tables are immutable and populated at import time. Each table is
checked against the enumerated subtype set of its category by
``validate_catalog`` when the application starts.
"""

from types import MappingProxyType
from typing import Mapping

from errorlab.domain.catalog.entities import (
    CategoryTable,
    ErrorCategory,
    ErrorDescriptor,
)
from errorlab.domain.catalog.errors import (
    CatalogConfigurationError,
    UnknownCategoryError,
)

D = ErrorDescriptor

# Enumerated subtype sets. Table keys must match these exactly.
KNOWN_SUBTYPES: Mapping[ErrorCategory, frozenset[str]] = MappingProxyType(
    {
        ErrorCategory.HTTP: frozenset(
            {
                "400", "401", "403", "404", "405", "408", "409", "410",
                "413", "415", "422", "429", "500", "501", "502", "503", "504",
            }
        ),
        ErrorCategory.RUNTIME: frozenset(
            {"reference", "type", "syntax", "range", "uri", "eval"}
        ),
        ErrorCategory.ASYNC: frozenset(
            {"rejected", "timeout", "chain", "all", "race"}
        ),
        ErrorCategory.DATABASE: frozenset(
            {
                "connection", "timeout", "deadlock", "constraint",
                "duplicate", "not_found", "pool_exhausted", "syntax",
            }
        ),
        ErrorCategory.NETWORK: frozenset(
            {"timeout", "dns", "refused", "reset", "ssl", "upstream"}
        ),
        ErrorCategory.AUTH: frozenset(
            {
                "unauthorized", "invalid_token", "expired_token", "forbidden",
                "invalid_credentials", "account_locked", "mfa_required",
            }
        ),
        ErrorCategory.BUSINESS: frozenset(
            {
                "insufficient_funds", "out_of_stock", "order_limit",
                "invalid_coupon", "payment_declined", "duplicate_order",
                "subscription_expired",
            }
        ),
        ErrorCategory.RESOURCE: frozenset(
            {"memory", "cpu", "disk", "rate_limit", "quota", "file_handles"}
        ),
        ErrorCategory.VALIDATION: frozenset(),
    }
)

_HTTP = MappingProxyType(
    {
        "400": D("BAD_REQUEST", 400, "The request could not be understood by the server"),
        "401": D("UNAUTHORIZED", 401, "Authentication is required to access this resource"),
        "403": D("FORBIDDEN", 403, "You do not have permission to access this resource"),
        "404": D("NOT_FOUND", 404, "The requested resource was not found"),
        "405": D("METHOD_NOT_ALLOWED", 405, "The request method is not supported for this resource"),
        "408": D("REQUEST_TIMEOUT", 408, "The server timed out waiting for the request"),
        "409": D("CONFLICT", 409, "The request conflicts with the current state of the resource"),
        "410": D("GONE", 410, "The requested resource is no longer available"),
        "413": D("PAYLOAD_TOO_LARGE", 413, "The request payload exceeds the allowed size"),
        "415": D("UNSUPPORTED_MEDIA_TYPE", 415, "The request media type is not supported"),
        "422": D("UNPROCESSABLE_ENTITY", 422, "The request was well-formed but contains semantic errors"),
        "429": D("TOO_MANY_REQUESTS", 429, "Too many requests, please slow down"),
        "500": D("INTERNAL_SERVER_ERROR", 500, "An unexpected error occurred on the server"),
        "501": D("NOT_IMPLEMENTED", 501, "This functionality is not implemented"),
        "502": D("BAD_GATEWAY", 502, "Received an invalid response from the upstream server"),
        "503": D("SERVICE_UNAVAILABLE", 503, "The service is temporarily unavailable"),
        "504": D("GATEWAY_TIMEOUT", 504, "The upstream server did not respond in time"),
    }
)

_RUNTIME = MappingProxyType(
    {
        "reference": D("REFERENCE_ERROR", 500, "Reference to an undefined name"),
        "type": D("TYPE_ERROR", 500, "Operation applied to a value of the wrong type"),
        "syntax": D("SYNTAX_ERROR", 500, "Failed to parse malformed input"),
        "range": D("RANGE_ERROR", 500, "Value is outside the allowed range"),
        "uri": D("URI_ERROR", 500, "Malformed URI sequence"),
        "eval": D("EVAL_ERROR", 500, "Dynamic evaluation failed"),
    }
)

_ASYNC = MappingProxyType(
    {
        "rejected": D("ASYNC_REJECTED", 500, "Asynchronous operation was rejected"),
        "timeout": D("ASYNC_TIMEOUT", 504, "Asynchronous operation timed out"),
        "chain": D("ASYNC_CHAIN_FAILED", 500, "A step in an asynchronous chain failed"),
        "all": D("ASYNC_ALL_FAILED", 500, "One of several concurrent operations failed"),
        "race": D("ASYNC_RACE_FAILED", 500, "The first operation to settle in a race failed"),
    }
)

_DATABASE = MappingProxyType(
    {
        "connection": D("DB_CONNECTION_FAILED", 503, "Unable to connect to the database server"),
        "timeout": D("DB_QUERY_TIMEOUT", 504, "Database query exceeded the time limit"),
        "deadlock": D("DB_DEADLOCK", 409, "Transaction aborted due to a deadlock"),
        "constraint": D("DB_CONSTRAINT_VIOLATION", 409, "Foreign key constraint violation"),
        "duplicate": D("DB_DUPLICATE_ENTRY", 409, "Duplicate entry for unique key"),
        "not_found": D("DB_RECORD_NOT_FOUND", 404, "Requested record does not exist"),
        "pool_exhausted": D("DB_POOL_EXHAUSTED", 503, "Database connection pool exhausted"),
        "syntax": D("DB_QUERY_SYNTAX", 500, "Syntax error in SQL statement"),
    }
)

_NETWORK = MappingProxyType(
    {
        "timeout": D("NETWORK_TIMEOUT", 504, "Request to external service timed out"),
        "dns": D("DNS_RESOLUTION_FAILED", 502, "Could not resolve host name"),
        "refused": D("CONNECTION_REFUSED", 503, "Connection refused by remote host"),
        "reset": D("CONNECTION_RESET", 502, "Connection reset by peer"),
        "ssl": D("SSL_HANDSHAKE_FAILED", 502, "TLS handshake with remote host failed"),
        "upstream": D("UPSTREAM_UNAVAILABLE", 502, "Upstream service is unavailable"),
    }
)

_AUTH = MappingProxyType(
    {
        "unauthorized": D("UNAUTHORIZED", 401, "Authentication required"),
        "invalid_token": D("INVALID_TOKEN", 401, "The access token is invalid"),
        "expired_token": D("TOKEN_EXPIRED", 401, "The access token has expired"),
        "forbidden": D("FORBIDDEN", 403, "Insufficient permissions for this action"),
        "invalid_credentials": D("INVALID_CREDENTIALS", 401, "Invalid email or password"),
        "account_locked": D("ACCOUNT_LOCKED", 423, "Account locked after too many failed attempts"),
        "mfa_required": D("MFA_REQUIRED", 401, "Multi-factor authentication is required"),
    }
)

_BUSINESS = MappingProxyType(
    {
        "insufficient_funds": D("INSUFFICIENT_FUNDS", 402, "Insufficient balance to complete the transaction"),
        "out_of_stock": D("OUT_OF_STOCK", 409, "The requested product is out of stock"),
        "order_limit": D("ORDER_LIMIT_EXCEEDED", 422, "Maximum number of items per order exceeded"),
        "invalid_coupon": D("INVALID_COUPON", 422, "The coupon code is invalid or expired"),
        "payment_declined": D("PAYMENT_DECLINED", 402, "The payment was declined by the issuer"),
        "duplicate_order": D("DUPLICATE_ORDER", 409, "An identical order was already placed"),
        "subscription_expired": D("SUBSCRIPTION_EXPIRED", 403, "Your subscription has expired"),
    }
)

_RESOURCE = MappingProxyType(
    {
        "memory": D("MEMORY_EXHAUSTED", 503, "Server ran out of memory"),
        "cpu": D("CPU_OVERLOAD", 503, "Server CPU is overloaded"),
        "disk": D("DISK_FULL", 507, "No space left on device"),
        "rate_limit": D("RATE_LIMIT_EXCEEDED", 429, "Rate limit exceeded"),
        "quota": D("QUOTA_EXCEEDED", 429, "Monthly usage quota exceeded"),
        "file_handles": D("TOO_MANY_OPEN_FILES", 503, "Too many open file handles"),
    }
)

VALIDATION_DESCRIPTOR = D("VALIDATION_FAILED", 422, "Request validation failed")

CATALOG: Mapping[ErrorCategory, CategoryTable] = MappingProxyType(
    {
        ErrorCategory.HTTP: CategoryTable(
            ErrorCategory.HTTP, _HTTP, _HTTP["500"]
        ),
        ErrorCategory.RUNTIME: CategoryTable(
            ErrorCategory.RUNTIME,
            _RUNTIME,
            D("RUNTIME_ERROR", 500, "An unexpected runtime error occurred"),
        ),
        ErrorCategory.ASYNC: CategoryTable(
            ErrorCategory.ASYNC,
            _ASYNC,
            D("ASYNC_ERROR", 500, "An asynchronous operation failed"),
        ),
        ErrorCategory.DATABASE: CategoryTable(
            ErrorCategory.DATABASE,
            _DATABASE,
            D("DATABASE_ERROR", 500, "A database error occurred"),
        ),
        ErrorCategory.NETWORK: CategoryTable(
            ErrorCategory.NETWORK,
            _NETWORK,
            D("NETWORK_ERROR", 502, "A network error occurred"),
        ),
        ErrorCategory.AUTH: CategoryTable(
            ErrorCategory.AUTH,
            _AUTH,
            D("AUTH_ERROR", 401, "Authentication failed"),
        ),
        ErrorCategory.BUSINESS: CategoryTable(
            ErrorCategory.BUSINESS,
            _BUSINESS,
            D("BUSINESS_RULE_VIOLATION", 422, "A business rule was violated"),
        ),
        ErrorCategory.RESOURCE: CategoryTable(
            ErrorCategory.RESOURCE,
            _RESOURCE,
            D("RESOURCE_EXHAUSTED", 503, "A server resource was exhausted"),
        ),
        ErrorCategory.VALIDATION: CategoryTable(
            ErrorCategory.VALIDATION,
            MappingProxyType({}),
            VALIDATION_DESCRIPTOR,
        ),
    }
)


def get_table(category: ErrorCategory) -> CategoryTable:
    """Return the descriptor table for a category.

    Raises:
        UnknownCategoryError: For categories without a static table (random).
    """
    try:
        return CATALOG[category]
    except KeyError:
        raise UnknownCategoryError(category.value) from None


def lookup(category: ErrorCategory, subtype: str) -> ErrorDescriptor:
    """Return the descriptor for (category, subtype), falling back to the default."""
    return get_table(category).lookup(subtype)


def validate_catalog(
    catalog: Mapping[ErrorCategory, CategoryTable] = CATALOG,
    known_subtypes: Mapping[ErrorCategory, frozenset[str]] = KNOWN_SUBTYPES,
) -> None:
    """Check every table against its enumerated subtype set.

    Raises:
        CatalogConfigurationError: On the first table with missing or
            unexpected keys, a category mismatch, or a missing table.
    """
    for category, expected in known_subtypes.items():
        table = catalog.get(category)
        if table is None:
            raise CatalogConfigurationError(category.value, ["table missing"])

        problems = []
        if table.category is not category:
            problems.append(f"table declares category '{table.category.value}'")
        actual = set(table.entries)
        missing = sorted(expected - actual)
        unexpected = sorted(actual - expected)
        if missing:
            problems.append(f"missing subtypes {missing}")
        if unexpected:
            problems.append(f"unexpected subtypes {unexpected}")
        for subtype, descriptor in table.entries.items():
            if not 400 <= descriptor.http_status <= 599:
                problems.append(
                    f"subtype '{subtype}' has non-error status {descriptor.http_status}"
                )
        if not 400 <= table.default.http_status <= 599:
            problems.append("default descriptor has a non-error status")
        if problems:
            raise CatalogConfigurationError(category.value, problems)
