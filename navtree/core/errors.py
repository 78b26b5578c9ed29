"""Error Hierarchy — typed, categorized exceptions for all navtree failure modes.

Invariants:
    - Every error has a code (str), category (ErrorCategory), severity (ErrorSeverity)
    - Configuration errors (unknown content type / item) are reportable, never swallowed
    - to_response() produces the REST error envelope
    - No internal details leaked in user-facing messages

Design Decisions:
    - Single hierarchy with NavigationError base: FastAPI global handler catches all (ADR: uniform error shape)
    - ErrorContext as dataclass: rich observability without coupling to logging framework
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Any
from datetime import datetime, timezone


class ErrorSeverity(str, Enum):
    """Error severity for observability and client handling."""
    INFO = "info"
    WARNING = "warning"
    ERROR = "error"
    CRITICAL = "critical"


class ErrorCategory(str, Enum):
    """High-level error categories for routing and handling."""
    VALIDATION = "validation"
    CONFIGURATION = "configuration"
    RESOURCE_NOT_FOUND = "resource_not_found"
    INTERNAL = "internal"


@dataclass
class ErrorContext:
    """Rich context for error observability and debugging."""
    timestamp: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
    navigation_id: Any = None
    view_id: str | None = None


class NavigationError(Exception):
    """Base exception for all navtree errors."""

    def __init__(
        self,
        message: str,
        code: str,
        category: ErrorCategory,
        severity: ErrorSeverity = ErrorSeverity.ERROR,
        context: ErrorContext | None = None,
        http_status: int = 500,
    ):
        super().__init__(message)
        self.message = message
        self.code = code
        self.category = category
        self.severity = severity
        self.context = context or ErrorContext()
        self.http_status = http_status

    def to_response(self) -> dict:
        """Convert to standardized REST error response."""
        return {
            "error": {
                "code": self.code,
                "message": self.message,
                "category": self.category.value,
                "severity": self.severity.value,
                "timestamp": self.context.timestamp.isoformat(),
                "context": {
                    "navigation_id": self.context.navigation_id,
                    "view_id": self.context.view_id,
                },
            }
        }


# ─── Input Errors (400-level) ───────────────────────────────────

class ItemValidationError(NavigationError):
    """Navigation item payload has an invalid shape."""
    def __init__(self, message: str, field: str, context: ErrorContext | None = None):
        super().__init__(
            message, "VALIDATION_ERROR", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 400,
        )
        self.field = field


class UnresolvableRelationError(NavigationError):
    """Relation value is neither an identifier nor a tagged entity."""
    def __init__(self, value: Any, context: ErrorContext | None = None):
        super().__init__(
            f"Relation value {value!r} is not an identifier or a content entity",
            "UNRESOLVABLE_RELATION", ErrorCategory.VALIDATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.value = value


class ViewItemNotFoundError(NavigationError):
    """Edit address points at a node missing from the view tree."""
    def __init__(self, view_id: str, context: ErrorContext | None = None):
        ctx = context or ErrorContext()
        ctx.view_id = view_id
        super().__init__(
            f"Navigation item with viewId '{view_id}' not found",
            "VIEW_ITEM_NOT_FOUND", ErrorCategory.RESOURCE_NOT_FOUND,
            ErrorSeverity.ERROR, ctx, 404,
        )


# ─── Configuration Errors (422) ─────────────────────────────────

class ContentTypeNotFoundError(NavigationError):
    """No registered content type matches the relation."""
    def __init__(
        self, lookup_field: str, value: str | None, context: ErrorContext | None = None,
    ):
        super().__init__(
            f"No content type with {lookup_field} '{value}' is configured",
            "CONTENT_TYPE_NOT_FOUND", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.lookup_field = lookup_field
        self.value = value


class ContentTypeItemNotFoundError(NavigationError):
    """No content type item carries the related identifier."""
    def __init__(self, identifier: Any, context: ErrorContext | None = None):
        super().__init__(
            f"No content type item with id {identifier!r} is available",
            "CONTENT_TYPE_ITEM_NOT_FOUND", ErrorCategory.CONFIGURATION,
            ErrorSeverity.ERROR, context, 422,
        )
        self.identifier = identifier
