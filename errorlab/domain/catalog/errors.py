"""
Domain-specific errors for the error catalog bounded context.

These are real failures of the service itself, as opposed to the
simulated errors the catalog describes.
No framework imports allowed.
"""


class CatalogDomainError(Exception):
    """Base error for all catalog domain errors."""

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)


class CatalogConfigurationError(CatalogDomainError):
    """Raised at startup when a descriptor table does not match its subtype set."""

    def __init__(self, category: str, problems: list[str]) -> None:
        super().__init__(
            f"Invalid descriptor table for category '{category}': "
            + "; ".join(problems)
        )
        self.category = category
        self.problems = problems


class UnknownCategoryError(CatalogDomainError):
    """Raised when a category has no static descriptor table."""

    def __init__(self, category: str) -> None:
        super().__init__(f"No descriptor table for category: {category}")
        self.category = category
