"""api_issues — issue definitions and severity configuration for API analysis."""

__all__ = [
    "__version__",
    "IssueRegistry",
    "IssueDefinition",
    "Severity",
    "Category",
    "INHERIT",
    "get_registry",
    # Errors
    "IssueRegistryError",
    "CatalogError",
    "InvalidSeverityError",
    "UnknownIssueError",
    "ConfigError",
]
__version__ = "0.1.0"

from api_issues.errors import (  # noqa: E402, F401
    CatalogError,
    ConfigError,
    InvalidSeverityError,
    IssueRegistryError,
    UnknownIssueError,
)
from api_issues.model import INHERIT, Category, Severity  # noqa: E402, F401
from api_issues.model.issue import IssueDefinition  # noqa: E402, F401
from api_issues.registry import IssueRegistry, get_registry  # noqa: E402, F401
