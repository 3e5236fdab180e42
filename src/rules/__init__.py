"""Matching rules and configuration for terminal links."""

from rules.config import (
    ConfigError,
    TermLinksConfig,
    context_from_config,
    load_config,
)
from rules.patterns import (
    FILE_PATH_RULE,
    REFERENCE_PATTERNS,
    ROOT_FOLDERS,
    ReferencePattern,
)

__all__ = [
    "FILE_PATH_RULE",
    "REFERENCE_PATTERNS",
    "ROOT_FOLDERS",
    "ConfigError",
    "ReferencePattern",
    "TermLinksConfig",
    "context_from_config",
    "load_config",
]
