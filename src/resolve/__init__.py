"""Resolution of activated terminal links."""

from resolve.context import ResolutionContext
from resolve.resolver import LinkResolver, perform, resolve_file_target

__all__ = ["LinkResolver", "ResolutionContext", "perform", "resolve_file_target"]
