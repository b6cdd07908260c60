"""Exceptions raised while resolving runner specifications."""


class GarmGCPError(Exception):
    """Base error for runner spec resolution."""
    pass


class ConfigError(GarmGCPError):
    """Operator configuration could not be loaded."""
    pass


class ToolResolutionError(GarmGCPError):
    """No runner download matches the requested OS and architecture."""
    pass


class ExtraSpecsValidationError(GarmGCPError):
    """Extra specs payload is malformed or out of policy."""
    pass


class SpecificationIncompleteError(GarmGCPError):
    """A required runner spec field is empty."""
    pass


class UnsupportedOSError(GarmGCPError):
    """No user data rendering path exists for the OS type."""
    pass


class UserDataError(GarmGCPError):
    """The runner install script could not be generated."""
    pass
