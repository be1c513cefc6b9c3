"""Errors raised while building a checker from user configuration."""


class ConfigurationError(ValueError):
    """Malformed options: bad override rule, invalid pattern, unknown key or transform."""
