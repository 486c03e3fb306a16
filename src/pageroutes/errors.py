"""Pageroutes exception hierarchy.

Shared across config, compiler, renderer, and CLI so every module
raises and catches the same types.
"""


class PageRoutesError(Exception):
    """Base for all pageroutes-specific errors."""


class ConfigurationError(PageRoutesError):
    """Raised when route generation configuration is invalid.

    Typically raised by ``RoutesConfig.__post_init__`` or while loading
    a mixin file, before any page is compiled.
    """
