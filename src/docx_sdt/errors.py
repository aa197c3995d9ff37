"""
Error Taxonomy
===============
Exceptions raised while constructing content controls.

All of them are raised synchronously from constructors, so an invalid
tree can never be partially built. Serialization does not raise.

    ContentControlError      – common base (a ValueError)
    ├── ConfigurationError   – missing, empty or out-of-range option
    ├── NestingViolationError – illegal structured-tag nesting
    └── FormatError          – malformed store item ID or empty XPath
"""

from __future__ import annotations


class ContentControlError(ValueError):
    """Base class for all content control construction failures."""


class ConfigurationError(ContentControlError):
    """A required option is missing, empty, or has an out-of-range value."""


class NestingViolationError(ContentControlError):
    """A plain text control was given another content control as a child."""


class FormatError(ContentControlError):
    """A data binding value does not have the format Word requires."""
