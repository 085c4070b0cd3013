"""Custom exception hierarchy for Cumulus.

All cumulus-specific exceptions inherit from CumulusError, enabling
users to catch all cumulus exceptions with a single except clause.
"""

from __future__ import annotations


class CumulusError(Exception):
    """Base exception for all Cumulus errors."""


class InvalidArgumentError(CumulusError, ValueError):
    """Raised when an option setter receives a missing or malformed value."""


class InvalidDomainNameError(InvalidArgumentError):
    """Raised when a domain name is malformed or has no public suffix."""

    def __init__(self, domain_name: str, reason: str = "has no public suffix") -> None:
        self.domain_name = domain_name
        self.reason = reason
        super().__init__(f"domainName {domain_name} {reason}")


class ConfigurationError(CumulusError):
    """Raised for invalid configuration or missing required settings."""
