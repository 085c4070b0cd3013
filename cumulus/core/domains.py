"""Domain name validation against the Public Suffix List.

The suffix list is the snapshot bundled with tldextract; it is never
fetched over the network.
"""

from __future__ import annotations

import re
from functools import cache

import tldextract

from cumulus.core.exceptions import InvalidDomainNameError

MAX_DOMAIN_LENGTH = 253

_LABEL = re.compile(r"[A-Za-z0-9_](?:[A-Za-z0-9_-]{0,61}[A-Za-z0-9_])?")


@cache
def _extractor() -> tldextract.TLDExtract:
    return tldextract.TLDExtract(suffix_list_urls=(), cache_dir=None)


def _to_ascii(domain_name: str) -> str:
    try:
        return domain_name.encode("idna").decode("ascii")
    except UnicodeError as e:
        raise InvalidDomainNameError(domain_name, "is not a valid domain name") from e


def validate_syntax(domain_name: str) -> str:
    """Return the lowercase ASCII form of ``domain_name`` or raise."""
    name = _to_ascii(domain_name).lower()
    name = name.removesuffix(".")
    if not name or len(name) > MAX_DOMAIN_LENGTH:
        raise InvalidDomainNameError(domain_name, "is not a valid domain name")

    labels = name.split(".")
    if not all(_LABEL.fullmatch(label) for label in labels):
        raise InvalidDomainNameError(domain_name, "is not a valid domain name")
    if labels[-1][0].isdigit():
        raise InvalidDomainNameError(domain_name, "is not a valid domain name")
    return name


def has_public_suffix(domain_name: str) -> bool:
    """Whether the right-most labels of ``domain_name`` are a public suffix."""
    return bool(_extractor()(domain_name).suffix)


def check_domain_name(domain_name: str) -> str:
    """Validate ``domain_name`` and return it unchanged."""
    name = validate_syntax(domain_name)
    if not has_public_suffix(name):
        raise InvalidDomainNameError(domain_name)
    return domain_name
