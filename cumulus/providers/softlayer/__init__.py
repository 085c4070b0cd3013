"""SoftLayer provider."""

from cumulus.providers.softlayer import builders
from cumulus.providers.softlayer.options import DEFAULT_DOMAIN_NAME, SoftLayerTemplateOptions

__all__ = [
    "DEFAULT_DOMAIN_NAME",
    "SoftLayerTemplateOptions",
    "builders",
]
