"""Cloud providers for Cumulus."""

from cumulus.providers.softlayer import SoftLayerTemplateOptions

__all__ = [
    "SoftLayerTemplateOptions",
]
