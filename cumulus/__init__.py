"""Cumulus - provider-extensible template options for cloud node provisioning.

Example:

    from cumulus.providers.softlayer import builders as sl

    options = (
        sl.domain_name("example.com")
        .inbound_ports(22, 443)
        .block_devices(100, 250)
        .hourly_billing_flag(True)
    )

    options.get_block_devices()   # Some(value=(100, 250))
    options.get_disk_type()       # NOTHING
"""

# Logging (disables the cumulus logger until configured)
from cumulus.logging import LogConfig, setup_logging, teardown_logging

# Exceptions
from cumulus.core.exceptions import (
    ConfigurationError,
    CumulusError,
    InvalidArgumentError,
    InvalidDomainNameError,
)

# Present/absent wrapper
from cumulus.types.maybe import NOTHING, Maybe, Nothing, Some

# Options
from cumulus.compute.options import TemplateOptions
from cumulus.providers.softlayer.options import SoftLayerTemplateOptions

# Configuration
from cumulus.config import load_config, resolve_template_options

__all__ = [
    "NOTHING",
    "ConfigurationError",
    "CumulusError",
    "InvalidArgumentError",
    "InvalidDomainNameError",
    "LogConfig",
    "Maybe",
    "Nothing",
    "Some",
    "SoftLayerTemplateOptions",
    "TemplateOptions",
    "load_config",
    "resolve_template_options",
    "setup_logging",
    "teardown_logging",
]
