"""Factory functions for SoftLayerTemplateOptions.

Each factory creates a fresh default instance, applies one setter and
returns it as SoftLayerTemplateOptions, so SoftLayer-specific calls can
be chained straight away:

    from cumulus.providers.softlayer.builders import block_devices

    options = block_devices(100, 250).disk_type("SAN").hourly_billing_flag(True)
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping

from cumulus.providers.softlayer.options import SoftLayerTemplateOptions

# =============================================================================
# SoftLayer options
# =============================================================================


def domain_name(domain_name: str) -> SoftLayerTemplateOptions:
    """Options ordering guests under ``domain_name`` instead of the default domain."""
    return SoftLayerTemplateOptions().domain_name(domain_name)


def block_devices(*capacities: int | Iterable[int]) -> SoftLayerTemplateOptions:
    """Options with block device capacities in GB, in disk order."""
    return SoftLayerTemplateOptions().block_devices(*capacities)


def disk_type(disk_type: str) -> SoftLayerTemplateOptions:
    """Options with the disk type (``LOCAL`` or ``SAN``)."""
    return SoftLayerTemplateOptions().disk_type(disk_type)


def port_speed(port_speed: int) -> SoftLayerTemplateOptions:
    """Options with the network port speed in Mbps."""
    return SoftLayerTemplateOptions().port_speed(port_speed)


def user_data(user_data: str) -> SoftLayerTemplateOptions:
    """Options with user data passed to the guest at boot."""
    return SoftLayerTemplateOptions().user_data(user_data)


def primary_network_component_network_vlan_id(vlan_id: int) -> SoftLayerTemplateOptions:
    """Options placing the public interface on VLAN ``vlan_id``."""
    return SoftLayerTemplateOptions().primary_network_component_network_vlan_id(vlan_id)


def primary_backend_network_component_network_vlan_id(vlan_id: int) -> SoftLayerTemplateOptions:
    """Options placing the private interface on VLAN ``vlan_id``."""
    return SoftLayerTemplateOptions().primary_backend_network_component_network_vlan_id(vlan_id)


def hourly_billing_flag(hourly_billing_flag: bool) -> SoftLayerTemplateOptions:
    """Options choosing hourly (``True``) or monthly billing."""
    return SoftLayerTemplateOptions().hourly_billing_flag(hourly_billing_flag)


def dedicated_account_host_only_flag(dedicated_account_host_only_flag: bool) -> SoftLayerTemplateOptions:
    """Options restricting guests to hosts dedicated to the account."""
    return SoftLayerTemplateOptions().dedicated_account_host_only_flag(dedicated_account_host_only_flag)


def private_network_only_flag(private_network_only_flag: bool) -> SoftLayerTemplateOptions:
    """Options giving guests a private network interface only."""
    return SoftLayerTemplateOptions().private_network_only_flag(private_network_only_flag)


def post_install_script_uri(post_install_script_uri: str) -> SoftLayerTemplateOptions:
    """Options running the script at ``post_install_script_uri`` after provisioning."""
    return SoftLayerTemplateOptions().post_install_script_uri(post_install_script_uri)


def ssh_keys(*ssh_keys: int | Iterable[int]) -> SoftLayerTemplateOptions:
    """Options with the ids of SSH keys registered with the account."""
    return SoftLayerTemplateOptions().ssh_keys(*ssh_keys)


def notes(notes: str) -> SoftLayerTemplateOptions:
    """Options with free-form notes attached to the guest."""
    return SoftLayerTemplateOptions().notes(notes)


# =============================================================================
# Base options, returned as SoftLayerTemplateOptions
# =============================================================================


def inbound_ports(*ports: int | Iterable[int]) -> SoftLayerTemplateOptions:
    """Options opening ``ports`` on the guest."""
    return SoftLayerTemplateOptions().inbound_ports(*ports)


def block_on_port(port: int, seconds: int) -> SoftLayerTemplateOptions:
    """Options waiting up to ``seconds`` for ``port`` to accept connections."""
    return SoftLayerTemplateOptions().block_on_port(port, seconds)


def authorize_public_key(public_key: str) -> SoftLayerTemplateOptions:
    """Options authorizing an OpenSSH public key on the guest."""
    return SoftLayerTemplateOptions().authorize_public_key(public_key)


def install_private_key(private_key: str) -> SoftLayerTemplateOptions:
    """Options installing a PEM private key on the guest."""
    return SoftLayerTemplateOptions().install_private_key(private_key)


def user_metadata(
    key_or_mapping: Mapping[str, str] | str, value: str | None = None
) -> SoftLayerTemplateOptions:
    """Options with user metadata from a mapping or a single ``key, value``."""
    return SoftLayerTemplateOptions().user_metadata(key_or_mapping, value)


def node_names(node_names: Iterable[str]) -> SoftLayerTemplateOptions:
    """Options naming the guests explicitly."""
    return SoftLayerTemplateOptions().node_names(node_names)


def networks(networks: Iterable[str]) -> SoftLayerTemplateOptions:
    """Options attaching guests to ``networks``."""
    return SoftLayerTemplateOptions().networks(networks)


def tags(tags: Iterable[str]) -> SoftLayerTemplateOptions:
    """Options tagging the guests."""
    return SoftLayerTemplateOptions().tags(tags)


def block_until_running(block_until_running: bool) -> SoftLayerTemplateOptions:
    """Options controlling whether creation waits for the guest to run."""
    return SoftLayerTemplateOptions().block_until_running(block_until_running)
