"""SoftLayer template options.

Contains the options SoftLayer accepts when ordering a virtual guest, on top
of the provider-neutral TemplateOptions.

Usage:
    from cumulus.providers.softlayer import builders as sl

    options = sl.inbound_ports(22, 80, 8080, 443).hourly_billing_flag(True)

Every SoftLayer field except the domain name starts absent (``NOTHING``)
and becomes ``Some(value)`` once set. ``copy_to`` only writes fields that
are present on the source, so copying onto a populated target merges rather
than overwrites.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from cumulus.compute.options import TemplateOptions
from cumulus.core.domains import check_domain_name
from cumulus.core.preconditions import (
    check_argument,
    check_bool,
    check_elements,
    check_int,
    check_str,
    varargs,
)
from cumulus.types.maybe import NOTHING, Maybe, Some

DEFAULT_DOMAIN_NAME = "jclouds.org"


def _int_list(
    values: tuple[int | Iterable[int], ...],
    name: str,
    null_message: str,
    *,
    positive: bool = False,
) -> tuple[int, ...]:
    items = check_elements(varargs(values, name), null_message)
    check_argument(len(items) > 0, f"{name} must not be empty")
    checked = tuple(check_int(item, name) for item in items)
    if positive:
        check_argument(all(item > 0 for item in checked), f"{name} must be positive integers")
    return checked


@dataclass(slots=True, repr=False)
class SoftLayerTemplateOptions(TemplateOptions):
    NONE: ClassVar[SoftLayerTemplateOptions]

    _domain_name: str = field(default=DEFAULT_DOMAIN_NAME, init=False)
    _block_devices: Maybe[tuple[int, ...]] = field(default=NOTHING, init=False)
    _disk_type: Maybe[str] = field(default=NOTHING, init=False)
    _port_speed: Maybe[int] = field(default=NOTHING, init=False)
    _user_data: Maybe[str] = field(default=NOTHING, init=False)
    _primary_network_component_network_vlan_id: Maybe[int] = field(default=NOTHING, init=False)
    _primary_backend_network_component_network_vlan_id: Maybe[int] = field(default=NOTHING, init=False)
    _hourly_billing_flag: Maybe[bool] = field(default=NOTHING, init=False)
    _dedicated_account_host_only_flag: Maybe[bool] = field(default=NOTHING, init=False)
    _private_network_only_flag: Maybe[bool] = field(default=NOTHING, init=False)
    _post_install_script_uri: Maybe[str] = field(default=NOTHING, init=False)
    _ssh_keys: Maybe[tuple[int, ...]] = field(default=NOTHING, init=False)
    _notes: Maybe[str] = field(default=NOTHING, init=False)

    def copy_to[O: TemplateOptions](self, to: O) -> O:
        TemplateOptions.copy_to(self, to)
        match to:
            case SoftLayerTemplateOptions():
                to.domain_name(self._domain_name)
                match self._block_devices:
                    case Some(value=capacities):
                        to.block_devices(capacities)
                match self._disk_type:
                    case Some(value=disk_type):
                        to.disk_type(disk_type)
                match self._port_speed:
                    case Some(value=speed):
                        to.port_speed(speed)
                match self._user_data:
                    case Some(value=user_data):
                        to.user_data(user_data)
                match self._primary_network_component_network_vlan_id:
                    case Some(value=vlan_id):
                        to.primary_network_component_network_vlan_id(vlan_id)
                match self._primary_backend_network_component_network_vlan_id:
                    case Some(value=vlan_id):
                        to.primary_backend_network_component_network_vlan_id(vlan_id)
                match self._hourly_billing_flag:
                    case Some(value=flag):
                        to.hourly_billing_flag(flag)
                match self._dedicated_account_host_only_flag:
                    case Some(value=flag):
                        to.dedicated_account_host_only_flag(flag)
                match self._private_network_only_flag:
                    case Some(value=flag):
                        to.private_network_only_flag(flag)
                match self._post_install_script_uri:
                    case Some(value=uri):
                        to.post_install_script_uri(uri)
                match self._ssh_keys:
                    case Some(value=keys):
                        to.ssh_keys(keys)
                match self._notes:
                    case Some(value=notes):
                        to.notes(notes)
            case TemplateOptions():
                pass
        return to

    # =========================================================================
    # Setters
    # =========================================================================

    def domain_name(self, domain_name: str) -> Self:
        """Replace the domain used when ordering virtual guests.

        The name must end in a public suffix (``example.com`` is accepted,
        ``localhost`` is not).
        """
        self._domain_name = check_domain_name(check_str(domain_name, "domainName"))
        return self

    def block_devices(self, *capacities: int | Iterable[int]) -> Self:
        """Block device capacities in GB, in disk order.

        Accepts ``block_devices(25, 100)`` as well as ``block_devices([25, 100])``.
        """
        checked = _int_list(
            capacities, "capacities", "all block devices must be non-empty", positive=True
        )
        self._block_devices = Some(checked)
        return self

    def disk_type(self, disk_type: str) -> Self:
        self._disk_type = Some(check_str(disk_type, "diskType"))
        return self

    def port_speed(self, port_speed: int) -> Self:
        self._port_speed = Some(check_int(port_speed, "portSpeed"))
        return self

    def user_data(self, user_data: str) -> Self:
        self._user_data = Some(check_str(user_data, "userData"))
        return self

    def primary_network_component_network_vlan_id(self, vlan_id: int) -> Self:
        self._primary_network_component_network_vlan_id = Some(
            check_int(vlan_id, "primaryNetworkComponentNetworkVlanId")
        )
        return self

    def primary_backend_network_component_network_vlan_id(self, vlan_id: int) -> Self:
        self._primary_backend_network_component_network_vlan_id = Some(
            check_int(vlan_id, "primaryBackendNetworkComponentNetworkVlanId")
        )
        return self

    def hourly_billing_flag(self, hourly_billing_flag: bool) -> Self:
        self._hourly_billing_flag = Some(check_bool(hourly_billing_flag, "hourlyBillingFlag"))
        return self

    def dedicated_account_host_only_flag(self, dedicated_account_host_only_flag: bool) -> Self:
        self._dedicated_account_host_only_flag = Some(
            check_bool(dedicated_account_host_only_flag, "dedicatedAccountHostOnlyFlag")
        )
        return self

    def private_network_only_flag(self, private_network_only_flag: bool) -> Self:
        self._private_network_only_flag = Some(
            check_bool(private_network_only_flag, "privateNetworkOnlyFlag")
        )
        return self

    def post_install_script_uri(self, post_install_script_uri: str) -> Self:
        self._post_install_script_uri = Some(check_str(post_install_script_uri, "postInstallScriptUri"))
        return self

    def ssh_keys(self, *ssh_keys: int | Iterable[int]) -> Self:
        """Ids of SSH keys already registered with the account."""
        self._ssh_keys = Some(_int_list(ssh_keys, "sshKeys", "sshKeys must be non-empty"))
        return self

    def notes(self, notes: str) -> Self:
        self._notes = Some(check_str(notes, "notes"))
        return self

    # =========================================================================
    # Getters
    # =========================================================================

    def get_domain_name(self) -> str:
        return self._domain_name

    def get_block_devices(self) -> Maybe[tuple[int, ...]]:
        return self._block_devices

    def get_disk_type(self) -> Maybe[str]:
        return self._disk_type

    def get_port_speed(self) -> Maybe[int]:
        return self._port_speed

    def get_user_data(self) -> Maybe[str]:
        return self._user_data

    def get_primary_network_component_network_vlan_id(self) -> Maybe[int]:
        return self._primary_network_component_network_vlan_id

    def get_primary_backend_network_component_network_vlan_id(self) -> Maybe[int]:
        return self._primary_backend_network_component_network_vlan_id

    def is_hourly_billing_flag(self) -> Maybe[bool]:
        return self._hourly_billing_flag

    def is_dedicated_account_host_only_flag(self) -> Maybe[bool]:
        return self._dedicated_account_host_only_flag

    def is_private_network_only_flag(self) -> Maybe[bool]:
        return self._private_network_only_flag

    def get_post_install_script_uri(self) -> Maybe[str]:
        return self._post_install_script_uri

    def get_ssh_keys(self) -> Maybe[tuple[int, ...]]:
        return self._ssh_keys

    def get_notes(self) -> Maybe[str]:
        return self._notes

    def _describe(self) -> dict[str, Any]:
        described = TemplateOptions._describe(self)
        if self._domain_name != DEFAULT_DOMAIN_NAME:
            described["domain_name"] = self._domain_name
        extensions = {
            "block_devices": self._block_devices,
            "disk_type": self._disk_type,
            "port_speed": self._port_speed,
            "user_data": self._user_data,
            "primary_network_component_network_vlan_id": self._primary_network_component_network_vlan_id,
            "primary_backend_network_component_network_vlan_id": (
                self._primary_backend_network_component_network_vlan_id
            ),
            "hourly_billing_flag": self._hourly_billing_flag,
            "dedicated_account_host_only_flag": self._dedicated_account_host_only_flag,
            "private_network_only_flag": self._private_network_only_flag,
            "post_install_script_uri": self._post_install_script_uri,
            "ssh_keys": self._ssh_keys,
            "notes": self._notes,
        }
        for name, value in extensions.items():
            match value:
                case Some(value=v):
                    described[name] = v
        return described


SoftLayerTemplateOptions.NONE = SoftLayerTemplateOptions()
