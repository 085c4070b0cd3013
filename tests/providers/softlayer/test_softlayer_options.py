from __future__ import annotations

import pytest

from cumulus.compute.options import TemplateOptions
from cumulus.core.exceptions import InvalidArgumentError, InvalidDomainNameError
from cumulus.providers.softlayer.options import DEFAULT_DOMAIN_NAME, SoftLayerTemplateOptions
from cumulus.types.maybe import NOTHING, Some

PUBLIC_KEY = "ssh-rsa AAAAB3NzaC1yc2EAAAADAQABAAABAQC user@host"


def configured() -> SoftLayerTemplateOptions:
    return (
        SoftLayerTemplateOptions()
        .inbound_ports(22, 8080)
        .block_on_port(22, 300)
        .authorize_public_key(PUBLIC_KEY)
        .user_metadata("owner", "ops")
        .node_names(["node-a"])
        .networks(["vlan"])
        .domain_name("example.com")
        .block_devices(10, 20, 30)
        .disk_type("SAN")
        .port_speed(1000)
        .user_data("#!/bin/sh\necho hi")
        .primary_network_component_network_vlan_id(101)
        .primary_backend_network_component_network_vlan_id(202)
        .hourly_billing_flag(True)
        .dedicated_account_host_only_flag(False)
        .private_network_only_flag(True)
        .post_install_script_uri("https://example.com/setup.sh")
        .ssh_keys(7, 8)
        .notes("build box")
    )


class TestDefaults:
    def test_domain_name_default(self):
        assert SoftLayerTemplateOptions().get_domain_name() == DEFAULT_DOMAIN_NAME == "jclouds.org"

    @pytest.mark.parametrize(
        "getter",
        [
            "get_block_devices",
            "get_disk_type",
            "get_port_speed",
            "get_user_data",
            "get_primary_network_component_network_vlan_id",
            "get_primary_backend_network_component_network_vlan_id",
            "is_hourly_billing_flag",
            "is_dedicated_account_host_only_flag",
            "is_private_network_only_flag",
            "get_post_install_script_uri",
            "get_ssh_keys",
            "get_notes",
        ],
    )
    def test_extension_fields_absent(self, getter):
        assert getattr(SoftLayerTemplateOptions(), getter)() is NOTHING

    def test_none_singleton_is_all_defaults(self):
        assert SoftLayerTemplateOptions.NONE == SoftLayerTemplateOptions()
        assert isinstance(SoftLayerTemplateOptions.NONE, SoftLayerTemplateOptions)

    def test_not_equal_to_base_instance(self):
        assert SoftLayerTemplateOptions() != TemplateOptions()


class TestSetters:
    @pytest.mark.parametrize(
        ("setter", "getter", "value"),
        [
            ("disk_type", "get_disk_type", "LOCAL"),
            ("port_speed", "get_port_speed", 100),
            ("user_data", "get_user_data", "payload"),
            ("primary_network_component_network_vlan_id", "get_primary_network_component_network_vlan_id", 1),
            (
                "primary_backend_network_component_network_vlan_id",
                "get_primary_backend_network_component_network_vlan_id",
                2,
            ),
            ("hourly_billing_flag", "is_hourly_billing_flag", True),
            ("dedicated_account_host_only_flag", "is_dedicated_account_host_only_flag", True),
            ("private_network_only_flag", "is_private_network_only_flag", True),
            ("post_install_script_uri", "get_post_install_script_uri", "https://example.com/x"),
            ("notes", "get_notes", "free text"),
        ],
    )
    def test_round_trip(self, setter, getter, value):
        options = SoftLayerTemplateOptions()
        assert getattr(options, setter)(value) is options
        assert getattr(options, getter)() == Some(value)

    @pytest.mark.parametrize(
        ("setter", "getter", "value"),
        [
            ("port_speed", "get_port_speed", 0),
            ("hourly_billing_flag", "is_hourly_billing_flag", False),
            ("notes", "get_notes", ""),
        ],
    )
    def test_zero_values_are_present(self, setter, getter, value):
        result = getattr(getattr(SoftLayerTemplateOptions(), setter)(value), getter)()
        assert result == Some(value)
        assert result.is_present()

    @pytest.mark.parametrize(
        ("setter", "message"),
        [
            ("domain_name", "domainName was null"),
            ("disk_type", "diskType was null"),
            ("user_data", "userData was null"),
            ("post_install_script_uri", "postInstallScriptUri was null"),
            ("port_speed", "portSpeed was null"),
            ("primary_network_component_network_vlan_id", "primaryNetworkComponentNetworkVlanId was null"),
            (
                "primary_backend_network_component_network_vlan_id",
                "primaryBackendNetworkComponentNetworkVlanId was null",
            ),
            ("notes", "notes was null"),
        ],
    )
    def test_null_rejected(self, setter, message):
        options = SoftLayerTemplateOptions()
        with pytest.raises(InvalidArgumentError, match=message):
            getattr(options, setter)(None)
        assert options == SoftLayerTemplateOptions()

    def test_integer_fields_reject_bool(self):
        with pytest.raises(InvalidArgumentError, match="must be an integer"):
            SoftLayerTemplateOptions().port_speed(True)

    def test_flags_reject_non_bool(self):
        with pytest.raises(InvalidArgumentError, match="must be a bool"):
            SoftLayerTemplateOptions().hourly_billing_flag(1)

    @pytest.mark.parametrize(
        ("setter", "getter"),
        [
            ("hourly_billing_flag", "is_hourly_billing_flag"),
            ("dedicated_account_host_only_flag", "is_dedicated_account_host_only_flag"),
            ("private_network_only_flag", "is_private_network_only_flag"),
        ],
    )
    def test_flags_reject_null(self, setter, getter):
        options = SoftLayerTemplateOptions()
        with pytest.raises(InvalidArgumentError, match="must be a bool, got NoneType"):
            getattr(options, setter)(None)
        assert getattr(options, getter)() is NOTHING


class TestDomainName:
    def test_example_com_round_trips(self):
        assert SoftLayerTemplateOptions().domain_name("example.com").get_domain_name() == "example.com"

    def test_localhost_rejected(self):
        options = SoftLayerTemplateOptions()
        with pytest.raises(InvalidDomainNameError, match="has no public suffix"):
            options.domain_name("localhost")
        assert options.get_domain_name() == DEFAULT_DOMAIN_NAME

    def test_malformed_rejected(self):
        options = SoftLayerTemplateOptions().domain_name("example.com")
        with pytest.raises(InvalidDomainNameError):
            options.domain_name("exa mple.com")
        assert options.get_domain_name() == "example.com"

    @pytest.mark.parametrize("name", [" example.com\n", "example.com\n", " example.com"])
    def test_padded_name_rejected(self, name):
        options = SoftLayerTemplateOptions().domain_name("example.com")
        with pytest.raises(InvalidDomainNameError, match="is not a valid domain name"):
            options.domain_name(name)
        assert options.get_domain_name() == "example.com"
        assert options == SoftLayerTemplateOptions().domain_name("example.com")


class TestListFields:
    def test_block_devices_varargs(self):
        assert SoftLayerTemplateOptions().block_devices(10, 20, 30).get_block_devices() == Some((10, 20, 30))

    def test_block_devices_sequence(self):
        assert SoftLayerTemplateOptions().block_devices([10, 20, 30]).get_block_devices() == Some((10, 20, 30))

    def test_block_devices_stores_owned_copy(self):
        capacities = [10, 20]
        options = SoftLayerTemplateOptions().block_devices(capacities)
        capacities.append(30)
        assert options.get_block_devices().get() == (10, 20)

    def test_block_devices_null_element(self):
        options = SoftLayerTemplateOptions().block_devices(5)
        with pytest.raises(InvalidArgumentError, match="all block devices must be non-empty"):
            options.block_devices([10, None, 30])
        assert options.get_block_devices() == Some((5,))

    def test_block_devices_empty(self):
        with pytest.raises(InvalidArgumentError, match="must not be empty"):
            SoftLayerTemplateOptions().block_devices([])

    def test_block_devices_positive(self):
        with pytest.raises(InvalidArgumentError, match="positive"):
            SoftLayerTemplateOptions().block_devices(10, 0)

    def test_block_devices_null_sequence(self):
        with pytest.raises(InvalidArgumentError, match="capacities was null"):
            SoftLayerTemplateOptions().block_devices(None)

    def test_ssh_keys(self):
        assert SoftLayerTemplateOptions().ssh_keys(1, 2).get_ssh_keys() == Some((1, 2))
        assert SoftLayerTemplateOptions().ssh_keys([3]).get_ssh_keys() == Some((3,))

    def test_ssh_keys_null_element(self):
        options = SoftLayerTemplateOptions()
        with pytest.raises(InvalidArgumentError, match="sshKeys must be non-empty"):
            options.ssh_keys(1, None)
        assert options.get_ssh_keys() is NOTHING

    def test_ssh_keys_empty(self):
        options = SoftLayerTemplateOptions()
        with pytest.raises(InvalidArgumentError, match="sshKeys must not be empty"):
            options.ssh_keys([])
        assert options.get_ssh_keys() is NOTHING


class TestChaining:
    def test_base_setters_keep_subclass_type(self):
        options = SoftLayerTemplateOptions().inbound_ports(22).user_metadata("a", "b")
        assert isinstance(options, SoftLayerTemplateOptions)
        assert options.hourly_billing_flag(True).is_hourly_billing_flag() == Some(True)

    def test_every_base_setter_returns_same_instance(self):
        options = SoftLayerTemplateOptions()
        assert options.block_on_port(22, 10) is options
        assert options.authorize_public_key(PUBLIC_KEY) is options
        assert options.node_names(["x"]) is options
        assert options.networks(["y"]) is options
        assert options.tags(["z"]) is options
        assert options.block_until_running(True) is options


class TestClone:
    def test_clone_equals_original(self):
        original = configured()
        cloned = original.clone()
        assert cloned == original
        assert cloned is not original
        assert type(cloned) is SoftLayerTemplateOptions

    def test_clone_field_by_field(self):
        cloned = configured().clone()
        assert cloned.get_domain_name() == "example.com"
        assert cloned.get_block_devices() == Some((10, 20, 30))
        assert cloned.get_post_install_script_uri() == Some("https://example.com/setup.sh")
        assert cloned.is_dedicated_account_host_only_flag() == Some(False)
        assert cloned.get_inbound_ports() == (22, 8080)
        assert cloned.get_port() == 22
        assert cloned.get_user_metadata() == {"owner": "ops"}

    def test_clone_list_independence(self):
        original = configured()
        cloned = original.clone()
        cloned.block_devices(99).ssh_keys(1).user_metadata("more", "x")
        assert original.get_block_devices() == Some((10, 20, 30))
        assert original.get_ssh_keys() == Some((7, 8))
        assert original.get_user_metadata() == {"owner": "ops"}

    def test_none_untouched_after_clone_mutation(self):
        cloned = SoftLayerTemplateOptions.NONE.clone()
        cloned.disk_type("SAN").domain_name("example.org")
        assert SoftLayerTemplateOptions.NONE == SoftLayerTemplateOptions()
        assert SoftLayerTemplateOptions.NONE.get_disk_type() is NOTHING
        assert SoftLayerTemplateOptions.NONE.get_domain_name() == DEFAULT_DOMAIN_NAME


class TestCopyTo:
    def test_absent_source_fields_leave_target_untouched(self):
        target = SoftLayerTemplateOptions().disk_type("SAN").port_speed(10)
        SoftLayerTemplateOptions().notes("n").copy_to(target)
        assert target.get_disk_type() == Some("SAN")
        assert target.get_port_speed() == Some(10)
        assert target.get_notes() == Some("n")

    def test_present_source_fields_overwrite(self):
        target = SoftLayerTemplateOptions().disk_type("SAN")
        SoftLayerTemplateOptions().disk_type("LOCAL").copy_to(target)
        assert target.get_disk_type() == Some("LOCAL")

    def test_domain_name_always_copied(self):
        target = SoftLayerTemplateOptions().domain_name("example.com")
        SoftLayerTemplateOptions().copy_to(target)
        assert target.get_domain_name() == DEFAULT_DOMAIN_NAME

    def test_base_target_gets_base_group_only(self):
        target = TemplateOptions()
        result = configured().copy_to(target)
        assert result is target
        assert type(result) is TemplateOptions
        assert target.get_inbound_ports() == (22, 8080)
        assert target.get_user_metadata() == {"owner": "ops"}

    def test_base_source_into_softlayer_target(self):
        target = SoftLayerTemplateOptions().disk_type("SAN")
        TemplateOptions().inbound_ports(443).copy_to(target)
        assert target.get_inbound_ports() == (443,)
        assert target.get_disk_type() == Some("SAN")


class TestRepr:
    def test_shows_present_fields(self):
        text = repr(SoftLayerTemplateOptions().disk_type("SAN").port_speed(0))
        assert text == "SoftLayerTemplateOptions(disk_type='SAN', port_speed=0)"

    def test_default(self):
        assert repr(SoftLayerTemplateOptions()) == "SoftLayerTemplateOptions()"
