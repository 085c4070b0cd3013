"""Provider-neutral template options.

TemplateOptions carries the parameters every provider understands when a
node is requested: ports to open, keys to install, metadata, naming and
network membership. Providers subclass it to add their own fields.

Setters validate, store and return ``self`` so calls chain; because they
are annotated with ``Self``, a chain started on a provider subclass keeps
the subclass type all the way through:

    options = (
        SoftLayerTemplateOptions()
        .inbound_ports(22, 80, 443)
        .user_metadata("team", "ml")
        .domain_name("example.com")
    )

``TemplateOptions.NONE`` is a shared all-defaults instance. Treat it as
read-only and ``clone()`` it before changing anything.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from typing import Any, ClassVar, Self

from cumulus.core.preconditions import (
    check_argument,
    check_bool,
    check_elements,
    check_int,
    check_port,
    check_str,
    unique_strings,
    varargs,
)

PUBLIC_KEY_PREFIXES = ("ssh-rsa", "ssh-ed25519", "ssh-dss", "ecdsa-sha2-", "sk-")


@dataclass(slots=True, repr=False)
class TemplateOptions:
    NONE: ClassVar[TemplateOptions]

    _inbound_ports: tuple[int, ...] = field(default=(), init=False)
    _port: int = field(default=-1, init=False)
    _seconds: int = field(default=-1, init=False)
    _public_key: str | None = field(default=None, init=False)
    _private_key: str | None = field(default=None, init=False)
    _user_metadata: dict[str, str] = field(default_factory=dict, init=False)
    _node_names: tuple[str, ...] = field(default=(), init=False)
    _networks: tuple[str, ...] = field(default=(), init=False)
    _tags: tuple[str, ...] = field(default=(), init=False)
    _block_until_running: bool = field(default=True, init=False)

    # =========================================================================
    # Copy
    # =========================================================================

    def copy_to[O: TemplateOptions](self, to: O) -> O:
        """Merge every base field set on ``self`` into ``to`` and return ``to``.

        Fields still at their defaults are skipped, so whatever ``to``
        already holds for them survives.
        """
        if self._inbound_ports:
            to.inbound_ports(self._inbound_ports)
        if self._port != -1:
            to.block_on_port(self._port, self._seconds)
        if self._public_key is not None:
            to.authorize_public_key(self._public_key)
        if self._private_key is not None:
            to.install_private_key(self._private_key)
        if self._user_metadata:
            to.user_metadata(self._user_metadata)
        if self._node_names:
            to.node_names(self._node_names)
        if self._networks:
            to.networks(self._networks)
        if self._tags:
            to.tags(self._tags)
        if not self._block_until_running:
            to.block_until_running(False)
        return to

    def clone(self) -> Self:
        """Independent copy: a fresh default instance with ``self`` copied onto it."""
        return self.copy_to(type(self)())

    def __copy__(self) -> Self:
        return self.clone()

    # =========================================================================
    # Setters
    # =========================================================================

    def inbound_ports(self, *ports: int | Iterable[int]) -> Self:
        """Ports to open on the node's firewall or security group."""
        items = check_elements(varargs(ports, "ports"), "ports must not contain null")
        self._inbound_ports = tuple(check_port(p) for p in items)
        return self

    def block_on_port(self, port: int, seconds: int) -> Self:
        """Wait up to ``seconds`` for ``port`` to accept connections after boot."""
        port = check_port(port)
        seconds = check_int(seconds, "seconds")
        check_argument(seconds > 0, f"seconds must be a positive integer, got {seconds}")
        self._port = port
        self._seconds = seconds
        return self

    def authorize_public_key(self, public_key: str) -> Self:
        public_key = check_str(public_key, "publicKey")
        check_argument(
            public_key.startswith(PUBLIC_KEY_PREFIXES),
            f"publicKey should start with one of {', '.join(PUBLIC_KEY_PREFIXES)}",
        )
        self._public_key = public_key
        return self

    def install_private_key(self, private_key: str) -> Self:
        private_key = check_str(private_key, "privateKey")
        first_line = private_key.lstrip().partition("\n")[0]
        check_argument(
            first_line.startswith("-----BEGIN ") and first_line.rstrip().endswith("PRIVATE KEY-----"),
            "privateKey should start with -----BEGIN ... PRIVATE KEY-----",
        )
        self._private_key = private_key
        return self

    def user_metadata(self, key_or_mapping: Mapping[str, str] | str, value: str | None = None) -> Self:
        """Add metadata entries: either a whole mapping or a single ``key, value``."""
        match key_or_mapping:
            case Mapping() as mapping:
                check_argument(value is None, "value must not be given with a mapping")
                entries = {
                    check_str(k, "userMetadata key"): check_str(v, "userMetadata value")
                    for k, v in mapping.items()
                }
            case _:
                entries = {check_str(key_or_mapping, "key"): check_str(value, "value")}
        self._user_metadata.update(entries)
        return self

    def node_names(self, node_names: Iterable[str]) -> Self:
        self._node_names = unique_strings(node_names, "nodeNames")
        return self

    def networks(self, networks: Iterable[str]) -> Self:
        self._networks = unique_strings(networks, "networks")
        return self

    def tags(self, tags: Iterable[str]) -> Self:
        self._tags = unique_strings(tags, "tags")
        return self

    def block_until_running(self, block_until_running: bool) -> Self:
        self._block_until_running = check_bool(block_until_running, "blockUntilRunning")
        return self

    # =========================================================================
    # Getters
    # =========================================================================

    def get_inbound_ports(self) -> tuple[int, ...]:
        return self._inbound_ports

    def get_port(self) -> int:
        return self._port

    def get_seconds(self) -> int:
        return self._seconds

    def get_public_key(self) -> str | None:
        return self._public_key

    def get_private_key(self) -> str | None:
        return self._private_key

    def get_user_metadata(self) -> dict[str, str]:
        return dict(self._user_metadata)

    def get_node_names(self) -> tuple[str, ...]:
        return self._node_names

    def get_networks(self) -> tuple[str, ...]:
        return self._networks

    def get_tags(self) -> tuple[str, ...]:
        return self._tags

    def should_block_until_running(self) -> bool:
        return self._block_until_running

    # =========================================================================
    # Representation
    # =========================================================================

    def _describe(self) -> dict[str, Any]:
        described: dict[str, Any] = {}
        if self._inbound_ports:
            described["inbound_ports"] = self._inbound_ports
        if self._port != -1:
            described["block_on_port"] = (self._port, self._seconds)
        if self._public_key is not None:
            described["public_key"] = "<set>"
        if self._private_key is not None:
            described["private_key"] = "<set>"
        if self._user_metadata:
            described["user_metadata"] = self._user_metadata
        if self._node_names:
            described["node_names"] = self._node_names
        if self._networks:
            described["networks"] = self._networks
        if self._tags:
            described["tags"] = self._tags
        if not self._block_until_running:
            described["block_until_running"] = False
        return described

    def __repr__(self) -> str:
        fields = ", ".join(f"{k}={v!r}" for k, v in self._describe().items())
        return f"{type(self).__name__}({fields})"


TemplateOptions.NONE = TemplateOptions()
