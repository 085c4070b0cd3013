"""TOML-based template options configuration.

Loads ~/.cumulus/defaults.toml (global) and cumulus.toml (project),
merges them, and resolves named templates into template options.

    [templates.web]
    provider = "softlayer"
    domain_name = "example.com"
    inbound_ports = [22, 80, 443]
    block_on_port = { port = 22, seconds = 120 }
    hourly_billing_flag = true

    [templates.web.user_metadata]
    team = "platform"

Every key names a setter and is applied through it, so a configured
template is validated exactly like one built in code.
"""

from __future__ import annotations

import tomllib
from pathlib import Path
from typing import Any

from loguru import logger

from cumulus.compute.options import TemplateOptions
from cumulus.core.exceptions import ConfigurationError
from cumulus.providers.softlayer.options import SoftLayerTemplateOptions

type RawConfig = dict[str, Any]

GLOBAL_CONFIG_PATH = Path.home() / ".cumulus" / "defaults.toml"
PROJECT_CONFIG_NAME = "cumulus.toml"

# Setters whose TOML table is passed as a single mapping argument.
_MAPPING_OPTIONS = frozenset({"user_metadata"})


def _deep_merge(base: RawConfig, override: RawConfig) -> RawConfig:
    result = dict(base)
    for key, value in override.items():
        if key in result and isinstance(result[key], dict) and isinstance(value, dict):
            result[key] = _deep_merge(result[key], value)
        else:
            result[key] = value
    return result


def _read_toml(path: Path) -> RawConfig:
    if not path.is_file():
        return {}
    with path.open("rb") as f:
        try:
            return tomllib.load(f)
        except tomllib.TOMLDecodeError as e:
            raise ConfigurationError(f"Invalid TOML in {path}: {e}") from e


def load_config(
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> RawConfig:
    global_cfg = _read_toml(global_path or GLOBAL_CONFIG_PATH)
    project_path = (project_dir or Path.cwd()) / PROJECT_CONFIG_NAME
    project_cfg = _read_toml(project_path)

    merged = _deep_merge(global_cfg, project_cfg)
    merged.setdefault("templates", {})
    return merged


def _get_provider_map() -> dict[str, type[TemplateOptions]]:
    return {
        "generic": TemplateOptions,
        "softlayer": SoftLayerTemplateOptions,
    }


def _setter_names(cls: type[TemplateOptions]) -> frozenset[str]:
    return frozenset(
        name
        for klass in cls.__mro__
        if issubclass(klass, TemplateOptions)
        for name, attr in vars(klass).items()
        if callable(attr)
        and not name.startswith(("_", "get_", "is_", "should_"))
        and name not in ("copy_to", "clone")
    )


def _apply(options: TemplateOptions, key: str, value: Any) -> None:
    setter = getattr(options, key)
    match value:
        case dict() if key in _MAPPING_OPTIONS:
            setter(value)
        case dict():
            try:
                setter(**value)
            except TypeError as e:
                raise ConfigurationError(f"Invalid table for option '{key}': {e}") from e
        case _:
            try:
                setter(value)
            except TypeError as e:
                raise ConfigurationError(f"Invalid value for option '{key}': {e}") from e


def build_template_options(name: str, raw: RawConfig) -> TemplateOptions:
    raw = dict(raw)
    provider_type = raw.pop("provider", "generic")

    provider_map = _get_provider_map()
    cls = provider_map.get(provider_type)
    if cls is None:
        raise ConfigurationError(
            f"Unknown provider '{provider_type}' in template '{name}'. "
            f"Valid: {', '.join(provider_map)}"
        )

    allowed = _setter_names(cls)
    unknown = sorted(set(raw) - allowed)
    if unknown:
        raise ConfigurationError(
            f"Unknown option(s) {', '.join(unknown)} in template '{name}' "
            f"for provider '{provider_type}'"
        )

    options = cls()
    for key, value in raw.items():
        _apply(options, key, value)
    return options


def resolve_template_options(
    name: str,
    *,
    project_dir: Path | None = None,
    global_path: Path | None = None,
) -> TemplateOptions:
    config = load_config(project_dir=project_dir, global_path=global_path)

    templates = config["templates"]
    if name not in templates:
        raise ConfigurationError(
            f"Template '{name}' not found. Available: {', '.join(templates) or 'none'}"
        )

    options = build_template_options(name, templates[name])
    logger.debug("Resolved template {name}: {options!r}", name=name, options=options)
    return options
