#!/usr/bin/env python3
"""
Configuration loader with multi-layer merging for deployments.

Layers (low to high priority):
1. System defaults (built-in presets)
2. User file (--config-file)
3. User CLI (--config)
4. Explicit flags (--signer, --deployer, --network)

Copyright (c) pmrm-deploy contributors. All rights reserved.
"""

import json
import logging
from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, Optional

from pmrm_deploy.core.errors import ConfigurationError, create_error_context


logger = logging.getLogger(__name__)


class ConfigLoader:
    """Configuration loader with preset support."""

    PRESET_DIR = Path(__file__).parent / "presets"

    @classmethod
    def load_preset(cls, preset_path: str) -> Dict[str, Any]:
        """
        Load a preset JSON file.

        Args:
            preset_path: Relative path to preset file from PRESET_DIR

        Returns:
            Dict containing preset configuration, or empty dict if not found
        """
        full_path = cls.PRESET_DIR / preset_path
        if not full_path.exists():
            return {}

        try:
            with open(full_path, "r") as f:
                return json.load(f)
        except (json.JSONDecodeError, IOError) as e:
            logger.warning("Could not load preset %s: %s", preset_path, e)
            return {}

    @classmethod
    def load_file(cls, config_file: str) -> Dict[str, Any]:
        """
        Load a user configuration file.

        Raises:
            ConfigurationError: If the file is missing or not a JSON object
        """
        context = create_error_context(
            operation="load_config", component="ConfigLoader", file_path=config_file
        )
        try:
            with open(config_file, "r") as f:
                data = json.load(f)
        except FileNotFoundError as e:
            raise ConfigurationError(
                f"Configuration file not found: {config_file}",
                context=context,
                cause=e,
            ) from e
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in {config_file}: {e}", context=context, cause=e
            ) from e

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Configuration in {config_file} must be a JSON object",
                context=context,
            )
        return data

    @classmethod
    def parse_json(cls, config_json: str) -> Dict[str, Any]:
        """
        Parse a JSON object given on the command line.

        Raises:
            ConfigurationError: If the string is not a JSON object
        """
        if not config_json or not config_json.strip():
            return {}
        try:
            data = json.loads(config_json)
        except json.JSONDecodeError as e:
            raise ConfigurationError(
                f"Invalid JSON in --config: {e}",
                context=create_error_context(
                    operation="load_config", component="ConfigLoader"
                ),
                cause=e,
                suggestions=['Example: --config \'{"network": "sepolia"}\''],
            ) from e
        if not isinstance(data, dict):
            raise ConfigurationError("--config must be a JSON object")
        return data

    @classmethod
    def deep_merge(cls, base: Dict, override: Dict) -> Dict:
        """
        Deep merge two dictionaries. Override wins conflicts.
        Nested dicts are merged, lists/primitives are replaced.

        Args:
            base: Base dictionary
            override: Override dictionary

        Returns:
            Merged dictionary
        """
        result = deepcopy(base)

        for key, value in override.items():
            # Documentation fields are replaced verbatim
            if key.startswith("_"):
                result[key] = deepcopy(value)
                continue

            if (
                key in result
                and isinstance(result[key], dict)
                and isinstance(value, dict)
            ):
                result[key] = cls.deep_merge(result[key], value)
            else:
                result[key] = deepcopy(value)

        return result

    @classmethod
    def validate(cls, config: Dict[str, Any]) -> None:
        """
        Check the shape of a merged configuration.

        Raises:
            ConfigurationError: If a section has the wrong type
        """
        context = create_error_context(
            operation="load_config", component="ConfigLoader"
        )

        for section in ("signer", "deployment", "networks"):
            if not isinstance(config.get(section), dict):
                raise ConfigurationError(
                    f"'{section}' must be a JSON object, got {config.get(section)!r}",
                    context=context,
                )

        for section in ("signer", "deployment"):
            name = config[section].get("type")
            if name is not None and not isinstance(name, str):
                raise ConfigurationError(
                    f"'{section}.type' must be a string, got {name!r}",
                    context=context,
                )

        network = config.get("network")
        if network is not None and not isinstance(network, str):
            raise ConfigurationError(
                f"'network' must be a string, got {network!r}", context=context
            )

        for name, settings in config["networks"].items():
            if not isinstance(settings, dict):
                raise ConfigurationError(
                    f"Network '{name}' must be a JSON object, got {settings!r}",
                    context=context,
                )

    @classmethod
    def apply_network(cls, config: Dict[str, Any]) -> Dict[str, Any]:
        """
        Merge the selected network's settings into the signer section.

        Explicit signer keys win over the network preset.

        Raises:
            ConfigurationError: If the selected network is not defined
        """
        network = config.get("network")
        if not network:
            return config

        networks = config.get("networks") or {}
        if network not in networks:
            available = ", ".join(sorted(networks)) or "none"
            raise ConfigurationError(
                f"Unknown network: {network}. Available: {available}",
                context=create_error_context(
                    operation="load_config", component="ConfigLoader", network=network
                ),
            )

        network_settings = dict(networks[network])
        network_settings["network"] = network
        config["signer"] = cls.deep_merge(network_settings, config.get("signer", {}))
        return config

    @classmethod
    def load_config(
        cls,
        config_file: Optional[str] = None,
        config_json: str = "",
        overrides: Optional[Dict[str, Any]] = None,
    ) -> Dict[str, Any]:
        """
        Load complete configuration with all layers applied.

        Args:
            config_file: Optional path to a JSON configuration file
            config_json: Optional JSON object string from the command line
            overrides: Explicit flag values; None values are ignored

        Returns:
            Complete configuration with defaults applied

        Raises:
            ConfigurationError: If any layer is invalid
        """
        config = cls.load_preset("defaults.json")

        if config_file:
            config = cls.deep_merge(config, cls.load_file(config_file))
            logger.debug("Loaded configuration file %s", config_file)

        config = cls.deep_merge(config, cls.parse_json(config_json))

        flags = {key: value for key, value in (overrides or {}).items() if value}
        if "signer" in flags:
            config = cls.deep_merge(config, {"signer": {"type": flags["signer"]}})
        if "deployer" in flags:
            config = cls.deep_merge(
                config, {"deployment": {"type": flags["deployer"]}}
            )
        if "network" in flags:
            config["network"] = flags["network"]

        cls.validate(config)
        return cls.apply_network(config)
