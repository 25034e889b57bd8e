"""Runtime configuration for Etherscan Export."""

import logging
import os
from dataclasses import dataclass, fields, replace
from typing import Optional

import yaml

from .errors import ConfigError


ETHERSCAN_API = "https://api.etherscan.io/api"
ETHERSCAN_RINKEBY_API = "https://api-rinkeby.etherscan.io/api"

# Environment variable -> config field
ENV_OVERRIDES = {
    "ETHERSCAN_API_URL": "api_url",
    "ETHERSCAN_RINKEBY_API_URL": "rinkeby_api_url",
    "ETHERSCAN_EXPORT_BASE_PATH": "base_contract_path",
    "ETHERSCAN_EXPORT_TIMEOUT": "request_timeout",
}


@dataclass(frozen=True)
class ExportConfig:
    """Endpoints and filesystem conventions used by the pipeline."""
    api_url: str = ETHERSCAN_API
    rinkeby_api_url: str = ETHERSCAN_RINKEBY_API
    fail_status: str = "0"
    base_contract_path: str = "contracts"
    module_marker: str = "@"
    sol_ext: str = ".sol"
    request_timeout: float = 30
    success_message: str = "Contracts downloaded successfully!"

    def endpoint(self, rinkeby: bool = False) -> str:
        return self.rinkeby_api_url if rinkeby else self.api_url


def _coerce(name: str, value):
    if name == "request_timeout":
        try:
            timeout = float(value)
        except (TypeError, ValueError):
            raise ConfigError(f"request_timeout must be a number, got {value!r}")
        if timeout <= 0:
            raise ConfigError(f"request_timeout must be positive, got {value!r}")
        return timeout
    if not isinstance(value, str) or not value:
        raise ConfigError(f"{name} must be a non-empty string, got {value!r}")
    return value


def load_config_file(config_path: str) -> dict:
    try:
        with open(config_path) as f:
            data = yaml.safe_load(f)
    except (OSError, yaml.YAMLError) as e:
        raise ConfigError(f"Error loading config file {config_path}: {e}")

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ConfigError(f"Config file {config_path} must contain a mapping")
    return data


def load_config(config_path: Optional[str] = None, environ: Optional[dict] = None) -> ExportConfig:
    """
    Build the config once: defaults, then the YAML file, then environment
    variables.
    """
    environ = os.environ if environ is None else environ
    known = {f.name for f in fields(ExportConfig)}
    overrides = {}

    if config_path:
        for key, value in load_config_file(config_path).items():
            if key not in known:
                raise ConfigError(f"Unknown config key: {key}")
            overrides[key] = _coerce(key, value)
        logging.debug(f"Loaded config from {config_path}")

    for env_name, key in ENV_OVERRIDES.items():
        value = environ.get(env_name)
        if value:
            overrides[key] = _coerce(key, value.strip())

    return replace(ExportConfig(), **overrides)
