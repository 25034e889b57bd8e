"""Etherscan getsourcecode query and response handling."""

import json
import logging
from typing import Any, Optional

import requests

from .config import ExportConfig
from .errors import ExplorerError
from .types import ContractMetadata, SourceManifest


def make_contract_query(contract_address: str, rinkeby: bool = False, config: Optional[ExportConfig] = None) -> str:
    """Build the getsourcecode URL for an address. No validation is done here."""
    config = config or ExportConfig()
    contract_code_query = f"?module=contract&action=getsourcecode&address={contract_address}"
    return f"{config.endpoint(rinkeby)}{contract_code_query}"


def fetch_source_code(url: str, config: Optional[ExportConfig] = None) -> Any:
    config = config or ExportConfig()
    logging.info(f"Fetching {url}")
    response = requests.get(url, timeout=config.request_timeout)
    response.raise_for_status()
    return response.json()


def unwrap_source_code(source_code: str) -> Optional[Any]:
    """
    Parse the SourceCode field.

    Etherscan wraps some standard-json payloads in an extra pair of braces
    ("{{ ... }}"), so a failed parse is retried with one character removed
    from each end. Returns None when neither attempt parses.
    """
    try:
        return json.loads(source_code)
    except (TypeError, ValueError):
        pass

    unwrapped = (source_code or "").strip()[1:-1]
    try:
        return json.loads(unwrapped)
    except ValueError:
        return None


def handle_singleton_source(contract_name: str, contract_content: str, config: Optional[ExportConfig] = None) -> SourceManifest:
    config = config or ExportConfig()
    contract_file = f"{contract_name}{config.sol_ext}"
    return {contract_file: {"content": contract_content}}


def extract_metadata(response: Any, config: Optional[ExportConfig] = None) -> ContractMetadata:
    config = config or ExportConfig()
    if not isinstance(response, dict):
        raise ExplorerError(f"Unexpected getsourcecode response: {response!r}")

    # check if the request was successful
    if str(response.get("status")) == config.fail_status:
        raise ExplorerError(response.get("result"))

    result = response.get("result")
    if not isinstance(result, list) or not result or not isinstance(result[0], dict):
        raise ExplorerError(f"Unexpected getsourcecode response: {response!r}")

    return ContractMetadata.from_record(result[0])


def process_explorer_response(response: Any, config: Optional[ExportConfig] = None) -> SourceManifest:
    """Map the explorer payload to a manifest of source path -> {"content": ...}."""
    config = config or ExportConfig()
    metadata = extract_metadata(response, config)

    if metadata.compiler_version:
        logging.info(f"Compiler version: {metadata.compiler_version}")

    parsed = unwrap_source_code(metadata.source_code)
    if isinstance(parsed, dict) and isinstance(parsed.get("sources"), dict):
        return parsed["sources"]

    # single file contract, or a payload that is not JSON at all
    if metadata.contract_name:
        return handle_singleton_source(metadata.contract_name, metadata.source_code, config)

    return {}
