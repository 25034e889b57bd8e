"""Export pipeline: query -> unwrap -> write."""

import logging
from typing import Optional

from web3 import Web3

from .config import ExportConfig
from .errors import EmptyManifestError, InvalidAddressError
from .explorer import fetch_source_code, make_contract_query, process_explorer_response
from .types import ExportResult
from .writer import write_contracts


def normalize_address(contract_address: Optional[str]) -> str:
    """Validate an address and return its checksummed form."""
    if not contract_address or not contract_address.strip():
        raise InvalidAddressError("No valid contract address provided!")

    address = contract_address.strip()
    if not Web3.is_address(address):
        raise InvalidAddressError(f"Invalid contract address: {contract_address}")
    return Web3.to_checksum_address(address)


def export_contract(
    contract_address: str,
    rinkeby: bool = False,
    output_dir: Optional[str] = None,
    config: Optional[ExportConfig] = None,
    strict_empty: bool = False,
) -> ExportResult:
    """
    Download the verified sources of a contract and write them under
    output_dir (the working directory by default).

    Raises InvalidAddressError before any request is made, ExplorerError when
    the explorer reports a failure, and EmptyManifestError when strict_empty
    is set and nothing could be recovered. Filesystem and HTTP errors
    propagate unchanged.
    """
    config = config or ExportConfig()
    address = normalize_address(contract_address)
    network = "rinkeby" if rinkeby else "mainnet"

    url = make_contract_query(address, rinkeby, config)
    response = fetch_source_code(url, config)
    manifest = process_explorer_response(response, config)

    if not manifest:
        if strict_empty:
            raise EmptyManifestError(f"No source files found for {address}")
        logging.warning(f"No source files found for {address}")
    else:
        logging.info(f"Extracted {len(manifest)} source file(s) for {address} on {network}")

    files = write_contracts(manifest, output_dir, config)
    return ExportResult(address=address, network=network, files=files)
