"""Etherscan Export - Download verified contract sources from Etherscan."""

from .config import ExportConfig, load_config
from .errors import (
    ExportError,
    InvalidAddressError,
    ExplorerError,
    EmptyManifestError,
    ConfigError,
)
from .explorer import (
    make_contract_query,
    fetch_source_code,
    unwrap_source_code,
    handle_singleton_source,
    process_explorer_response,
)
from .writer import (
    is_sol_file,
    is_module_path,
    resolve_contract_path,
    write_contracts,
)
from .exporter import export_contract, normalize_address
from .types import (
    ContractMetadata,
    ExportResult,
    SourceManifest,
    WrittenFile,
)

__version__ = "1.0.0"
__all__ = [
    "ExportConfig",
    "load_config",
    "ExportError",
    "InvalidAddressError",
    "ExplorerError",
    "EmptyManifestError",
    "ConfigError",
    "make_contract_query",
    "fetch_source_code",
    "unwrap_source_code",
    "handle_singleton_source",
    "process_explorer_response",
    "is_sol_file",
    "is_module_path",
    "resolve_contract_path",
    "write_contracts",
    "export_contract",
    "normalize_address",
    "ContractMetadata",
    "ExportResult",
    "SourceManifest",
    "WrittenFile",
]
