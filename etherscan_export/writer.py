"""Write manifest entries to disk."""

import logging
import os
from pathlib import PurePosixPath
from typing import Any, Optional

from .config import ExportConfig
from .types import SourceManifest, WrittenFile


def is_sol_file(contract_path: str, config: Optional[ExportConfig] = None) -> bool:
    config = config or ExportConfig()
    return contract_path.endswith(config.sol_ext)


def is_module_path(contract_path: str, config: Optional[ExportConfig] = None) -> bool:
    """True for downloaded dependencies such as "@openzeppelin/contracts/...sol"."""
    config = config or ExportConfig()
    return is_sol_file(contract_path, config) and contract_path.startswith(config.module_marker)


def safe_relpath(contract_path: str) -> PurePosixPath:
    """Relative form of a manifest key; rejects keys that would leave the root."""
    rel = PurePosixPath(contract_path.replace("\\", "/").lstrip("/"))
    if any(part == ".." for part in rel.parts) or str(rel) in ("", "."):
        raise ValueError(f"Unsafe source path: {contract_path!r}")
    return rel


def resolve_contract_path(contract_path: str, root: Optional[str] = None, config: Optional[ExportConfig] = None) -> str:
    """
    Map a manifest key to an absolute path under root (the working directory
    by default). Modules go under the base contract path so they are inside
    the compiler's include scope.
    """
    config = config or ExportConfig()
    root = os.path.abspath(root or os.getcwd())

    rel = safe_relpath(contract_path)
    if is_module_path(str(rel), config):
        rel = PurePosixPath(config.base_contract_path) / rel

    return os.path.join(root, *rel.parts)


def entry_content(entry: Any) -> str:
    if isinstance(entry, dict):
        entry = entry.get("content")
    return entry if isinstance(entry, str) else ""


def write_contracts(
    scripts_to_content: SourceManifest,
    root: Optional[str] = None,
    config: Optional[ExportConfig] = None,
) -> list[WrittenFile]:
    """Write every .sol entry of the manifest, overwriting existing files."""
    config = config or ExportConfig()
    written = []

    for contract_path, entry in scripts_to_content.items():
        # skip anything that is not a solidity source
        if not is_sol_file(contract_path, config):
            logging.debug(f"Skipping non-solidity path: {contract_path}")
            continue

        try:
            full_path = resolve_contract_path(contract_path, root, config)
        except ValueError as e:
            logging.warning(f"Skipping {e}")
            continue

        content = entry_content(entry)

        os.makedirs(os.path.dirname(full_path), exist_ok=True)
        with open(full_path, "w", encoding="utf-8") as f:
            f.write(content)

        logging.debug(f"Wrote {full_path}")
        written.append(WrittenFile(path=full_path, content=content))

    return written
