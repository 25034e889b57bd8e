"""Type definitions for Etherscan Export."""

from dataclasses import dataclass, field
from typing import Any


# Virtual source path -> {"content": "<source text>"}
SourceManifest = dict[str, Any]


@dataclass
class ContractMetadata:
    """The parts of a getsourcecode record used by the exporter."""
    source_code: str
    contract_name: str
    compiler_version: str = ""

    @classmethod
    def from_record(cls, record: dict) -> "ContractMetadata":
        return cls(
            source_code=record.get("SourceCode") or "",
            contract_name=record.get("ContractName") or "",
            compiler_version=record.get("CompilerVersion") or "",
        )


@dataclass
class WrittenFile:
    """A source file persisted to disk."""
    path: str
    content: str


@dataclass
class ExportResult:
    """Result of exporting one contract."""
    address: str
    network: str
    files: list[WrittenFile] = field(default_factory=list)
