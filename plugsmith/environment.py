# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

"""Processing environment for factory generation.

Bundles the three sinks the generator writes to:
- Filer: creates generated source artifacts under an output directory
- ServiceRegistry: records providers of service contracts and persists them
  as a JSON manifest, so tooling can find generated factories without
  importing every generated module
- Messager: collects diagnostics and forwards them to logging

Logging Strategy:
    - DEBUG: Individual artifacts created, providers registered
    - INFO: Manifest written
    - ERROR: Diagnostics reported through Messager.report_error()
"""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Optional, TextIO

from .declarations import Declaration
from .errors import FilerError

logger = logging.getLogger(__name__)

MANIFEST_VERSION = "1.0"


# ============================================================================
# Generated Artifacts
# ============================================================================

@dataclass(frozen=True)
class SourceArtifact:
    """A generated source file reserved by the Filer.

    Attributes:
        qualified_name: Dotted name of the generated module
        path: File the module is written to
        originating: Declaration the module was generated for
    """

    qualified_name: str
    path: Path
    originating: Optional[Declaration] = None

    def open_writer(self) -> TextIO:
        """Open the artifact for writing, creating parent directories."""
        self.path.parent.mkdir(parents=True, exist_ok=True)
        return open(self.path, "w", encoding="utf-8")


class Filer:
    """Creates generated source files under an output directory.

    Each qualified name can be created once per Filer; a second request for
    the same name fails the same way an I/O error would.
    """

    def __init__(self, output_dir: Path):
        self.output_dir = Path(output_dir)
        self._created: Dict[str, SourceArtifact] = {}

    def create_source_file(self, qualified_name: str, originating: Optional[Declaration] = None) -> SourceArtifact:
        """Reserve the artifact for a generated module.

        Raises:
            FilerError: If the module was already created in this run
        """
        if qualified_name in self._created:
            raise FilerError(f"Attempt to recreate a file for type {qualified_name}")
        path = self.output_dir.joinpath(*qualified_name.split('.')).with_suffix('.py')
        artifact = SourceArtifact(qualified_name, path, originating)
        self._created[qualified_name] = artifact
        logger.debug(f"Created source artifact {qualified_name} -> {path}")
        return artifact

    @property
    def created(self) -> List[SourceArtifact]:
        return list(self._created.values())


# ============================================================================
# Service Registry
# ============================================================================

class ServiceRegistry:
    """Records which generated modules provide which service contracts."""

    def __init__(self):
        self._providers: Dict[str, Dict[str, Optional[Declaration]]] = {}

    def register_provider(self, provider: str, contract: str, originating: Optional[Declaration] = None) -> None:
        providers = self._providers.setdefault(contract, {})
        if provider not in providers:
            providers[provider] = originating
            logger.debug(f"Registered {provider} as provider of {contract}")

    def providers(self, contract: str) -> List[str]:
        return list(self._providers.get(contract, {}))

    @property
    def contracts(self) -> List[str]:
        return list(self._providers)

    def to_manifest(self) -> Dict[str, Any]:
        """Build the manifest dict (no timestamp, so identical runs match)."""
        services = {}
        for contract, providers in self._providers.items():
            services[contract] = [
                {
                    "provider": provider,
                    "originating": originating.qualified_name if originating else None,
                }
                for provider, originating in providers.items()
            ]
        return {"version": MANIFEST_VERSION, "services": services}

    def write(self, path: Path) -> Path:
        """Write the manifest as JSON, creating the parent directory."""
        path = Path(path)
        path.parent.mkdir(parents=True, exist_ok=True)
        with open(path, "w", encoding="utf-8") as f:
            json.dump(self.to_manifest(), f, indent=2, sort_keys=True)
            f.write("\n")
        total = sum(len(providers) for providers in self._providers.values())
        logger.info(f"Wrote service manifest with {total} providers to {path}")
        return path


def load_services(path: Path) -> Dict[str, List[str]]:
    """Load a service manifest written by ServiceRegistry.write().

    Returns:
        Mapping of contract name to provider names, in manifest order

    Raises:
        FileNotFoundError: If the manifest doesn't exist
        ValueError: If the manifest version or structure is unknown
    """
    with open(path, encoding="utf-8") as f:
        data = json.load(f)

    version = data.get("version")
    if version != MANIFEST_VERSION:
        raise ValueError(f"Unknown service manifest version: {version}. Expected '{MANIFEST_VERSION}'.")
    if not isinstance(data.get("services"), dict):
        raise ValueError(f"Service manifest {path} is missing 'services'")

    return {
        contract: [entry["provider"] for entry in entries]
        for contract, entries in data["services"].items()
    }


# ============================================================================
# Diagnostics
# ============================================================================

class Messager:
    """Diagnostic sink; errors are kept so the caller can fail the build."""

    def __init__(self):
        self.errors: List[str] = []

    def report_error(self, message: str) -> None:
        self.errors.append(message)
        logger.error(message)

    def report_warning(self, message: str) -> None:
        logger.warning(message)

    def report_note(self, message: str) -> None:
        logger.info(message)

    @property
    def error_raised(self) -> bool:
        return bool(self.errors)


@dataclass
class ProcessingEnvironment:
    """Sinks shared by one generation run."""

    filer: Filer
    messager: Messager = field(default_factory=Messager)
    services: ServiceRegistry = field(default_factory=ServiceRegistry)

    @classmethod
    def for_output_dir(cls, output_dir: Path) -> "ProcessingEnvironment":
        return cls(filer=Filer(output_dir))
