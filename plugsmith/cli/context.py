# Copyright (c) Microsoft Corporation.
# Licensed under the MIT License.

from __future__ import annotations  # PEP 563: Postponed evaluation of annotations

import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, TYPE_CHECKING

# Type hints only - settings imported lazily inside methods
if TYPE_CHECKING:
    from plugsmith.settings import GeneratorConfig

logger = logging.getLogger(__name__)


@dataclass
class ApplicationContext:
    """CLI execution context with GeneratorConfig loading and CLI argument handling."""

    config_file: Path | None = None
    overrides: dict[str, Any] = field(default_factory=dict)

    # Loaded configuration
    config: GeneratorConfig | None = None

    @classmethod
    def from_cli_args(cls, config_file: Path | None, log_level: str | None) -> ApplicationContext:
        """Create context from CLI arguments and load configuration.

        Logging is configured after loading so a level from the config file
        applies when none was given on the command line.
        """
        from plugsmith._internal.logging import setup_logging

        context = cls(config_file=config_file)
        if log_level:
            context.overrides["logging"] = {"level": log_level}

        context.load_configuration()
        setup_logging(level=context.config.logging.level)
        logger.debug(f"CLI initialized with log level {context.config.logging.level}")

        return context

    def load_configuration(self) -> None:
        from plugsmith.settings import load_config

        # Pydantic handles validation and priority (CLI overrides > env > file > defaults)
        self.config = load_config(project_file=self.config_file, **self.overrides)

    def get_effective_config(self) -> GeneratorConfig:
        if not self.config:
            self.load_configuration()
        return self.config
