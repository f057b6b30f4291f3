"""Configuration file format for beanforge."""

from pathlib import Path
from typing import Literal

from pydantic import BaseModel, Field

from beanforge.core.naming import NamingStrategy, get_naming_strategy
from beanforge.core.types import HostType, TypeMapper
from beanforge.render import CodeRenderer, get_renderer

CONFIG_FILE_NAMES = ["beanforge.yaml", "beanforge.yml", "beanforge.json"]

# Naming used when the config doesn't pick one
_TARGET_NAMING = {"php": "camel", "python": "snake"}


class BeanForgeConfig(BaseModel):
    """beanforge configuration file format.

    Can be saved as beanforge.yaml or beanforge.json.

    Example YAML:
        target: php
        naming: camel
        type_overrides:
          bigint: int
          json: string

    Example JSON:
        {
          "target": "python",
          "type_overrides": {"decimal": "float"}
        }
    """

    target: Literal["php", "python"] = Field(default="php", description="Language of the generated code")
    naming: Literal["camel", "snake"] | None = Field(
        default=None, description="Naming strategy (defaults to camel for php, snake for python)"
    )
    type_overrides: dict[str, HostType] = Field(
        default_factory=dict, description="Host type overrides keyed by logical column type"
    )

    def naming_strategy(self) -> NamingStrategy:
        return get_naming_strategy(self.naming or _TARGET_NAMING[self.target])

    def type_mapper(self) -> TypeMapper:
        return TypeMapper(overrides=self.type_overrides)

    def renderer(self) -> CodeRenderer:
        return get_renderer(self.target)


def load_config(config_path: Path) -> BeanForgeConfig:
    """Load configuration from YAML or JSON file.

    Args:
        config_path: Path to config file (beanforge.yaml or beanforge.json)

    Returns:
        Loaded and validated configuration

    Raises:
        FileNotFoundError: If config file doesn't exist
        ValueError: If config file format is invalid
    """
    import json

    config_path = Path(config_path)
    if not config_path.exists():
        raise FileNotFoundError(f"Config file not found: {config_path}")

    suffix = config_path.suffix.lower()

    if suffix in {".yaml", ".yml"}:
        import yaml

        with open(config_path) as f:
            data = yaml.safe_load(f)
    elif suffix == ".json":
        with open(config_path) as f:
            data = json.load(f)
    else:
        raise ValueError(f"Unsupported config format: {suffix}. Use .yaml, .yml, or .json")

    return BeanForgeConfig(**(data or {}))


def find_config(start_dir: Path | None = None) -> Path | None:
    """Find config file by searching up the directory tree.

    Args:
        start_dir: Directory to start searching from (defaults to cwd)

    Returns:
        Path to config file if found, None otherwise
    """
    current = (start_dir or Path.cwd()).resolve()

    while True:
        for name in CONFIG_FILE_NAMES:
            config_path = current / name
            if config_path.exists():
                return config_path

        parent = current.parent
        if parent == current:
            # Reached root
            break
        current = parent

    return None
