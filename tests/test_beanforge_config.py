"""Test configuration file loading."""

import json

import pytest
from pydantic import ValidationError

from beanforge import DefaultNamingStrategy, HostType, SnakeCaseNamingStrategy
from beanforge.config import BeanForgeConfig, find_config, load_config
from beanforge.render import PhpRenderer, PythonRenderer


def test_defaults():
    config = BeanForgeConfig()

    assert config.target == "php"
    assert isinstance(config.naming_strategy(), DefaultNamingStrategy)
    assert isinstance(config.renderer(), PhpRenderer)
    assert config.type_mapper().resolve("bigint") == HostType.STRING


def test_python_target_defaults_to_snake_case():
    config = BeanForgeConfig(target="python")

    assert isinstance(config.naming_strategy(), SnakeCaseNamingStrategy)
    assert isinstance(config.renderer(), PythonRenderer)


def test_explicit_naming_wins():
    config = BeanForgeConfig(target="python", naming="camel")

    assert isinstance(config.naming_strategy(), DefaultNamingStrategy)


def test_invalid_target():
    with pytest.raises(ValidationError):
        BeanForgeConfig(target="cobol")


def test_invalid_override():
    with pytest.raises(ValidationError):
        BeanForgeConfig(type_overrides={"bigint": "long"})


def test_load_yaml_config(tmp_path):
    config_path = tmp_path / "beanforge.yaml"
    config_path.write_text(
        """
target: python
type_overrides:
  bigint: int
  geometry: string
"""
    )

    config = load_config(config_path)

    assert config.target == "python"
    assert config.type_overrides == {"bigint": HostType.INT, "geometry": HostType.STRING}
    assert config.type_mapper().resolve("bigint") == HostType.INT


def test_load_json_config(tmp_path):
    config_path = tmp_path / "beanforge.json"
    config_path.write_text(json.dumps({"target": "php", "naming": "snake"}))

    config = load_config(config_path)

    assert isinstance(config.naming_strategy(), SnakeCaseNamingStrategy)


def test_load_empty_yaml_config(tmp_path):
    config_path = tmp_path / "beanforge.yml"
    config_path.write_text("")

    assert load_config(config_path) == BeanForgeConfig()


def test_load_missing_config(tmp_path):
    with pytest.raises(FileNotFoundError):
        load_config(tmp_path / "beanforge.yaml")


def test_load_unsupported_format(tmp_path):
    config_path = tmp_path / "beanforge.toml"
    config_path.write_text("target = 'php'")

    with pytest.raises(ValueError, match="Unsupported config format"):
        load_config(config_path)


def test_find_config_searches_parents(tmp_path):
    config_path = tmp_path / "beanforge.yaml"
    config_path.write_text("target: php\n")
    nested = tmp_path / "a" / "b"
    nested.mkdir(parents=True)

    assert find_config(nested) == config_path.resolve()
