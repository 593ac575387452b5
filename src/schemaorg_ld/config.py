from __future__ import annotations

import logging
import os
from functools import lru_cache
from pathlib import Path
from typing import Optional, Type, TypeVar, Any, Dict, Iterable
from pydantic import BaseModel
from yaml import safe_load, YAMLError
from dotenv import load_dotenv, find_dotenv

logger = logging.getLogger(__name__)

T = TypeVar("T", bound="SchemaOrgConfig")

CONFIG_NAME = "schemaorg_ld"
HOME_CONFIG_DIR = Path("~/.schemaorg_ld/").expanduser()

# switch honoured by earlier releases, any non-empty value requests minified output
LEGACY_MINIFIED_ENV = "SCHEMA_DOT_ORG_MINIFIED_JSON"


class SchemaOrgConfig(BaseModel):
    """
    Output settings for JSON-LD rendering.

    minified_json: render compact JSON by default
    production: production runtime, also renders compact JSON by default
    """
    minified_json: bool = False
    production: bool = False

    @property
    def pretty(self) -> bool:
        return not (self.production or self.minified_json)


def _read_yaml(path: Path) -> Dict[str, Any]:
    if not path.exists():
        return {}
    with path.open("r") as f:
        data = safe_load(f)
    return data or {}


def _deep_merge(base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
    """
    Deep-merge two dicts. Dicts merge recursively; for non-dicts (incl. lists),
    the override wins entirely.
    """
    out = dict(base)
    for k, v in override.items():
        if k in out and isinstance(out[k], dict) and isinstance(v, dict):
            out[k] = _deep_merge(out[k], v)
        else:
            out[k] = v
    return out


def _load_dotenv_files(config_name: str) -> None:
    dotenv_path = find_dotenv(usecwd=True)
    if dotenv_path:
        logger.debug("Loading .env from: %s", dotenv_path)
        load_dotenv(dotenv_path, override=False)

    specific = Path.cwd() / f"{config_name}.env"
    if specific.exists():
        logger.debug("Loading config-specific .env from: %s", specific)
        load_dotenv(specific, override=False)


class ConfigLoader:
    """
    Layered config loader with deep merging.

    Load order (low → high priority):
      1) base:   ~/.schemaorg_ld/{name}.yaml (or .yml)
      2) cwd:    ./{name}.yaml (or .yml)
      3) file:   explicit `path` if provided
      4) env:    YAML content from env var {NAME}_CONFIG
      5) env:    one variable per field, {NAME}_{field}

    Later layers override earlier ones (deep merge).
    """
    def __init__(self, config_name: str = CONFIG_NAME):
        self.config_name = config_name or CONFIG_NAME

    def _candidate_paths(self, path: Optional[str | Path]) -> Iterable[Path]:
        explicit = [Path(path)] if path else []
        base = [
            HOME_CONFIG_DIR / f"{self.config_name}.yaml",
            HOME_CONFIG_DIR / f"{self.config_name}.yml",
        ]
        cwd = [
            Path.cwd() / f"{self.config_name}.yaml",
            Path.cwd() / f"{self.config_name}.yml",
        ]
        return base + cwd + explicit

    def _env_config(self, config_class: Type[T]) -> Dict[str, Any]:
        env_config: Dict[str, Any] = {}

        env_var_name = f"{self.config_name.upper()}_CONFIG"
        env_content = os.environ.get(env_var_name)
        if env_content:
            try:
                d = safe_load(env_content)
            except YAMLError as e:
                raise ValueError(f"Failed to parse {env_var_name}: {e}") from e
            if d and not isinstance(d, dict):
                raise ValueError(f"{env_var_name} must contain a YAML mapping")
            env_config = d or {}

        env_prefix = f"{self.config_name.upper()}_"
        for field_name in config_class.model_fields.keys():
            for env_var_key in (env_prefix + field_name, env_prefix + field_name.upper()):
                env_value = os.environ.get(env_var_key)
                if env_value:
                    env_config[field_name] = env_value
                    break
        return env_config

    def load_config(self, config_class: Type[T] = None, path: Optional[str | Path] = None) -> T:
        config_class = config_class or SchemaOrgConfig
        if path and not Path(path).exists():
            raise FileNotFoundError(f"Config file not found: {path}")

        _load_dotenv_files(self.config_name)

        merged: Dict[str, Any] = {}
        for p in self._candidate_paths(path):
            d = _read_yaml(p)
            if d:
                logger.debug("Config layer %s: %s", p, d)
                merged = _deep_merge(merged, d)

        env_config = self._env_config(config_class)
        if env_config:
            merged = _deep_merge(merged, env_config)

        if os.environ.get(LEGACY_MINIFIED_ENV) and "minified_json" in config_class.model_fields:
            merged["minified_json"] = True

        return config_class(**merged)


@lru_cache(maxsize=1)
def load_config() -> SchemaOrgConfig:
    """
    Load the configuration for schemaorg_ld.
    """
    return ConfigLoader(CONFIG_NAME).load_config(SchemaOrgConfig)


def reset_config() -> None:
    load_config.cache_clear()


def pretty_default(config: Optional[SchemaOrgConfig] = None) -> bool:
    """Pretty-print unless running in production or minified output was requested."""
    return (config or load_config()).pretty
