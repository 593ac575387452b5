"""
Build schema entity graphs from plain documents.

A document is a mapping carrying "@type" plus the attributes of that type,
keyed either by Python field name (same_as) or by JSON-LD key (sameAs).
Nested mappings with their own "@type" become nested entities:

    "@type": Event
    name: Concert
    start_date: "2026-11-01T20:00"
    location:
      "@type": Place
      name: Town Hall
"""

from __future__ import annotations

import json
import logging
from datetime import date
from pathlib import Path
from typing import Any, Mapping

import yaml

from schemaorg_ld.model.base import SchemaEntity
from schemaorg_ld.registry import Registry
import schemaorg_ld.types  # noqa: F401  registers the catalogue

logger = logging.getLogger(__name__)

TYPE_KEY = "@type"
IGNORED_KEYS = ("@context",)


def _resolve(value: Any) -> Any:
    if isinstance(value, Mapping) and TYPE_KEY in value:
        return load_entity(value)
    if isinstance(value, list):
        return [_resolve(v) for v in value]
    # YAML reads unquoted dates as date/datetime, entities keep ISO 8601 strings
    if isinstance(value, date):
        return value.isoformat()
    return value


def load_entity(data: Mapping[str, Any]) -> SchemaEntity:
    if not isinstance(data, Mapping) or TYPE_KEY not in data:
        raise ValueError(f"Document has no '{TYPE_KEY}' key")
    entity_type = Registry.get(str(data[TYPE_KEY]))
    values = {
        k: _resolve(v)
        for k, v in data.items()
        if k != TYPE_KEY and k not in IGNORED_KEYS
    }
    logger.debug("Loading %s with attributes %s", entity_type.__name__, list(values))
    return entity_type.model_validate(values)


def load_file(path: str | Path) -> SchemaEntity:
    path = Path(path)
    suffix = path.suffix.lower()
    with path.open("r", encoding="utf-8") as f:
        if suffix == ".json":
            data = json.load(f)
        elif suffix in (".yaml", ".yml"):
            data = yaml.safe_load(f)
        else:
            raise ValueError(f"Unsupported document format: {path.suffix or path.name}")
    return load_entity(data)
