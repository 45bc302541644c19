"""Pricing catalog: load the YAML tables and answer questions about categories."""

from __future__ import annotations

from functools import lru_cache
from pathlib import Path
from typing import Any, Mapping, Optional

import yaml

from costkit.config import settings
from costkit.logging import get_logger
from costkit.types import Catalog

logger = get_logger(__name__)

# Never offered as pickable options: one is a color picker fed by `palette`,
# the other carries brand assets.
_UNLISTED = frozenset({"persistent", "customColors"})


def load_catalog(path: str | Path | None = None) -> Catalog:
    """Load and validate a pricing catalog from a YAML file.

    Defaults to the configured override (``COSTKIT_CATALOG``) or the packaged
    catalog. Raises ValueError when the file is empty or fails validation.
    """
    catalog_path = Path(path) if path else settings.resolved_catalog_path()
    with open(catalog_path, "r", encoding="utf-8") as f:
        try:
            raw = yaml.safe_load(f)
        except yaml.YAMLError as exc:
            raise ValueError(f"Invalid catalog YAML in {catalog_path}") from exc

    if not isinstance(raw, dict) or "categories" not in raw:
        raise ValueError(f"No 'categories' key found in {catalog_path}")

    catalog = Catalog.model_validate(raw)
    logger.debug("Loaded %d categories from %s", len(catalog.categories), catalog_path)
    return catalog


@lru_cache(maxsize=1)
def get_catalog() -> Catalog:
    return load_catalog()


def initial_selections(catalog: Optional[Catalog] = None) -> dict[str, Any]:
    """Empty selections for every category: [] for multi, field defaults for color pickers."""
    catalog = catalog or get_catalog()
    initial: dict[str, Any] = {}
    for key, spec in catalog.categories.items():
        if spec.persistent:
            continue
        if spec.multi:
            initial[key] = []
        elif spec.color_picker:
            initial[key] = dict(spec.fields)
        else:
            initial[key] = None
    return initial


def filtered_categories(group: Optional[str] = None, catalog: Optional[Catalog] = None) -> list[str]:
    catalog = catalog or get_catalog()
    keys = [k for k, spec in catalog.categories.items() if k not in _UNLISTED and not spec.hidden]
    if not group:
        return keys
    return [k for k in keys if catalog.categories[k].group == group]


def unknown_keys(selections: Mapping[str, Any], catalog: Optional[Catalog] = None) -> list[str]:
    catalog = catalog or get_catalog()
    return [k for k in selections if k not in catalog.categories]
