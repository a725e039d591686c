"""Load sort options from a ``documentation.yml`` (or JSON) config file.

Only the ``toc`` and ``sortOrder`` keys are read; other keys used by the
wider documentation toolchain are ignored.
"""

from __future__ import annotations

import json
import logging
from pathlib import Path
from typing import Any, Optional

import yaml
from pydantic import ValidationError

from docsort.exceptions import ConfigFileError
from docsort.models import SortOptions

log = logging.getLogger(__name__)


def _read(path: Path) -> Any:
    if not path.is_file():
        raise ConfigFileError(f"Config file not found: {path}")

    raw_text = path.read_text(encoding="utf-8")
    try:
        if path.suffix in (".yaml", ".yml"):
            return yaml.safe_load(raw_text)
        return json.loads(raw_text)
    except (yaml.YAMLError, json.JSONDecodeError) as exc:
        raise ConfigFileError(f"Could not parse config file {path}: {exc}") from exc


def load_options(path: Path, *, default_sort_order: Optional[str] = None) -> SortOptions:
    """Read *path* into ``SortOptions``.

    An empty file yields default options.  ``default_sort_order`` applies when
    the file leaves ``sortOrder`` unset or null.
    """
    data = _read(path)
    if data is None:
        data = {}
    if not isinstance(data, dict):
        raise ConfigFileError(
            f"Expected a mapping at the top of {path}, got {type(data).__name__}"
        )

    fields: dict[str, Any] = {"toc": data.get("toc")}
    if data.get("sortOrder") is not None:
        fields["sort_order"] = data["sortOrder"]
    elif default_sort_order is not None:
        fields["sort_order"] = default_sort_order

    try:
        options = SortOptions(**fields)
    except ValidationError as exc:
        raise ConfigFileError(f"Invalid options in {path}: {exc}") from exc
    log.info(
        "Loaded options from %s (%d top-level TOC entries, sort order %s)",
        path,
        len(options.toc or []),
        options.sort_order,
    )
    return options
