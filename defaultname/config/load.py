"""Load checker options from a JSON file."""

from __future__ import annotations

import json
import logging
from pathlib import Path

from defaultname.config.options import MatchDefaultExportNameOptions
from defaultname.errors import ConfigurationError

logger = logging.getLogger(__name__)


def load_options(path: str | Path) -> MatchDefaultExportNameOptions:
    """Read `{"ignore": [...], "overrides": [...]}` from a JSON file."""
    config_path = Path(path)
    try:
        raw = json.loads(config_path.read_text(encoding="utf-8"))
    except OSError as exc:
        raise ConfigurationError(f"Cannot read config `{config_path}`: {exc}") from exc
    except json.JSONDecodeError as exc:
        raise ConfigurationError(f"Invalid JSON in `{config_path}`: {exc}") from exc

    options = MatchDefaultExportNameOptions.from_mapping(raw)
    logger.debug(
        "Loaded %d ignore pattern(s) and %d override(s) from %s",
        len(options.ignore),
        len(options.overrides),
        config_path,
    )
    return options
