"""
Jitter plot option presets persisted as JSON (platformdirs).

Persisted items (schema v1):
- presets: name -> JitterPlotOptions dict
- default_preset: name of the preset used when none is requested

Behavior:
- If the config file is missing or unreadable -> defaults are used
- If schema_version mismatches:
  - default: reset to defaults
  - optional: keep loaded data but update the version
- Unknown keys in loaded JSON are ignored with warnings

Only option presets are stored here; plots themselves are never written to disk.
"""

from __future__ import annotations

import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

from platformdirs import user_config_dir

from jitterplot.pipeline.plot_options import JitterPlotOptions
from jitterplot.utils.logging import get_logger

logger = get_logger(__name__)

# Increment on breaking changes to the on-disk JSON schema.
SCHEMA_VERSION: int = 1

DEFAULT_PRESET = "default"


@dataclass
class JitterPlotConfigData:
    """JSON-serializable config payload (primitives, lists, dicts only)."""
    schema_version: int = SCHEMA_VERSION
    default_preset: str = DEFAULT_PRESET
    presets: Dict[str, Dict[str, Any]] = field(default_factory=dict)

    def to_json_dict(self) -> Dict[str, Any]:
        return {
            "schema_version": self.schema_version,
            "default_preset": self.default_preset,
            "presets": self.presets,
        }

    @classmethod
    def from_json_dict(cls, d: Dict[str, Any]) -> "JitterPlotConfigData":
        """
        Tolerant loader:
        - ignores unknown keys
        - tolerates missing values
        - drops presets that are not dicts
        """
        schema_version = int(d.get("schema_version", -1))
        default_preset = str(d.get("default_preset", DEFAULT_PRESET))

        presets: Dict[str, Dict[str, Any]] = {}
        raw = d.get("presets", {})
        if isinstance(raw, dict):
            for name, preset in raw.items():
                if isinstance(preset, dict):
                    presets[str(name)] = preset
                else:
                    logger.warning(f"Preset '{name}' is not a dict, ignoring")
        else:
            logger.warning("presets is not a dict, using empty presets")

        known_keys = {"schema_version", "default_preset", "presets"}
        for key in d.keys():
            if key not in known_keys:
                logger.warning(f"Unknown key '{key}' in jitter plot config, ignoring")

        return cls(schema_version=schema_version, default_preset=default_preset, presets=presets)


class JitterPlotConfig:
    """Manager for loading/saving JitterPlotConfigData to disk."""

    def __init__(self, *, path: Path, data: Optional[JitterPlotConfigData] = None):
        self.path = path
        self.data = data if data is not None else JitterPlotConfigData()

    @staticmethod
    def default_config_path(
        app_name: str = "jitterplot",
        filename: str = "jitterplot_config.json",
        app_author: str | None = None,
    ) -> Path:
        """
        OS-appropriate per-user config path.

        macOS:   ~/Library/Application Support/jitterplot/jitterplot_config.json
        Linux:   ~/.config/jitterplot/jitterplot_config.json
        Windows: %APPDATA%\\jitterplot\\jitterplot_config.json
        """
        return Path(user_config_dir(app_name, app_author)) / filename

    @classmethod
    def load(
        cls,
        *,
        config_path: Optional[Path] = None,
        app_name: str = "jitterplot",
        filename: str = "jitterplot_config.json",
        app_author: str | None = None,
        schema_version: int = SCHEMA_VERSION,
        reset_on_version_mismatch: bool = True,
        create_if_missing: bool = False,
    ) -> "JitterPlotConfig":
        """
        Load config from disk.

        If the file doesn't exist or is unreadable -> defaults.
        If schema mismatch:
          - reset_on_version_mismatch=True -> defaults
          - else -> keep loaded data but overwrite schema_version

        If create_if_missing=True and the file is missing -> immediately write defaults.
        """
        path = config_path or cls.default_config_path(app_name=app_name, filename=filename, app_author=app_author)
        default_data = JitterPlotConfigData(schema_version=schema_version)

        try:
            parsed = json.loads(path.read_text(encoding="utf-8"))
        except FileNotFoundError:
            logger.debug(f"Jitter plot config file not found at {path}, using defaults")
            cfg = cls(path=path, data=default_data)
            if create_if_missing:
                cfg.save()
            return cfg
        except json.JSONDecodeError as e:
            logger.warning(f"Jitter plot config file at {path} is not valid JSON: {e}, using defaults")
            return cls(path=path, data=default_data)
        except OSError as e:
            logger.warning(f"Error reading jitter plot config from {path}: {e}, using defaults")
            return cls(path=path, data=default_data)

        if not isinstance(parsed, dict):
            logger.warning(f"Jitter plot config file at {path} does not contain a dict, using defaults")
            return cls(path=path, data=default_data)

        loaded = JitterPlotConfigData.from_json_dict(parsed)
        if int(loaded.schema_version) != int(schema_version):
            if reset_on_version_mismatch:
                logger.warning(
                    f"Jitter plot config schema version mismatch: loaded={loaded.schema_version}, "
                    f"expected={schema_version}, resetting to defaults"
                )
                return cls(path=path, data=default_data)
            loaded.schema_version = int(schema_version)
        return cls(path=path, data=loaded)

    def save(self) -> None:
        """Write config to disk."""
        try:
            self.path.parent.mkdir(parents=True, exist_ok=True)
            self.path.write_text(json.dumps(self.data.to_json_dict(), indent=2), encoding="utf-8")
            logger.info(f"Saved jitter plot config to {self.path}")
        except OSError as e:
            logger.error(f"Error saving jitter plot config to {self.path}: {e}")
            raise

    def preset_names(self) -> list[str]:
        return sorted(self.data.presets)

    def get_options(self, name: Optional[str] = None) -> JitterPlotOptions:
        """Options stored under ``name`` (default preset when None); defaults if absent or invalid."""
        key = name if name is not None else self.data.default_preset
        raw = self.data.presets.get(key)
        if raw is None:
            return JitterPlotOptions()
        try:
            return JitterPlotOptions.from_dict(raw)
        except (TypeError, ValueError) as e:
            logger.warning(f"Error deserializing preset '{key}': {e}, using defaults")
            return JitterPlotOptions()

    def set_options(self, options: JitterPlotOptions, name: Optional[str] = None) -> None:
        """Store options under ``name`` (default preset when None). Per-sample vectors are not stored."""
        options.validate()
        d = options.to_dict()
        d["colorgroup"] = None
        key = name if name is not None else self.data.default_preset
        self.data.presets[key] = d

    def set_default_preset(self, name: str) -> None:
        self.data.default_preset = name
