"""
Configuration for the layout scanner.

Every default here matches the behavior of the command-line tool,
which always runs with ``ScanConfig()``. Library callers may load
overrides from YAML or JSON files.
"""

import json
from pathlib import Path
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field, asdict

import yaml

from layoutscanner.core.walker import (
    DEFAULT_EXCLUDED_DIRS, DEFAULT_EXTENSIONS, DEFAULT_TEST_SUFFIXES
)


# Source directory scanned by the CLI, relative to the working directory
DEFAULT_TARGET = "src/react-app"

# Issues shown per type in the text report
DEFAULT_PREVIEW_LIMIT = 5


@dataclass
class ScanConfig:
    """
    Main configuration for the layout scanner.

    Example YAML config:

    ```yaml
    scan:
      target: src/react-app
      excluded_dirs:
        - node_modules
        - dist
      extensions: [".tsx", ".ts"]
    rules:
      disabled:
        - LAYOUT-OVERFLOW-001
    output:
      preview_limit: 10
    ```
    """
    target: str = DEFAULT_TARGET
    excluded_dirs: List[str] = field(default_factory=lambda: sorted(DEFAULT_EXCLUDED_DIRS))
    extensions: List[str] = field(default_factory=lambda: list(DEFAULT_EXTENSIONS))
    test_suffixes: List[str] = field(default_factory=lambda: list(DEFAULT_TEST_SUFFIXES))
    disabled_rules: List[str] = field(default_factory=list)
    preview_limit: int = DEFAULT_PREVIEW_LIMIT

    def __post_init__(self):
        if self.preview_limit < 0:
            raise ValueError(f"preview_limit must be >= 0, got {self.preview_limit}")

    def to_dict(self) -> Dict[str, Any]:
        """Convert config to a dictionary."""
        return asdict(self)

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> "ScanConfig":
        """Create config from a dictionary."""
        data = dict(data)

        # Flatten nested sections
        for section in ("scan", "output"):
            if isinstance(data.get(section), dict):
                data.update(data.pop(section))
        if isinstance(data.get("rules"), dict):
            data["disabled_rules"] = data.pop("rules").get("disabled", [])

        # Filter to only known fields
        known_fields = {f for f in cls.__dataclass_fields__}
        filtered_data = {k: v for k, v in data.items() if k in known_fields}

        return cls(**filtered_data)


def load_config(path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML and JSON formats.
    """
    path = Path(path)

    if not path.exists():
        raise FileNotFoundError(f"Configuration file not found: {path}")

    content = path.read_text(encoding="utf-8")

    if path.suffix == ".json":
        data = json.loads(content)
    else:
        data = yaml.safe_load(content)

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise ValueError(f"Configuration root must be a mapping: {path}")
    return data


def load_scan_config(path: Optional[str] = None) -> ScanConfig:
    """
    Load a ScanConfig from a file, or return the defaults when no path
    is given.
    """
    if path is None:
        return ScanConfig()
    return ScanConfig.from_dict(load_config(path))
