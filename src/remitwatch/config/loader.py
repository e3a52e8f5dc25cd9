from copy import deepcopy
from pathlib import Path
from typing import Any, Dict, List

import yaml

DEFAULT_CONFIG_PATH = Path("remitwatch.config.yaml")

ALLOWED_FORMATS = ("md", "json")

DEFAULT_CONFIG: Dict[str, Any] = {
    "data": {
        "transactions_path": "transactions.json",
    },
    "report": {
        "format": "md",
        "senders": [],
        "clients": [],
    },
    "logging": {
        "level": "INFO",
    },
}


def _merge_section(defaults: Dict[str, Any], overrides: Dict[str, Any]) -> Dict[str, Any]:
    """Shallow-merge one config section over its built-in defaults."""
    return {**deepcopy(defaults), **(overrides or {})}


def _validate_names(config: Dict[str, Any], key: str) -> List[str]:
    names = config["report"].get(key) or []
    if not isinstance(names, list) or not all(isinstance(name, str) for name in names):
        raise ValueError(f"Config 'report.{key}' must be a list of names")
    return [name.strip() for name in names if name.strip()]


def load_config(path: Path | None = None) -> Dict[str, Any]:
    """
    Load remitwatch configuration from YAML, merged over built-in defaults.

    Args:
        path: Optional path to a config file. Defaults to remitwatch.config.yaml
            in the working directory; if that default is absent, built-in
            defaults are returned.

    Returns:
        Dictionary with data, report and logging sections

    Raises:
        FileNotFoundError: If an explicitly given config file doesn't exist
        ValueError: If config structure is invalid
    """
    cfg_path = path or DEFAULT_CONFIG_PATH
    if not cfg_path.exists():
        if path is not None:
            raise FileNotFoundError(f"Config file not found: {cfg_path}")
        return deepcopy(DEFAULT_CONFIG)

    with cfg_path.open("r", encoding="utf-8") as f:
        raw = yaml.safe_load(f) or {}

    if not isinstance(raw, dict):
        raise ValueError("Config must be a dictionary")

    config: Dict[str, Any] = {}
    for section, defaults in DEFAULT_CONFIG.items():
        overrides = raw.get(section)
        if overrides is not None and not isinstance(overrides, dict):
            raise ValueError(f"Config '{section}' must be a dictionary if provided")
        config[section] = _merge_section(defaults, overrides)

    if config["report"]["format"] not in ALLOWED_FORMATS:
        raise ValueError(
            f"Config 'report.format' must be one of {', '.join(ALLOWED_FORMATS)}, "
            f"got {config['report']['format']!r}"
        )
    config["report"]["senders"] = _validate_names(config, "senders")
    config["report"]["clients"] = _validate_names(config, "clients")

    return config


def get_transactions_path(config: Dict[str, Any] | None = None) -> Path:
    """Resolve the transactions JSON path from config (defaults apply if None)."""
    if config is None:
        config = load_config()
    return Path(config.get("data", {}).get("transactions_path") or DEFAULT_CONFIG["data"]["transactions_path"])
