import os
from functools import lru_cache
from types import MappingProxyType
from typing import Dict, Any, Mapping, Optional
import yaml

DEFAULT_RULES_PATH = os.path.join(os.path.dirname(os.path.abspath(__file__)), "rules.yaml")

LIST_KEYS = ("flight_keywords", "hotel_keywords", "destinations", "airlines", "hotel_name_keywords")

def _read_yaml(path: str) -> Dict[str, Any]:
    with open(path, "r", encoding="utf-8") as f:
        return yaml.safe_load(f) or {}

def load_rules(path: Optional[str] = None) -> Dict[str, Any]:
    """
    Load keyword sets and gazetteers. Keys missing from a custom file fall
    back to the packaged defaults; lists become tuples so the order used for
    first-match lookups cannot be mutated by callers.
    """
    data = _read_yaml(DEFAULT_RULES_PATH)
    if path and os.path.abspath(path) != DEFAULT_RULES_PATH:
        data.update({k: v for k, v in _read_yaml(path).items() if v is not None})
    rules: Dict[str, Any] = {}
    for key in LIST_KEYS:
        rules[key] = tuple(str(item).lower() for item in (data.get(key) or []))
    rules["temperature"] = float(data.get("temperature", 1.0))
    return rules

@lru_cache(maxsize=1)
def default_rules() -> Mapping[str, Any]:
    """Packaged rules, read once per process. Read-only: the mapping is shared."""
    return MappingProxyType(load_rules())
