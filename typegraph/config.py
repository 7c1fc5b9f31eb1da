"""
Diagram settings.

Defaults come from environment variables (a ``.env`` file is loaded
first), and can be overridden by a JSON config file and then by
explicit arguments:

    TYPEGRAPH_PROPERTY_TYPES       show property types and return types
    TYPEGRAPH_MODIFIERS            show public/private/protected/static
    TYPEGRAPH_MEMBER_ASSOCIATIONS  draw member associations
    TYPEGRAPH_NOMNOML              ';'-separated nomnoml directive lines
    TYPEGRAPH_VERBOSE              print per-edge trace lines
"""

import json
import os
from dataclasses import dataclass, field, fields, replace
from typing import Any, Dict, List, Optional

import dotenv


_TRUE_VALUES = ("1", "true", "yes", "on")
_FALSE_VALUES = ("0", "false", "no", "off")

# camelCase option names as tsuml2 config files spell them
_CAMEL_CASE_KEYS = {
    "propertyTypes": "property_types",
    "memberAssociations": "member_associations",
}

# tsuml2 options for source discovery and SVG/mermaid output, which
# happen outside this package
_IGNORED_KEYS = {"glob", "tsconfig", "outFile", "outDsl", "outMermaidDsl", "typeLinks"}


def _env_flag(name: str, default: bool) -> bool:
    value = os.getenv(name)
    if value is None or value == "":
        return default
    value = value.lower()
    if value in _TRUE_VALUES:
        return True
    if value in _FALSE_VALUES:
        return False
    raise ValueError(f"Invalid boolean for {name}: '{value}'")


@dataclass
class DiagramSettings:
    """Options controlling what the rendered diagram shows."""
    property_types: bool = True
    modifiers: bool = True
    member_associations: bool = False
    nomnoml: List[str] = field(default_factory=list)
    verbose: bool = False

    @classmethod
    def from_env(cls) -> "DiagramSettings":
        directives = os.getenv("TYPEGRAPH_NOMNOML", "")
        return cls(
            property_types=_env_flag("TYPEGRAPH_PROPERTY_TYPES", True),
            modifiers=_env_flag("TYPEGRAPH_MODIFIERS", True),
            member_associations=_env_flag("TYPEGRAPH_MEMBER_ASSOCIATIONS", False),
            nomnoml=[d.strip() for d in directives.split(";") if d.strip()],
            verbose=_env_flag("TYPEGRAPH_VERBOSE", False),
        )

    def from_dict(self, data: Dict[str, Any]) -> "DiagramSettings":
        """
        Return a copy with the given keys merged in.

        tsuml2 keys with no meaning here are skipped with an ``[INFO]``
        line. Any other unknown key is rejected.
        """
        known = {f.name for f in fields(self)}
        updates = {}
        for key, value in data.items():
            if key in _IGNORED_KEYS:
                print(f"[INFO] Ignoring setting '{key}'")
                continue
            name = _CAMEL_CASE_KEYS.get(key, key)
            if name not in known:
                raise ValueError(f"Unknown setting: '{key}'")
            updates[name] = value
        if "nomnoml" in updates and not isinstance(updates["nomnoml"], list):
            raise ValueError("Setting 'nomnoml' must be a list of strings")
        return replace(self, **updates)

    def from_json(self, text: str) -> "DiagramSettings":
        data = json.loads(text)
        if not isinstance(data, dict):
            raise ValueError("Settings JSON must be an object")
        return self.from_dict(data)

    def merge(self, **overrides: Optional[Any]) -> "DiagramSettings":
        """Return a copy with every non-None override applied."""
        return self.from_dict({k: v for k, v in overrides.items() if v is not None})

    def to_dict(self) -> Dict[str, Any]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


def load_settings(config_path: Optional[str] = None) -> DiagramSettings:
    """
    Load settings from the environment and an optional JSON config file.

    Args:
        config_path: Path to a JSON file whose keys override the environment

    Returns:
        DiagramSettings
    """
    dotenv.load_dotenv()
    settings = DiagramSettings.from_env()

    if config_path:
        with open(config_path, "r", encoding="utf-8") as f:
            settings = settings.from_json(f.read())

    return settings
