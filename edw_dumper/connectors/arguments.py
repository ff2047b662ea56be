from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, Mapping, Optional

from .base import ConnectorProperty

# Test flag that points the INFORMATION_SCHEMA fallback at a catalog that does
# not exist, so every fallback task fails and the failure path can be exercised.
TEST_FLAG_INJECT_IS_FAULT = "A"


class ConnectorConfigError(ValueError):
    """Run configuration the planner cannot turn into a complete plan."""


def validate_config(cfg: Dict[str, Any]) -> None:
    if not isinstance(cfg, dict):
        raise ValueError("Config must be a JSON object")
    if "connector" not in cfg:
        raise ValueError("Missing config key: connector")
    if not isinstance(cfg.get("assessment", False), bool):
        raise ValueError("assessment must be true or false")
    if not isinstance(cfg.get("definitions", {}) or {}, dict):
        raise ValueError("definitions must be an object of name -> value")
    if not isinstance(cfg.get("test_flags", "") or "", str):
        raise ValueError("test_flags must be a string of flag characters")


@dataclass(frozen=True)
class ConnectorArguments:
    """Everything one run tells the planner: mode, test flags and overrides."""

    connector: str = "snowflake"
    assessment: bool = False
    test_flags: str = ""
    definitions: Mapping[str, Any] = field(default_factory=dict)

    @classmethod
    def from_config(cls, cfg: Dict[str, Any]) -> "ConnectorArguments":
        validate_config(cfg)
        return cls(
            connector=str(cfg["connector"]).lower(),
            assessment=bool(cfg.get("assessment", False)),
            test_flags=cfg.get("test_flags") or "",
            definitions=dict(cfg.get("definitions") or {}),
        )

    def is_assessment(self) -> bool:
        return self.assessment

    def is_test_flag(self, flag: str) -> bool:
        return flag in self.test_flags

    @property
    def inject_info_schema_fault(self) -> bool:
        return self.is_test_flag(TEST_FLAG_INJECT_IS_FAULT)

    def get_definition(self, prop: ConnectorProperty) -> Optional[str]:
        """Value of ``prop`` or None when the operator did not set it."""
        value = self.definitions.get(prop.name)
        if value is None:
            return None
        if not isinstance(value, str) or not value.strip():
            raise ConnectorConfigError(f"Definition {prop.name} must be a non-empty string, got {value!r}")
        return value

    def validate_definitions(self, properties: Iterable[ConnectorProperty]) -> None:
        known = {prop.name: prop for prop in properties}
        unknown = sorted(name for name in self.definitions if name not in known)
        if unknown:
            raise ConnectorConfigError(
                f"Unknown definitions for connector {self.connector}: {', '.join(unknown)}; "
                f"expected one of {', '.join(sorted(known))}"
            )
        for prop in known.values():
            self.get_definition(prop)
