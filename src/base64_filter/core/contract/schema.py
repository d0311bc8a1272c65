"""
Schema canônico — Plugin Contract v1.

O contrato descreve identidade, capacidades e posicionamento do filtro
para o host. Ele é puramente declarativo: nenhuma fase o consulta.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, List

from .errors import ContractValidationError


_ALLOWED_PLACEMENTS = {
    "get": {"pregetstorage", "postgetstorage"},
    "set": {"presetstorage", "precommit"},
}
_ALLOWED_STATUS = {"maintained", "unittest", "nodep", "experimental", "libc"}
_REQUIRED_EXPORTS = {"read", "write"}


def _is_non_empty_str(x: Any) -> bool:
    return isinstance(x, str) and bool(x.strip())


def _expect(cond: bool, msg: str) -> None:
    if not cond:
        raise ContractValidationError(msg)


@dataclass(frozen=True)
class PluginContractV1:
    """Representação interna explícita do Plugin Contract v1."""

    contract_version: str
    name: str
    description: str
    provides: List[str]
    placements: Dict[str, str]
    status: List[str]
    exports: List[str]
    marker: str

    def to_dict(self) -> Dict[str, Any]:
        return {
            "contract_version": self.contract_version,
            "name": self.name,
            "description": self.description,
            "provides": list(self.provides),
            "placements": dict(self.placements),
            "status": list(self.status),
            "exports": list(self.exports),
            "marker": self.marker,
        }


def validate_plugin_contract_v1(data: Any) -> PluginContractV1:
    """Valida e materializa um Plugin Contract v1."""
    _expect(isinstance(data, dict), "Plugin Contract must be a mapping/dict")

    cv = data.get("contract_version")
    _expect(_is_non_empty_str(cv), "contract_version is required")
    _expect(str(cv) == "1.0", "contract_version must be '1.0' in v1")

    name = data.get("name")
    _expect(_is_non_empty_str(name), "name is required")

    description = data.get("description")
    _expect(_is_non_empty_str(description), "description is required")

    provides = data.get("provides")
    _expect(isinstance(provides, list) and provides, "provides must be a non-empty list")
    _expect(all(_is_non_empty_str(p) for p in provides), "provides must contain only non-empty strings")

    placements = data.get("placements")
    _expect(isinstance(placements, dict), "placements must be a mapping")
    for direction, allowed in _ALLOWED_PLACEMENTS.items():
        value = placements.get(direction)
        _expect(value in allowed, f"placements.{direction} must be one of {sorted(allowed)}")

    status = data.get("status") or []
    _expect(isinstance(status, list), "status must be a list")
    for s in status:
        _expect(s in _ALLOWED_STATUS, f"status must be one of {sorted(_ALLOWED_STATUS)}")

    exports = data.get("exports")
    _expect(isinstance(exports, list), "exports must be a list")
    missing = _REQUIRED_EXPORTS - set(exports)
    _expect(not missing, f"exports must include {sorted(missing)}")

    marker = data.get("marker")
    _expect(isinstance(marker, str) and len(marker) == 1, "marker must be a single character")

    return PluginContractV1(
        contract_version=str(cv),
        name=name,
        description=description,
        provides=list(provides),
        placements={k: placements[k] for k in sorted(_ALLOWED_PLACEMENTS)},
        status=list(status),
        exports=list(exports),
        marker=marker,
    )
