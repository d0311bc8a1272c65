# src/base64_filter/core/config/options.py
"""
Opções efetivas do filtro, extraídas da configuração resolvida.

Regras v1:
    - phases.<write|read>.enabled: bool (default True)
    - diagnostics.log_entry_events: bool (default False)
    - diagnostics.max_value_chars: int >= 1 ou null (default null = valor completo)

Chaves desconhecidas são ignoradas; tipos inválidos geram
`InvalidFilterOptionsError` sem heurística de coerção.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Dict, Optional

from .errors import InvalidFilterOptionsError


@dataclass(frozen=True)
class FilterOptions:
    """Opções validadas de uma execução do filtro."""

    write_enabled: bool = True
    read_enabled: bool = True
    log_entry_events: bool = False
    max_value_chars: Optional[int] = None

    def is_enabled(self, phase: str) -> bool:
        if phase == "write":
            return self.write_enabled
        if phase == "read":
            return self.read_enabled
        raise ValueError(f"unknown phase: {phase}")

    def clip(self, value: str) -> str:
        """Trunca `value` para mensagens de diagnóstico."""
        if self.max_value_chars is None or len(value) <= self.max_value_chars:
            return value
        return value[: self.max_value_chars] + "..."


def _section(config: Dict[str, Any], key: str) -> Dict[str, Any]:
    section = config.get(key)
    if section is None:
        return {}
    if not isinstance(section, dict):
        raise InvalidFilterOptionsError(f"{key} must be a mapping")
    return section


def _flag(section: Dict[str, Any], key: str, default: bool, path: str) -> bool:
    value = section.get(key, default)
    if not isinstance(value, bool):
        raise InvalidFilterOptionsError(f"{path} must be a bool")
    return value


def resolve_filter_options(config: Optional[Dict[str, Any]]) -> FilterOptions:
    """Valida e materializa as opções do filtro a partir da config resolvida."""
    cfg = config or {}
    if not isinstance(cfg, dict):
        raise InvalidFilterOptionsError("config must be a mapping")

    phases = _section(cfg, "phases")
    enabled = {}
    for phase in ("write", "read"):
        phase_cfg = phases.get(phase) or {}
        if not isinstance(phase_cfg, dict):
            raise InvalidFilterOptionsError(f"phases.{phase} must be a mapping")
        enabled[phase] = _flag(phase_cfg, "enabled", True, f"phases.{phase}.enabled")

    diagnostics = _section(cfg, "diagnostics")
    log_entry_events = _flag(
        diagnostics, "log_entry_events", False, "diagnostics.log_entry_events"
    )

    max_value_chars = diagnostics.get("max_value_chars")
    if max_value_chars is not None:
        # bool é subclasse de int
        if isinstance(max_value_chars, bool) or not isinstance(max_value_chars, int):
            raise InvalidFilterOptionsError("diagnostics.max_value_chars must be an int or null")
        if max_value_chars < 1:
            raise InvalidFilterOptionsError("diagnostics.max_value_chars must be >= 1")

    return FilterOptions(
        write_enabled=enabled["write"],
        read_enabled=enabled["read"],
        log_entry_events=log_entry_events,
        max_value_chars=max_value_chars,
    )
