# src/base64_filter/core/pipeline/context.py
"""
Contexto de diagnóstico de uma execução do filtro.

Este módulo define o `FilterContext`, o sink de diagnósticos associado
a uma travessia como um todo (e não a uma entrada).

O FilterContext registra:
    - eventos de log estruturados
    - warnings não fatais, agrupados por fase
    - o erro fatal que abortou uma fase, quando houver

Invariantes:
    - Eventos sempre incluem `run_id` e `phase_id`
    - Warnings são agrupados por `phase_id`
    - Nenhum estado global é compartilhado entre contextos

Limites explícitos:
    - Não executa fases
    - Não persiste dados automaticamente
"""

from __future__ import annotations

import uuid
from copy import deepcopy
from dataclasses import dataclass, field
from datetime import datetime
from typing import Any, Dict, List, Optional
from datetime import timezone

from base64_filter.core.config.loader import DEFAULT_CONFIG
from base64_filter.core.errors import FilterErrorPayload


@dataclass
class FilterContext:
    """
    Sink de diagnósticos compartilhado pelas fases de uma execução.

    Decisões arquiteturais:
        - Logs são eventos estruturados (dict), não strings livres
        - Warnings nunca interrompem a travessia
        - Erros fatais são registrados aqui e também no `PhaseResult`
    """

    run_id: str
    created_at: datetime
    config: Dict[str, Any]
    meta: Dict[str, Any] = field(default_factory=dict)

    events: List[Dict[str, Any]] = field(default_factory=list, init=False)
    warnings: Dict[str, List[str]] = field(default_factory=dict, init=False)
    errors: Dict[str, Dict[str, Any]] = field(default_factory=dict, init=False)

    # -----------------------------
    # Logging & warnings
    # -----------------------------

    def log(self, *, phase_id: str, level: str, message: str, **extra: Any) -> None:
        event = {
            "run_id": self.run_id,
            "phase_id": phase_id,
            "level": level,
            "message": message,
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
        event.update(extra)
        self.events.append(event)

    def add_warning(self, *, phase_id: str, message: str) -> None:
        if phase_id not in self.warnings:
            self.warnings[phase_id] = []
        self.warnings[phase_id].append(message)

    # -----------------------------
    # Fatal errors
    # -----------------------------

    def set_error(self, *, phase_id: str, error: FilterErrorPayload) -> None:
        self.errors[phase_id] = error.to_dict()
        self.log(
            phase_id=phase_id,
            level="error",
            message=error.message,
            error_type=error.type,
        )

    def get_error(self, phase_id: str) -> Optional[Dict[str, Any]]:
        return self.errors.get(phase_id)

    def has_errors(self) -> bool:
        return bool(self.errors)


def new_context(config: Optional[Dict[str, Any]] = None, **meta: Any) -> FilterContext:
    """Cria um contexto com `run_id` aleatório e timestamp UTC."""
    return FilterContext(
        run_id=uuid.uuid4().hex,
        created_at=datetime.now(timezone.utc),
        config=config if config is not None else deepcopy(DEFAULT_CONFIG),
        meta=dict(meta),
    )
