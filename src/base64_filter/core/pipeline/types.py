# src/base64_filter/core/pipeline/types.py
"""
Tipos canônicos das fases do Base64 Filter.

Componentes principais:
    - PhaseKind    → direção da fase (WRITE = encode, READ = decode)
    - PhaseStatus  → estados finais (SUCCESS, SKIPPED, FAILED)
    - EntryOutcome → efeito da fase sobre uma entrada
    - PhaseResult  → estrutura imutável de resultado de uma fase

Invariantes:
    - Enums possuem valores textuais canônicos
    - PhaseResult é imutável
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List


class PhaseKind(str, Enum):
    """Direção de uma fase."""

    WRITE = "write"
    READ = "read"


class PhaseStatus(str, Enum):
    """
    Estados finais possíveis de uma fase.

    - SUCCESS: todas as entradas foram processadas
    - SKIPPED: fase desabilitada por configuração, nenhuma entrada tocada
    - FAILED: fase abortada por erro fatal (entradas já convertidas não
      sofrem rollback)
    """

    SUCCESS = "success"
    SKIPPED = "skipped"
    FAILED = "failed"


class EntryOutcome(str, Enum):
    """Efeito de uma fase sobre uma única entrada."""

    UNCHANGED = "unchanged"
    CONVERTED = "converted"
    ESCAPED = "escaped"
    UNESCAPED = "unescaped"


@dataclass(frozen=True)
class PhaseResult:
    """
    Resultado imutável da execução de uma fase.

    Campos:
        - phase_id: identificador da fase ("base64.write" / "base64.read")
        - kind: direção da fase
        - status: estado final
        - summary: resumo textual
        - metrics: contadores por `EntryOutcome`, total e malformados
        - warnings: avisos não fatais emitidos durante a fase
        - payload: `config_hash` e, em falha, `error` e `aborted_at`
    """

    phase_id: str
    kind: PhaseKind
    status: PhaseStatus
    summary: str
    metrics: Dict[str, Any] = field(default_factory=dict)
    warnings: List[str] = field(default_factory=list)
    payload: Dict[str, Any] = field(default_factory=dict)
