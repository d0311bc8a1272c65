"""
Base64 Filter — Canonical Error Structures (v1)

Este módulo define o padrão canônico de erros e avisos do Base64 Filter.
Erros fazem parte do contrato operacional das fases de leitura e escrita,
devendo ser:

- explícitos
- serializáveis
- rastreáveis
- acionáveis

Taxonomia:
- BASE64_DECODING     → aviso: valor com prefixo não é payload válido
- MEMORY_ALLOCATION   → fatal: aborta a fase imediatamente
- FILTER_CONFIGURATION_ERROR → fatal: opções inválidas, nenhuma entrada tocada
- FILTER_EXECUTION_ERROR     → fatal: falha inesperada durante a fase
"""

from __future__ import annotations

from dataclasses import dataclass, asdict
from typing import Any, Dict, Optional


# ---------------------------------------------------------------------------
# Payload canônico
# ---------------------------------------------------------------------------

@dataclass(frozen=True)
class FilterErrorPayload:
    """
    Payload canônico de erro do Base64 Filter.

    Campos:
    - type: código estável do erro (não é texto livre)
    - message: mensagem curta, humana e objetiva
    - details: dados estruturados relevantes para diagnóstico
    - hint: ação sugerida ao operador (onde corrigir)
    """

    type: str
    message: str
    details: Dict[str, Any]
    hint: Optional[str] = None

    def to_dict(self) -> Dict[str, Any]:
        """Retorna representação serializável do erro."""
        return asdict(self)


# ---------------------------------------------------------------------------
# Catálogo canônico de tipos de erro (v1)
# ---------------------------------------------------------------------------

# Codec
BASE64_DECODING = "BASE64_DECODING"
MEMORY_ALLOCATION = "MEMORY_ALLOCATION"

# Fases / Execução
FILTER_CONFIGURATION_ERROR = "FILTER_CONFIGURATION_ERROR"
FILTER_EXECUTION_ERROR = "FILTER_EXECUTION_ERROR"


# ---------------------------------------------------------------------------
# Helpers de fábrica
# ---------------------------------------------------------------------------

def base64_decoding(
    *,
    value: str,
    entry: Optional[str] = None,
    phase: Optional[str] = None,
    reason: Optional[str] = None,
    hint: str = "Valores que começam com '@' devem ser payloads base64 ou literais escapados como '@@'.",
) -> FilterErrorPayload:
    return FilterErrorPayload(
        type=BASE64_DECODING,
        message=f"Not Base64 encoded: {value}",
        details={
            "entry": entry,
            "phase": phase,
            "reason": reason,
        },
        hint=hint,
    )


def memory_allocation(
    *,
    operation: str,
    entry: Optional[str] = None,
    phase: Optional[str] = None,
    hint: str = "Libere memória ou reduza o tamanho dos valores binários antes de reexecutar a fase.",
) -> FilterErrorPayload:
    return FilterErrorPayload(
        type=MEMORY_ALLOCATION,
        message="Memory allocation failed",
        details={
            "operation": operation,
            "entry": entry,
            "phase": phase,
        },
        hint=hint,
    )


def filter_configuration_error(
    *,
    message: str = "Configuração inválida para execução do filtro",
    details: Optional[Dict[str, Any]] = None,
    hint: str = "Revise as opções em `phases` e `diagnostics` antes de reexecutar.",
) -> FilterErrorPayload:
    return FilterErrorPayload(
        type=FILTER_CONFIGURATION_ERROR,
        message=message,
        details=details or {},
        hint=hint,
    )


def filter_execution_error(
    *,
    phase: Optional[str] = None,
    entry: Optional[str] = None,
    exc_type: Optional[str] = None,
    exc_message: Optional[str] = None,
    hint: str = "Verifique os eventos do contexto para diagnosticar a falha. Nenhum rollback é aplicado automaticamente.",
) -> FilterErrorPayload:
    return FilterErrorPayload(
        type=FILTER_EXECUTION_ERROR,
        message="Falha inesperada durante a execução da fase",
        details={
            "phase": phase,
            "entry": entry,
            "exc_type": exc_type,
            "exc_message": exc_message,
        },
        hint=hint,
    )
