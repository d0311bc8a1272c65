"""
Base64 Filter — Canonical Exceptions (v1)

Este módulo define exceções tipadas internas do Base64 Filter.

Objetivo:
- Permitir que o codec e as fases levantem exceções semânticas tipadas
- Facilitar o mapeamento determinístico para FilterErrorPayload
- Separar falhas de validação (não fatais) de falhas de recurso (fatais)

Hierarquia:
- FilterException
    - CodecError
        - MalformedPayloadError   → texto com prefixo que não é base64 válido
        - AllocationFailureError  → exaustão de memória durante encode/decode

Regras:
- Exceções carregam apenas dados estruturados (serializáveis) em `details`.
- Nenhuma exceção embute stack trace ou o buffer de saída.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class FilterException(Exception):
    """Base class para exceções internas do filtro.

    Importante:
    - Sempre carregar dados estruturados em `details`
    - Mensagem deve ser curta e humana
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        hint: Optional[str] = None,
    ) -> None:
        super().__init__(message)
        self.message = message
        self.details: Dict[str, Any] = dict(details or {})
        self.hint = hint

    def __str__(self) -> str:
        return self.message


class CodecError(FilterException):
    """Falha do transcoder base64 (decode ou encode)."""


class MalformedPayloadError(CodecError):
    """Texto não é um payload base64 válido.

    Falha de validação, nunca fatal: o chamador decide o fallback.
    """


class AllocationFailureError(CodecError):
    """Buffer de saída não pôde ser obtido.

    Fatal: aborta a fase corrente, sem retry.
    """
