"""
Transcoder base64 padrão (RFC 4648, alfabeto `A-Z a-z 0-9 + /`, padding `=`).

Contrato:
- `encode(data)` produz `4 * ceil(n / 3)` caracteres, sem quebras de linha.
- `decode(text)` é o inverso estrito de `encode`; rejeita comprimento que não
  seja múltiplo de 4, caracteres fora do alfabeto e padding fora das duas
  últimas posições com `MalformedPayloadError`.
- `MemoryError` durante a conversão vira `AllocationFailureError` (fatal).

Funções puras: nenhum estado global, cada chamada é independente.
"""

from __future__ import annotations

import re
from base64 import b64decode, b64encode
from binascii import Error as BinasciiError
from typing import Union

from base64_filter.core.exceptions import AllocationFailureError, MalformedPayloadError


# grupos completos + último grupo opcionalmente com 1 ou 2 `=`
_CANONICAL = re.compile(
    r"(?:[A-Za-z0-9+/]{4})*(?:[A-Za-z0-9+/]{2}==|[A-Za-z0-9+/]{3}=)?"
)
_FOREIGN = re.compile(r"[^A-Za-z0-9+/=]")


def encode(data: Union[bytes, bytearray, memoryview]) -> str:
    """Codifica bytes arbitrários em texto base64 padrão."""
    if isinstance(data, str):
        raise TypeError("encode expects bytes, got: str")
    try:
        return b64encode(bytes(data)).decode("ascii")
    except MemoryError as e:
        raise AllocationFailureError(
            "Memory allocation failed",
            details={"operation": "encode", "input_bytes": len(data)},
        ) from e


def _malformed(text: str, reason: str) -> MalformedPayloadError:
    return MalformedPayloadError(
        f"Not Base64 encoded: {text}",
        details={"reason": reason, "length": len(text)},
    )


def decode(text: str) -> bytes:
    """
    Decodifica texto base64 padrão.

    `decode("")` retorna `b""`.

    Raises:
        MalformedPayloadError: texto não é base64 padrão válido.
        AllocationFailureError: buffer de saída não pôde ser alocado.
    """
    if not isinstance(text, str):
        raise TypeError(f"decode expects str, got: {type(text).__name__}")

    if len(text) % 4 != 0:
        raise _malformed(text, "length is not a multiple of 4")
    if _FOREIGN.search(text) is not None:
        raise _malformed(text, "character outside the base64 alphabet")
    if _CANONICAL.fullmatch(text) is None:
        raise _malformed(text, "misplaced padding")

    try:
        return b64decode(text, validate=True)
    except MemoryError as e:
        raise AllocationFailureError(
            "Memory allocation failed",
            details={"operation": "decode", "input_chars": len(text)},
        ) from e
    except (BinasciiError, ValueError) as e:
        raise _malformed(text, str(e) or "invalid base64") from e
