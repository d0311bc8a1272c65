"""
Transformações por entrada usadas pelas fases.

Cada função recebe uma única `Entry`, decide pela classificação e pelo
prefixo do valor se se aplica e devolve o `EntryOutcome` correspondente.
Nenhuma delas conhece a coleção ou o contexto.
"""

from __future__ import annotations

from base64_filter.codec.escaping import MARKER, escape, unescape
from base64_filter.codec.transcoder import decode, encode
from base64_filter.core.pipeline.collection import Entry
from base64_filter.core.pipeline.types import EntryOutcome


PREFIX = MARKER


def encode_entry(entry: Entry) -> EntryOutcome:
    """Binário → texto `PREFIX + base64(valor)`."""
    if not entry.is_binary:
        return EntryOutcome.UNCHANGED
    entry.set_text(PREFIX + encode(entry.value))
    return EntryOutcome.CONVERTED


def escape_entry(entry: Entry) -> EntryOutcome:
    if not entry.is_text:
        return EntryOutcome.UNCHANGED
    outcome = escape(entry.value)
    if not outcome.changed:
        return EntryOutcome.UNCHANGED
    entry.set_text(outcome.value)
    return EntryOutcome.ESCAPED


def decode_entry(entry: Entry) -> EntryOutcome:
    """
    Texto `PREFIX + base64` → binário.

    Raises:
        MalformedPayloadError: o restante após o prefixo não é base64 válido;
            a entrada não é alterada.
        AllocationFailureError: propagada do transcoder.
    """
    if not entry.is_text or not entry.value.startswith(PREFIX):
        return EntryOutcome.UNCHANGED
    decoded = decode(entry.value[len(PREFIX):])
    entry.set_binary(decoded)
    return EntryOutcome.CONVERTED


def unescape_entry(entry: Entry) -> EntryOutcome:
    if not entry.is_text:
        return EntryOutcome.UNCHANGED
    outcome = unescape(entry.value)
    if not outcome.changed:
        return EntryOutcome.UNCHANGED
    entry.set_text(outcome.value)
    return EntryOutcome.UNESCAPED
