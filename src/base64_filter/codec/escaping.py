"""
Escape do marcador `@` em valores textuais.

- `escape("@x")`   → `"@@x"` (changed)
- `unescape("@@x")` → `"@x"` (changed)
- qualquer outro texto é devolvido sem alteração, com `changed=False`

Apenas os dois primeiros caracteres são inspecionados.
"""

from __future__ import annotations

from dataclasses import dataclass


MARKER = "@"
DOUBLED_MARKER = MARKER + MARKER


@dataclass(frozen=True)
class EscapeOutcome:
    """Texto resultante e se houve transformação."""

    value: str
    changed: bool


def escape(text: str) -> EscapeOutcome:
    if text.startswith(MARKER):
        return EscapeOutcome(MARKER + text, True)
    return EscapeOutcome(text, False)


def unescape(text: str) -> EscapeOutcome:
    if text.startswith(DOUBLED_MARKER):
        return EscapeOutcome(text[1:], True)
    return EscapeOutcome(text, False)
