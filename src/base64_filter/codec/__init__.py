"""
Codec do Base64 Filter.

- transcoder → bytes ↔ texto base64 padrão (sem conhecimento de marcador)
- escaping   → duplicação/remoção do marcador `@` no início de textos
"""

from .escaping import MARKER, EscapeOutcome, escape, unescape  # noqa: F401
from .transcoder import decode, encode  # noqa: F401
