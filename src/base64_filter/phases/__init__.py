"""
Fases do Base64 Filter.

- write_phase → direção encode: binário vira `@` + base64, texto com `@` é escapado
- read_phase  → direção decode: `@` + base64 volta a binário, `@@` é desescapado

Cada fase é uma única travessia síncrona da coleção; cada entrada é
visitada exatamente uma vez.
"""

from .entry import PREFIX, decode_entry, encode_entry, escape_entry, unescape_entry  # noqa: F401
from .read import READ_PHASE_ID, read_phase  # noqa: F401
from .write import WRITE_PHASE_ID, write_phase  # noqa: F401
