"""
Base64 Filter — transformação bidirecional de valores binários em texto seguro.

Na escrita, valores binários de uma coleção de configuração viram texto
`@` + base64 e textos que começam com `@` são escapados como `@@`; na
leitura, a transformação é desfeita. Uma escrita seguida de uma leitura
reproduz exatamente os valores e classificações originais.

Arquitetura em alto nível:
    - codec          → transcoder base64 e escape do marcador
    - phases         → write_phase / read_phase (uma travessia por fase)
    - core.pipeline  → Entry, KeySet, FilterContext, PhaseResult
    - core.config    → carregamento e validação de opções
    - core.contract  → descritor estático publicado pelo host

Limites explícitos:
    - Não define o formato de armazenamento do backend
    - Não implementa compressão
    - Não decide quais entradas são candidatas além de texto vs binário
"""

from .codec import MARKER, decode, encode, escape, unescape
from .core.config import load_config
from .core.contract import CONTRACT_PATH, contract_entries, plugin_contract, publish_contract
from .core.pipeline import (
    Entry,
    EntryCollection,
    EntryOutcome,
    FilterContext,
    KeySet,
    PhaseKind,
    PhaseResult,
    PhaseStatus,
    ValueKind,
    new_context,
)
from .phases import read_phase, write_phase

__all__ = [
    "MARKER",
    "encode",
    "decode",
    "escape",
    "unescape",
    "load_config",
    "CONTRACT_PATH",
    "contract_entries",
    "plugin_contract",
    "publish_contract",
    "Entry",
    "EntryCollection",
    "EntryOutcome",
    "FilterContext",
    "KeySet",
    "PhaseKind",
    "PhaseResult",
    "PhaseStatus",
    "ValueKind",
    "new_context",
    "read_phase",
    "write_phase",
]

__version__ = "1.0.0"
