# src/base64_filter/core/pipeline/__init__.py
"""
# Pipeline Core — Base64 Filter

Este pacote define os **contratos canônicos** consumidos pelas fases de
leitura e escrita do filtro.

## Componentes

- **collection**
  - `ValueKind`: classificação de valor (texto ou binário)
  - `Entry`: célula endereçável com nome e valor classificado
  - `EntryCollection` (Protocol): coleção iterável de entradas
  - `KeySet`: coleção em memória, ordenada por inserção
- **context**
  - `FilterContext`: sink de diagnósticos (eventos, warnings, erro fatal)
- **types**
  - `PhaseKind`, `PhaseStatus`, `EntryOutcome`, `PhaseResult`

## Invariantes

- Uma entrada é texto ou binário, nunca ambos
- Valor e classificação mudam juntos
- As fases nunca criam nem removem entradas
"""

from .collection import (  # noqa: F401
    DuplicateEntryNameError,
    Entry,
    EntryCollection,
    KeySet,
    ValueKind,
)
from .context import FilterContext, new_context  # noqa: F401
from .types import EntryOutcome, PhaseKind, PhaseResult, PhaseStatus  # noqa: F401
