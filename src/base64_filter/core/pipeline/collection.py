# src/base64_filter/core/pipeline/collection.py
"""
Adapter de coleção de entradas consumido pelas fases.

Este módulo define a interface mínima que uma coleção hospedeira precisa
oferecer ao filtro e uma implementação em memória (`KeySet`) usada pelos
hosts simples e pelos testes.

Modelo de dados:
    - `Entry` possui um nome opaco e um valor
    - valor `str` → classificação TEXT
    - valor `bytes` → classificação BINARY

Invariantes:
    - A classificação é derivada do valor armazenado, portanto nunca fica
      desatualizada após uma escrita
    - Nomes são únicos dentro de um `KeySet`
    - A ordem de iteração de um `KeySet` é a ordem de inserção

Limites explícitos:
    - Não define formato de persistência
    - Não decide quais entradas são candidatas a transformação
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum
from typing import Dict, Iterator, List, Protocol, Union, runtime_checkable


Value = Union[str, bytes]


class ValueKind(str, Enum):
    """Classificação do valor de uma entrada."""

    TEXT = "text"
    BINARY = "binary"


class DuplicateEntryNameError(ValueError):
    """
    Exceção levantada quando se tenta adicionar duas entradas com o mesmo nome.

    A duplicidade é detectada no momento do registro; nenhum registro
    parcial é aceito.
    """


def _coerce(value: object) -> Value:
    if isinstance(value, str):
        return value
    if isinstance(value, (bytes, bytearray, memoryview)):
        return bytes(value)
    raise TypeError(
        f"entry value must be str or bytes, got: {type(value).__name__}"
    )


class Entry:
    """
    Célula de valor endereçável, classificada como texto ou binário.

    O valor é mantido como `str` (TEXT) ou `bytes` (BINARY); os setters
    trocam valor e classificação numa única atribuição.
    """

    __slots__ = ("_name", "_value")

    def __init__(self, name: str, value: Value = "") -> None:
        if not isinstance(name, str) or not name:
            raise ValueError("entry name must be a non-empty string")
        self._name = name
        self._value: Value = _coerce(value)

    @property
    def name(self) -> str:
        return self._name

    @property
    def value(self) -> Value:
        return self._value

    @property
    def kind(self) -> ValueKind:
        return ValueKind.TEXT if isinstance(self._value, str) else ValueKind.BINARY

    @property
    def is_text(self) -> bool:
        return isinstance(self._value, str)

    @property
    def is_binary(self) -> bool:
        return not isinstance(self._value, str)

    def set_text(self, value: str) -> None:
        if not isinstance(value, str):
            raise TypeError(f"text value must be str, got: {type(value).__name__}")
        self._value = value

    def set_binary(self, value: bytes) -> None:
        if isinstance(value, str):
            raise TypeError("binary value must be bytes, got: str")
        self._value = _coerce(value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entry):
            return NotImplemented
        return self._name == other._name and self._value == other._value

    __hash__ = None  # type: ignore[assignment]

    def __repr__(self) -> str:
        return f"Entry(name={self._name!r}, value={self._value!r})"


@runtime_checkable
class EntryCollection(Protocol):
    """
    Contrato mínimo de uma coleção hospedeira.

    As fases apenas iteram a coleção uma vez e reescrevem valores in place
    via `Entry.set_text` / `Entry.set_binary`.
    """

    def __iter__(self) -> Iterator[Entry]:
        ...


@dataclass
class KeySet:
    """
    Coleção em memória de entradas, com nomes únicos e ordem de inserção.
    """

    _entries: Dict[str, Entry] = field(default_factory=dict, init=False, repr=False)
    _order: List[str] = field(default_factory=list, init=False, repr=False)

    @classmethod
    def from_dict(cls, values: Dict[str, Value]) -> "KeySet":
        ks = cls()
        for name, value in values.items():
            ks.add(Entry(name, value))
        return ks

    def add(self, entry: Entry) -> None:
        if not isinstance(entry, Entry):
            raise TypeError("KeySet.add expects an Entry")
        if entry.name in self._entries:
            raise DuplicateEntryNameError(f"Duplicate entry name: {entry.name}")
        self._entries[entry.name] = entry
        self._order.append(entry.name)

    def set(self, name: str, value: Value) -> Entry:
        """Insere ou substitui o valor de `name`, preservando a posição."""
        existing = self._entries.get(name)
        if existing is None:
            entry = Entry(name, value)
            self.add(entry)
            return entry
        if isinstance(value, str):
            existing.set_text(value)
        else:
            existing.set_binary(value)
        return existing

    def get(self, name: str) -> Entry:
        return self._entries[name]

    def names(self) -> List[str]:
        return list(self._order)

    def to_dict(self) -> Dict[str, Value]:
        return {name: self._entries[name].value for name in self._order}

    def __contains__(self, name: object) -> bool:
        return name in self._entries

    def __len__(self) -> int:
        return len(self._order)

    def __iter__(self) -> Iterator[Entry]:
        # snapshot da ordem: cada entrada é visitada exatamente uma vez
        for name in list(self._order):
            yield self._entries[name]
