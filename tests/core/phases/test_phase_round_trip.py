"""
Testes de round trip write → read.

Uma escrita seguida de uma leitura reproduz exatamente os bytes e a
classificação originais de cada entrada, incluindo textos que colidem
com o marcador.
"""

import os

import pytest

from base64_filter.core.pipeline.collection import Entry, KeySet, ValueKind
from base64_filter.core.pipeline.types import PhaseStatus
from base64_filter.phases.read import read_phase
from base64_filter.phases.write import write_phase


def _round_trip(value, ctx):
    ks = KeySet()
    ks.add(Entry("user/key", value))
    assert write_phase(ks, ctx).status == PhaseStatus.SUCCESS
    written = ks.get("user/key").value
    assert read_phase(ks, ctx).status == PhaseStatus.SUCCESS
    return written, ks.get("user/key")


@pytest.mark.parametrize(
    "value, persisted",
    [
        (bytes([0x00, 0x01, 0x02]), "@AAEC"),
        (bytes([0xFF]), "@/w=="),
        (b"", "@"),
        ("@hello", "@@hello"),
        ("hello", "hello"),
    ],
)
def test_concrete_vectors(dummy_ctx, value, persisted):
    written, entry = _round_trip(value, dummy_ctx)

    assert written == persisted
    assert entry.value == value
    assert entry.kind is (ValueKind.TEXT if isinstance(value, str) else ValueKind.BINARY)


def test_marker_text_regression(dummy_ctx):
    """`@hello` não é base64 válido, mas ainda assim precisa voltar como texto."""
    written, entry = _round_trip("@hello", dummy_ctx)

    assert written == "@@hello"
    assert entry.is_text
    assert entry.value == "@hello"


@pytest.mark.parametrize("n", [0, 1, 2, 3, 4, 5, 63, 64, 65, 1024])
def test_binary_round_trip(dummy_ctx, n):
    data = os.urandom(n)
    _, entry = _round_trip(data, dummy_ctx)

    assert entry.is_binary
    assert entry.value == data


@pytest.mark.parametrize(
    "text",
    ["", "plain", "a@b", " @", "AAEC", "über", "@", "@@", "@@x", "@@@", "@AAEC", "@/w=="],
)
def test_text_round_trip(dummy_ctx, text):
    _, entry = _round_trip(text, dummy_ctx)

    assert entry.is_text
    assert entry.value == text


def test_binary_that_looks_like_marker_text(dummy_ctx):
    _, entry = _round_trip(b"@@hello", dummy_ctx)

    assert entry.is_binary
    assert entry.value == b"@@hello"


def test_whole_keyset_round_trip(dummy_ctx, mixed_keyset):
    original = mixed_keyset.to_dict()

    write_phase(mixed_keyset, dummy_ctx)
    read_phase(mixed_keyset, dummy_ctx)

    assert mixed_keyset.to_dict() == original
    assert mixed_keyset.names() == list(original)
