# tests/core/config/test_hashing.py
"""
Testes do hashing canônico de configuração.

Os testes asseguram que:
- o hash é determinístico e independente da ordem das chaves
- o hash corresponde ao SHA-256 do JSON canônico
- qualquer override altera o hash
- inputs que não são dict são rejeitados
"""

import json
import hashlib

import pytest

from base64_filter.core.config.hashing import compute_config_hash
from base64_filter.core.config.loader import DEFAULT_CONFIG
from base64_filter.core.config.merge import deep_merge


def _canonical_json_bytes(obj: dict) -> bytes:
    """Serialização JSON canônica usada como referência explícita nos testes."""
    return json.dumps(obj, sort_keys=True, separators=(",", ":"), ensure_ascii=False).encode("utf-8")


def test_hash_is_deterministic():
    """
    Configurações equivalentes produzem o mesmo hash, de 64 caracteres,
    independentemente da ordem original das chaves.
    """
    h1 = compute_config_hash({"b": 2, "a": 1})
    h2 = compute_config_hash({"a": 1, "b": 2})

    assert h1 == h2
    assert isinstance(h1, str)
    assert len(h1) == 64


def test_hash_matches_sha256_of_canonical_json():
    cfg = DEFAULT_CONFIG

    expected = hashlib.sha256(_canonical_json_bytes(cfg)).hexdigest()

    assert compute_config_hash(cfg) == expected


def test_hash_changes_on_override():
    base = DEFAULT_CONFIG
    merged = deep_merge(base, {"phases": {"read": {"enabled": False}}})

    assert compute_config_hash(base) != compute_config_hash(merged)


def test_hash_rejects_non_dict():
    with pytest.raises(TypeError):
        compute_config_hash(["phases"])
