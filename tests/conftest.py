# tests/conftest.py
"""
Fixtures compartilhados para testes do Base64 Filter.

Este módulo define fixtures reutilizáveis que fornecem:
- configurações mínimas e determinísticas
- contexto de diagnóstico controlado (FilterContext)
- conteúdos YAML de configuração (defaults + local)
- uma coleção `KeySet` com as três classes de valor textual

Invariantes:
    - Nenhuma fixture executa uma fase
    - Nenhuma fixture realiza I/O
    - Dados retornados são determinísticos e isolados por teste
"""

import pytest
from datetime import datetime, timezone


# =====================================================
# Config fixtures
# =====================================================

@pytest.fixture
def project_like_config_defaults_yaml() -> str:
    """
    YAML de defaults semelhante ao usado por um host real.

    Returns:
        str: Conteúdo YAML representando a configuração padrão do host.
    """
    return """\
phases:
  write:
    enabled: true
  read:
    enabled: true
diagnostics:
  log_entry_events: false
  max_value_chars: 64
"""


@pytest.fixture
def project_like_config_local_yaml() -> str:
    """
    YAML de override local: desliga a leitura e liga eventos por entrada.

    Returns:
        str: Conteúdo YAML representando apenas overrides locais.
    """
    return """\
phases:
  read:
    enabled: false
diagnostics:
  log_entry_events: true
"""


@pytest.fixture
def dummy_config() -> dict:
    """
    Configuração mínima e válida, já resolvida.

    Returns:
        dict: Configuração com ambas as fases habilitadas.
    """
    return {
        "phases": {"write": {"enabled": True}, "read": {"enabled": True}},
        "diagnostics": {"log_entry_events": False, "max_value_chars": None},
    }


# =====================================================
# Context / collection fixtures
# =====================================================

@pytest.fixture
def dummy_ctx(dummy_config):
    """
    FilterContext determinístico para testes.

    `run_id` e `created_at` são fixos; a config é injetada via fixture.
    """
    from base64_filter.core.pipeline.context import FilterContext
    return FilterContext(
        run_id="run-test-001",
        created_at=datetime(2026, 1, 16, 0, 0, 0, tzinfo=timezone.utc),
        config=dummy_config,
        meta={"source": "pytest"},
    )


@pytest.fixture
def mixed_keyset():
    """
    KeySet com texto comum, texto que colide com o marcador e binários.
    """
    from base64_filter.core.pipeline.collection import KeySet
    return KeySet.from_dict(
        {
            "user/plain": "hello",
            "user/at": "@hello",
            "user/double_at": "@@x",
            "user/lone_at": "@",
            "user/empty_text": "",
            "user/bin": bytes([0x00, 0x01, 0x02]),
            "user/ff": bytes([0xFF]),
            "user/empty_bin": b"",
        }
    )
