# tests/core/config/test_loader.py
"""
Testes do carregador de configuração (load_config).

Os testes asseguram que:
- sem arquivos, a configuração efetiva é `DEFAULT_CONFIG`
- um arquivo de defaults informado é obrigatório
- o arquivo local é opcional
- YAML e JSON são suportados; outras extensões são rejeitadas
- raiz que não é mapeamento é rejeitada
- a precedência é DEFAULT_CONFIG < defaults < local
"""

import json
from pathlib import Path

import pytest

try:
    from base64_filter.core.config.loader import DEFAULT_CONFIG, load_config
    from base64_filter.core.config.errors import (
        ConfigTypeConflictError,
        DefaultsNotFoundError,
        InvalidConfigRootTypeError,
        UnsupportedConfigFormatError,
    )
except Exception as e:  # noqa: BLE001
    load_config = None
    _IMPORT_ERR = e
else:
    _IMPORT_ERR = None


def _require_imports():
    """
    Garante que o loader de configuração e suas exceções tipadas estejam
    disponíveis, falhando com mensagem explícita caso contrário.
    """
    if _IMPORT_ERR is not None:
        pytest.fail(
            "Missing loader/errors modules. Implement:\n"
            "- src/base64_filter/core/config/loader.py (load_config)\n"
            "- src/base64_filter/core/config/errors.py (typed exceptions)\n"
            f"Import error: {_IMPORT_ERR}"
        )


def test_no_files_returns_builtin_defaults():
    _require_imports()

    out = load_config()

    assert out == DEFAULT_CONFIG
    assert out is not DEFAULT_CONFIG


def test_missing_defaults_raises(tmp_path: Path):
    """
    Um arquivo de defaults explicitamente informado e ausente é erro fatal;
    nenhuma configuração parcial é retornada.
    """
    _require_imports()

    missing = tmp_path / "defaults.yaml"

    with pytest.raises(DefaultsNotFoundError):
        load_config(defaults_path=str(missing), local_path=None)


def test_missing_local_is_ok(tmp_path: Path, project_like_config_defaults_yaml):
    _require_imports()

    defaults = tmp_path / "defaults.yaml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(tmp_path / "local.yaml"))

    assert out["phases"]["read"]["enabled"] is True
    assert out["diagnostics"]["max_value_chars"] == 64


def test_load_defaults_and_local(
    tmp_path: Path,
    project_like_config_defaults_yaml,
    project_like_config_local_yaml,
):
    """O override local tem prioridade e preserva chaves não sobrescritas."""
    _require_imports()

    defaults = tmp_path / "defaults.yaml"
    local = tmp_path / "local.yml"
    defaults.write_text(project_like_config_defaults_yaml, encoding="utf-8")
    local.write_text(project_like_config_local_yaml, encoding="utf-8")

    out = load_config(defaults_path=str(defaults), local_path=str(local))

    assert out["phases"]["write"]["enabled"] is True
    assert out["phases"]["read"]["enabled"] is False
    assert out["diagnostics"]["log_entry_events"] is True
    assert out["diagnostics"]["max_value_chars"] == 64


def test_load_json_local_only(tmp_path: Path):
    _require_imports()

    local = tmp_path / "local.json"
    local.write_text(json.dumps({"phases": {"write": {"enabled": False}}}), encoding="utf-8")

    out = load_config(local_path=str(local))

    assert out["phases"]["write"]["enabled"] is False
    assert out["phases"]["read"]["enabled"] is True


def test_empty_yaml_is_empty_mapping(tmp_path: Path):
    _require_imports()

    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("", encoding="utf-8")

    assert load_config(defaults_path=str(defaults)) == DEFAULT_CONFIG


def test_invalid_root_type_raises(tmp_path: Path):
    _require_imports()

    defaults = tmp_path / "defaults.yaml"
    defaults.write_text("- a\n- b\n", encoding="utf-8")

    with pytest.raises(InvalidConfigRootTypeError):
        load_config(defaults_path=str(defaults))


def test_unsupported_extension_raises(tmp_path: Path):
    _require_imports()

    defaults = tmp_path / "defaults.toml"
    defaults.write_text("[phases]\n", encoding="utf-8")

    with pytest.raises(UnsupportedConfigFormatError):
        load_config(defaults_path=str(defaults))


def test_type_conflict_with_builtin_defaults_raises(tmp_path: Path):
    _require_imports()

    local = tmp_path / "local.yaml"
    local.write_text("phases: off\n", encoding="utf-8")

    with pytest.raises(ConfigTypeConflictError):
        load_config(local_path=str(local))
