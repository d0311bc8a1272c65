"""Testes unitários da fase base64.read.

Cobre:
- payloads `@` + base64 restaurados como binário
- literais `@@` desescapados
- payload malformado: warning, sem conversão, fallback para unescape
- truncamento do valor citado no warning
- fase desabilitada
- warnings do resultado restritos à execução corrente
"""

from base64_filter.core.errors import BASE64_DECODING
from base64_filter.core.pipeline.collection import KeySet, ValueKind
from base64_filter.core.pipeline.types import PhaseKind, PhaseStatus
from base64_filter.phases.read import READ_PHASE_ID, read_phase


def test_read_phase_restores_binaries(dummy_ctx):
    ks = KeySet.from_dict({"a": "@AAEC", "b": "@/w==", "c": "@", "d": "hello"})

    result = read_phase(ks, dummy_ctx)

    assert result.status == PhaseStatus.SUCCESS
    assert result.kind == PhaseKind.READ
    assert ks.to_dict() == {
        "a": bytes([0x00, 0x01, 0x02]),
        "b": bytes([0xFF]),
        "c": b"",
        "d": "hello",
    }
    assert ks.get("a").kind is ValueKind.BINARY
    assert ks.get("d").kind is ValueKind.TEXT
    assert result.metrics["converted"] == 3
    assert result.metrics["unchanged"] == 1
    assert result.warnings == []


def test_read_phase_unescapes_doubled_marker(dummy_ctx):
    ks = KeySet.from_dict({"a": "@@hello"})

    result = read_phase(ks, dummy_ctx)

    entry = ks.get("a")
    assert entry.value == "@hello"
    assert entry.kind is ValueKind.TEXT
    assert result.metrics["unescaped"] == 1
    assert result.metrics["converted"] == 0


def test_read_phase_malformed_payload_warns_and_falls_through(dummy_ctx):
    ks = KeySet.from_dict({"bad": "@not base64!", "escaped": "@@hello"})

    result = read_phase(ks, dummy_ctx)

    assert result.status == PhaseStatus.SUCCESS
    # malformado sem `@@` permanece intacto e nunca conta como convertido
    assert ks.get("bad").value == "@not base64!"
    assert ks.get("bad").kind is ValueKind.TEXT
    assert ks.get("escaped").value == "@hello"

    assert result.metrics["converted"] == 0
    assert result.metrics["malformed"] == 2
    assert "Not Base64 encoded: @not base64!" in result.warnings
    assert dummy_ctx.warnings[READ_PHASE_ID] == result.warnings

    warning_events = [ev for ev in dummy_ctx.events if ev["level"] == "warning"]
    assert {ev["entry"] for ev in warning_events} == {"bad", "escaped"}
    assert all(ev["error_type"] == BASE64_DECODING for ev in warning_events)


def test_read_phase_warning_value_is_clipped(dummy_ctx):
    dummy_ctx.config["diagnostics"]["max_value_chars"] = 4
    ks = KeySet.from_dict({"bad": "@!!!!!!!!!!"})

    result = read_phase(ks, dummy_ctx)

    assert result.warnings == ["Not Base64 encoded: @!!!..."]


def test_read_phase_leaves_binary_untouched(dummy_ctx):
    ks = KeySet.from_dict({"raw": b"@@x"})

    result = read_phase(ks, dummy_ctx)

    assert ks.get("raw").value == b"@@x"
    assert result.metrics["unchanged"] == 1


def test_read_phase_entry_events_when_enabled(dummy_ctx):
    dummy_ctx.config["diagnostics"]["log_entry_events"] = True
    ks = KeySet.from_dict({"a": "@AAEC", "b": "plain"})

    read_phase(ks, dummy_ctx)

    debug = [ev for ev in dummy_ctx.events if ev["level"] == "debug"]
    assert len(debug) == 1
    assert debug[0]["message"] == "decode binary value"
    assert debug[0]["entry"] == "a"
    assert debug[0]["decoded_bytes"] == 3


def test_read_phase_disabled_is_noop(dummy_ctx):
    ks = KeySet.from_dict({"a": "@AAEC"})
    dummy_ctx.config["phases"]["read"]["enabled"] = False

    result = read_phase(ks, dummy_ctx)

    assert result.status == PhaseStatus.SKIPPED
    assert ks.get("a").value == "@AAEC"


def test_read_phase_reports_only_warnings_of_current_run(dummy_ctx):
    first = read_phase(KeySet.from_dict({"a": "@bad!"}), dummy_ctx)
    second = read_phase(KeySet.from_dict({"a": "plain"}), dummy_ctx)

    assert first.warnings == ["Not Base64 encoded: @bad!"]
    assert second.warnings == []
    # o contexto continua acumulando os avisos de todas as execuções
    assert dummy_ctx.warnings[READ_PHASE_ID] == ["Not Base64 encoded: @bad!"]
