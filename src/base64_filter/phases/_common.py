"""Helpers compartilhados pelas fases (resultado, métricas, falhas)."""

from __future__ import annotations

from typing import Any, Dict, Optional

from base64_filter.core.config.hashing import compute_config_hash
from base64_filter.core.contract.descriptor import CONTRACT_PATH
from base64_filter.core.errors import FilterErrorPayload
from base64_filter.core.pipeline.collection import Entry
from base64_filter.core.pipeline.context import FilterContext
from base64_filter.core.pipeline.types import EntryOutcome, PhaseKind, PhaseResult, PhaseStatus


def new_metrics() -> Dict[str, int]:
    metrics = {"entries": 0, "malformed": 0}
    for outcome in EntryOutcome:
        metrics[outcome.value] = 0
    return metrics


def tally(metrics: Dict[str, int], outcome: EntryOutcome) -> None:
    metrics["entries"] += 1
    metrics[outcome.value] += 1


def is_contract_entry(entry: Entry) -> bool:
    """Entradas do descritor publicado não participam da travessia."""
    return entry.name == CONTRACT_PATH or entry.name.startswith(CONTRACT_PATH + "/")


def warning_mark(ctx: FilterContext, phase_id: str) -> int:
    return len(ctx.warnings.get(phase_id, []))


def config_hash(ctx: FilterContext) -> Optional[str]:
    cfg = ctx.config if ctx.config is not None else {}
    if not isinstance(cfg, dict):
        return None
    try:
        return compute_config_hash(cfg)
    except (TypeError, ValueError):
        # config com valores não serializáveis em JSON
        return None


def mk_result(
    *,
    ctx: FilterContext,
    phase_id: str,
    kind: PhaseKind,
    status: PhaseStatus,
    summary: str,
    metrics: Optional[Dict[str, Any]] = None,
    payload: Optional[Dict[str, Any]] = None,
    warnings_from: int = 0,
) -> PhaseResult:
    full_payload: Dict[str, Any] = {"config_hash": config_hash(ctx)}
    full_payload.update(payload or {})
    return PhaseResult(
        phase_id=phase_id,
        kind=kind,
        status=status,
        summary=summary,
        metrics=dict(metrics or {}),
        warnings=list(ctx.warnings.get(phase_id, [])[warnings_from:]),
        payload=full_payload,
    )


def mk_failure(
    *,
    ctx: FilterContext,
    phase_id: str,
    kind: PhaseKind,
    error: FilterErrorPayload,
    metrics: Optional[Dict[str, Any]] = None,
    aborted_at: Optional[str] = None,
    warnings_from: int = 0,
) -> PhaseResult:
    """Registra o erro fatal no contexto e produz o resultado FAILED."""
    ctx.set_error(phase_id=phase_id, error=error)
    return mk_result(
        ctx=ctx,
        phase_id=phase_id,
        kind=kind,
        status=PhaseStatus.FAILED,
        summary=error.message,
        metrics=metrics,
        payload={"error": error.to_dict(), "aborted_at": aborted_at},
        warnings_from=warnings_from,
    )
