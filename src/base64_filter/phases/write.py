"""Fase canônica: base64.write (direção encode).

Para cada entrada, numa única travessia:
1. texto começando com `@`  → escape (`@x` → `@@x`), continua texto
2. binário                  → `@` + base64(valor), passa a texto
3. demais textos            → inalterados

Entradas sob `CONTRACT_PATH` (descritor publicado) não são visitadas.

Falhas:
- `AllocationFailureError` aborta a fase imediatamente (FAILED); entradas
  já convertidas permanecem convertidas e as restantes não são tocadas.
- opções inválidas → FAILED antes de tocar qualquer entrada.

Config esperada (exemplo):
phases:
  write:
    enabled: true
"""

from __future__ import annotations

from typing import Optional

from base64_filter.core.config.errors import InvalidFilterOptionsError
from base64_filter.core.config.options import resolve_filter_options
from base64_filter.core.errors import (
    filter_configuration_error,
    filter_execution_error,
    memory_allocation,
)
from base64_filter.core.exceptions import AllocationFailureError
from base64_filter.core.pipeline.collection import EntryCollection
from base64_filter.core.pipeline.context import FilterContext
from base64_filter.core.pipeline.types import EntryOutcome, PhaseKind, PhaseResult, PhaseStatus

from ._common import (
    is_contract_entry,
    mk_failure,
    mk_result,
    new_metrics,
    tally,
    warning_mark,
)
from .entry import encode_entry, escape_entry


WRITE_PHASE_ID = "base64.write"


def write_phase(collection: EntryCollection, ctx: FilterContext) -> PhaseResult:
    """Converte valores binários em texto seguro e escapa textos com `@`."""
    metrics = new_metrics()
    mark = warning_mark(ctx, WRITE_PHASE_ID)

    try:
        options = resolve_filter_options(ctx.config)
    except InvalidFilterOptionsError as e:
        return mk_failure(
            ctx=ctx,
            phase_id=WRITE_PHASE_ID,
            kind=PhaseKind.WRITE,
            error=filter_configuration_error(details={"reason": str(e)}),
            metrics=metrics,
            warnings_from=mark,
        )

    if not options.is_enabled("write"):
        return mk_result(
            ctx=ctx,
            phase_id=WRITE_PHASE_ID,
            kind=PhaseKind.WRITE,
            status=PhaseStatus.SKIPPED,
            summary="phase disabled by config",
            metrics=metrics,
            warnings_from=mark,
            payload={"disabled": True},
        )

    ctx.log(phase_id=WRITE_PHASE_ID, level="info", message="write phase started")

    current: Optional[str] = None
    try:
        for entry in collection:
            if is_contract_entry(entry):
                continue
            current = entry.name
            if entry.is_binary:
                outcome = encode_entry(entry)
                if options.log_entry_events:
                    ctx.log(
                        phase_id=WRITE_PHASE_ID,
                        level="debug",
                        message="encode binary value",
                        entry=entry.name,
                        encoded_chars=len(entry.value),
                    )
            else:
                outcome = escape_entry(entry)
                if options.log_entry_events and outcome is EntryOutcome.ESCAPED:
                    ctx.log(
                        phase_id=WRITE_PHASE_ID,
                        level="debug",
                        message="escape marker",
                        entry=entry.name,
                    )
            tally(metrics, outcome)

    except (AllocationFailureError, MemoryError):
        return mk_failure(
            ctx=ctx,
            phase_id=WRITE_PHASE_ID,
            kind=PhaseKind.WRITE,
            error=memory_allocation(operation="encode", entry=current, phase=WRITE_PHASE_ID),
            metrics=metrics,
            warnings_from=mark,
            aborted_at=current,
        )
    except Exception as e:
        return mk_failure(
            ctx=ctx,
            phase_id=WRITE_PHASE_ID,
            kind=PhaseKind.WRITE,
            error=filter_execution_error(
                phase=WRITE_PHASE_ID,
                entry=current,
                exc_type=e.__class__.__name__,
                exc_message=str(e) or None,
            ),
            metrics=metrics,
            warnings_from=mark,
            aborted_at=current,
        )

    ctx.log(phase_id=WRITE_PHASE_ID, level="info", message="write phase finished", **metrics)

    return mk_result(
        ctx=ctx,
        phase_id=WRITE_PHASE_ID,
        kind=PhaseKind.WRITE,
        status=PhaseStatus.SUCCESS,
        summary="binary values encoded, marker-prefixed text escaped",
        metrics=metrics,
        warnings_from=mark,
    )
