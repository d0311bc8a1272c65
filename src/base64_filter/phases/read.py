"""Fase canônica: base64.read (direção decode).

Para cada entrada, numa única travessia:
1. texto começando com `@` → tenta decodificar o restante
   - sucesso: valor vira binário (converted)
   - payload malformado: warning no contexto, valor intacto, segue para (2)
   - falha de alocação: aborta a fase (FAILED)
2. texto começando com `@@` → unescape (`@@x` → `@x`), continua texto
3. demais entradas → inalteradas

Entradas sob `CONTRACT_PATH` (descritor publicado) não são visitadas.

Um payload malformado nunca é reportado como convertido e sempre cai no
unescape, de modo que `@hello` escrito como `@@hello` volta a `@hello`.

Config esperada (exemplo):
phases:
  read:
    enabled: true
diagnostics:
  max_value_chars: 64
"""

from __future__ import annotations

from typing import Optional

from base64_filter.core.config.errors import InvalidFilterOptionsError
from base64_filter.core.config.options import FilterOptions, resolve_filter_options
from base64_filter.core.errors import (
    base64_decoding,
    filter_configuration_error,
    filter_execution_error,
    memory_allocation,
)
from base64_filter.core.exceptions import AllocationFailureError, MalformedPayloadError
from base64_filter.core.pipeline.collection import Entry, EntryCollection
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
from .entry import decode_entry, unescape_entry


READ_PHASE_ID = "base64.read"


def _warn_malformed(
    ctx: FilterContext,
    options: FilterOptions,
    entry: Entry,
    exc: MalformedPayloadError,
) -> None:
    warning = base64_decoding(
        value=options.clip(entry.value),
        entry=entry.name,
        phase=READ_PHASE_ID,
        reason=exc.details.get("reason"),
    )
    ctx.add_warning(phase_id=READ_PHASE_ID, message=warning.message)
    ctx.log(
        phase_id=READ_PHASE_ID,
        level="warning",
        message=warning.message,
        entry=entry.name,
        error_type=warning.type,
        reason=warning.details.get("reason"),
    )


def _read_entry(
    ctx: FilterContext,
    options: FilterOptions,
    entry: Entry,
    metrics: dict,
) -> EntryOutcome:
    try:
        outcome = decode_entry(entry)
    except MalformedPayloadError as e:
        metrics["malformed"] += 1
        _warn_malformed(ctx, options, entry, e)
        outcome = EntryOutcome.UNCHANGED

    if outcome is EntryOutcome.CONVERTED:
        if options.log_entry_events:
            ctx.log(
                phase_id=READ_PHASE_ID,
                level="debug",
                message="decode binary value",
                entry=entry.name,
                decoded_bytes=len(entry.value),
            )
        return outcome

    return unescape_entry(entry)


def read_phase(collection: EntryCollection, ctx: FilterContext) -> PhaseResult:
    """Restaura valores binários persistidos como texto e desescapa `@@`."""
    metrics = new_metrics()
    mark = warning_mark(ctx, READ_PHASE_ID)

    try:
        options = resolve_filter_options(ctx.config)
    except InvalidFilterOptionsError as e:
        return mk_failure(
            ctx=ctx,
            phase_id=READ_PHASE_ID,
            kind=PhaseKind.READ,
            error=filter_configuration_error(details={"reason": str(e)}),
            metrics=metrics,
            warnings_from=mark,
        )

    if not options.is_enabled("read"):
        return mk_result(
            ctx=ctx,
            phase_id=READ_PHASE_ID,
            kind=PhaseKind.READ,
            status=PhaseStatus.SKIPPED,
            summary="phase disabled by config",
            metrics=metrics,
            warnings_from=mark,
            payload={"disabled": True},
        )

    ctx.log(phase_id=READ_PHASE_ID, level="info", message="read phase started")

    current: Optional[str] = None
    try:
        for entry in collection:
            if is_contract_entry(entry):
                continue
            current = entry.name
            tally(metrics, _read_entry(ctx, options, entry, metrics))

    except (AllocationFailureError, MemoryError):
        return mk_failure(
            ctx=ctx,
            phase_id=READ_PHASE_ID,
            kind=PhaseKind.READ,
            error=memory_allocation(operation="decode", entry=current, phase=READ_PHASE_ID),
            metrics=metrics,
            warnings_from=mark,
            aborted_at=current,
        )
    except Exception as e:
        return mk_failure(
            ctx=ctx,
            phase_id=READ_PHASE_ID,
            kind=PhaseKind.READ,
            error=filter_execution_error(
                phase=READ_PHASE_ID,
                entry=current,
                exc_type=e.__class__.__name__,
                exc_message=str(e) or None,
            ),
            metrics=metrics,
            warnings_from=mark,
            aborted_at=current,
        )

    ctx.log(phase_id=READ_PHASE_ID, level="info", message="read phase finished", **metrics)

    return mk_result(
        ctx=ctx,
        phase_id=READ_PHASE_ID,
        kind=PhaseKind.READ,
        status=PhaseStatus.SUCCESS,
        summary="encoded payloads restored, escaped markers removed",
        metrics=metrics,
        warnings_from=mark,
    )
