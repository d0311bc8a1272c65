"""
Descritor publicado do filtro base64.

O descritor é estático e publicado uma única vez sob `CONTRACT_PATH`,
separado das fases: nenhuma travessia de entradas o lê ou o escreve.
"""

from __future__ import annotations

from typing import Dict

from base64_filter.codec.escaping import MARKER
from base64_filter.core.pipeline.collection import KeySet

from .schema import PluginContractV1, validate_plugin_contract_v1


CONTRACT_PATH = "system/elektra/modules/base64"

_CONTRACT = {
    "contract_version": "1.0",
    "name": "base64",
    "description": (
        "Encodes binary values as '@'-prefixed base64 text on write and "
        "restores them on read; text starting with '@' is escaped as '@@'."
    ),
    "provides": ["binary"],
    "placements": {"get": "postgetstorage", "set": "presetstorage"},
    "status": ["maintained", "unittest", "nodep"],
    "exports": ["read", "write"],
    "marker": MARKER,
}


def plugin_contract() -> PluginContractV1:
    return validate_plugin_contract_v1(_CONTRACT)


def contract_entries() -> Dict[str, str]:
    """Achata o descritor em `{caminho: texto}` sob `CONTRACT_PATH`."""
    data = plugin_contract().to_dict()
    base = CONTRACT_PATH
    entries: Dict[str, str] = {
        base: "",
        f"{base}/infos/version": data["contract_version"],
        f"{base}/infos/name": data["name"],
        f"{base}/infos/description": data["description"],
        f"{base}/infos/provides": " ".join(data["provides"]),
        f"{base}/infos/placements": " ".join(
            data["placements"][d] for d in ("get", "set")
        ),
        f"{base}/infos/status": " ".join(data["status"]),
        f"{base}/config/marker": data["marker"],
    }
    for name in data["exports"]:
        entries[f"{base}/exports/{name}"] = f"base64_filter.phases.{name}_phase"
    return entries


def publish_contract(keyset: KeySet) -> None:
    """Insere (ou atualiza) as entradas do descritor em `keyset`."""
    if not isinstance(keyset, KeySet):
        raise TypeError("publish_contract requires a KeySet")
    for path, value in contract_entries().items():
        keyset.set(path, value)
