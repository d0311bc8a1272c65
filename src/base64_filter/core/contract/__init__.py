"""Base64 Filter — Contract (core).

Descritor estático de capacidades do filtro:
 - schema e validação estrutural
 - descritor publicado uma única vez via caminho bem conhecido
"""

from .errors import ContractError, ContractValidationError  # noqa: F401
from .schema import PluginContractV1, validate_plugin_contract_v1  # noqa: F401
from .descriptor import (  # noqa: F401
    CONTRACT_PATH,
    contract_entries,
    plugin_contract,
    publish_contract,
)
