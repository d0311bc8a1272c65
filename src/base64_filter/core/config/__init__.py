# src/base64_filter/core/config/__init__.py

"""
Camada de configuração do Base64 Filter.

Este pacote contém as estruturas e utilitários responsáveis por carregar,
mesclar, validar estruturalmente e identificar a configuração usada pelas
fases de leitura e escrita do filtro.

Responsabilidades do pacote:
    - Carregamento de arquivos de configuração (defaults + overrides locais)
    - Resolução de configuração final via deep-merge determinístico
    - Validação das opções do filtro (`phases`, `diagnostics`)
    - Geração de hash canônico para rastreabilidade

Invariantes:
    - A configuração final é um dicionário puro (dict)
    - A mesma entrada sempre produz a mesma configuração final
    - O marcador `@` não é configurável

Limites explícitos:
    - Não executa fases
    - Não interage com a coleção de entradas
"""

from .errors import (  # noqa: F401
    ConfigError,
    ConfigTypeConflictError,
    DefaultsNotFoundError,
    InvalidConfigRootTypeError,
    InvalidFilterOptionsError,
    UnsupportedConfigFormatError,
)
from .hashing import compute_config_hash  # noqa: F401
from .loader import DEFAULT_CONFIG, load_config  # noqa: F401
from .merge import deep_merge  # noqa: F401
from .options import FilterOptions, resolve_filter_options  # noqa: F401
