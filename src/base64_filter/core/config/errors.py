# src/base64_filter/core/config/errors.py
"""
Exceções canônicas da camada de configuração do Base64 Filter.

As exceções aqui definidas representam violações estruturais explícitas
da configuração, e não erros de transformação de entradas.

Invariantes:
    - Todas as exceções de configuração herdam de `ConfigError`
    - Nenhuma exceção representa erro do codec
"""


class ConfigError(Exception):
    """
    Exceção base para erros relacionados à configuração do filtro.

    Permite captura genérica de erros de configuração e distinção clara
    entre falhas estruturais e falhas de execução de fase.
    """


class DefaultsNotFoundError(ConfigError):
    """
    Exceção levantada quando um arquivo de defaults explicitamente
    informado não é encontrado.

    Limites explícitos:
        - Não tenta inferir ou criar defaults automaticamente
    """


class UnsupportedConfigFormatError(ConfigError):
    """
    Exceção levantada quando o formato do arquivo de configuração
    não é suportado pelo loader.

    Formatos suportados (v1):
        - YAML (.yaml, .yml)
        - JSON (.json)
    """


class InvalidConfigRootTypeError(ConfigError):
    """
    Exceção levantada quando o conteúdo raiz da configuração
    não é um dicionário (`dict`).
    """


class ConfigTypeConflictError(ConfigError):
    """
    Exceção levantada quando ocorre conflito de tipos durante o deep-merge.

    Exemplo de conflito:
        - base:     {"phases": {"read": {"enabled": true}}}
        - override: {"phases": "off"}

    Invariantes:
        - Nenhum merge parcial é produzido em caso de conflito
    """


class InvalidFilterOptionsError(ConfigError):
    """
    Exceção levantada quando as opções do filtro possuem tipo ou valor inválido.

    Exemplos:
        - `phases.read.enabled` não booleano
        - `diagnostics.max_value_chars` menor que 1
    """
