"""Erros canônicos do domínio de Contract (Base64 Filter)."""


class ContractError(Exception):
    """Erro base do domínio de contrato."""


class ContractValidationError(ContractError):
    """Descritor não é estruturalmente válido segundo o schema canônico."""
