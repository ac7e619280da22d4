"""Configurações centralizadas do efsm.

Este módulo exporta:
- Settings: classe de configuração via variáveis de ambiente (prefixo EFSM_)
- get_settings: função cacheada para obter instância única

A definição declarativa de máquinas fica em `efsm.config.definition`.
"""

from efsm.config.settings import Settings, get_settings

__all__ = [
    "Settings",
    "get_settings",
]
