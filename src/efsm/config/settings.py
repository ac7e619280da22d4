"""Configurações da FSM via variáveis de ambiente (prefixo EFSM_)."""

from __future__ import annotations

from functools import lru_cache

from pydantic_settings import BaseSettings, SettingsConfigDict

from efsm.domain.table import FSM_DEFAULT_NAME, FSM_NAME_LEN

VALID_LOG_LEVELS = frozenset({"DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"})
VALID_LOG_FORMATS = frozenset({"json", "text"})


class Settings(BaseSettings):
    """Configurações lidas do ambiente."""

    model_config = SettingsConfigDict(
        env_prefix="EFSM_",
        case_sensitive=False,
    )

    # Aplicação
    service_name: str = "efsm"
    version: str = "0.1.0"
    environment: str = "development"

    # Observabilidade
    log_level: str = "INFO"
    log_format: str = "json"  # json | text

    # FSM
    default_machine_name: str = FSM_DEFAULT_NAME  # Usado quando create() recebe name=None

    # Sessão de exemplo: timeouts de INIT tolerados antes de voltar a IDLE
    session_timeout_threshold: int = 3

    def validate_logging_config(self) -> list[str]:
        """Valida nível e formato de log.

        Retorna lista de erros (vazia = OK).
        """
        errors: list[str] = []
        if self.log_level.upper() not in VALID_LOG_LEVELS:
            errors.append(
                f"EFSM_LOG_LEVEL '{self.log_level}' inválido. Valores válidos: "
                f"{sorted(VALID_LOG_LEVELS)}"
            )
        if self.log_format.lower() not in VALID_LOG_FORMATS:
            errors.append("EFSM_LOG_FORMAT inválido: use json | text")
        return errors

    def validate_fsm_config(self) -> list[str]:
        """Valida parâmetros da FSM e da sessão de exemplo."""
        errors: list[str] = []
        if not self.default_machine_name.strip():
            errors.append("EFSM_DEFAULT_MACHINE_NAME não pode ser vazio")
        elif len(self.default_machine_name) > FSM_NAME_LEN:
            errors.append(f"EFSM_DEFAULT_MACHINE_NAME excede {FSM_NAME_LEN} caracteres")
        if self.session_timeout_threshold < 1:
            errors.append("EFSM_SESSION_TIMEOUT_THRESHOLD deve ser >= 1")
        return errors

    @property
    def is_production(self) -> bool:
        """Retorna True se ambiente é produção."""
        return self.environment.lower() in ("production", "prod")

    @property
    def is_development(self) -> bool:
        """Retorna True se ambiente é desenvolvimento."""
        return self.environment.lower() in ("development", "dev", "local")


@lru_cache(maxsize=1)
def get_settings() -> Settings:
    """Retorna instância única de Settings (cacheada)."""

    return Settings()
