"""
Configurações do Formações Manager.

Valores lidos de variáveis de ambiente, com defaults
adequados para desenvolvimento local.

Variáveis:
- LOG_LEVEL: Nível de log raiz (default: INFO)
- EVENT_PUBLISHER_MODE: "logging" ou "memory" (default: logging)
"""

import logging.config
import os
from typing import Optional

# =============================================================================
# Eventos de Domínio
# =============================================================================

EVENT_PUBLISHER_MODE = os.getenv('EVENT_PUBLISHER_MODE', 'logging')

# =============================================================================
# Logging
# =============================================================================

LOG_LEVEL = os.getenv('LOG_LEVEL', 'INFO')

LOGGING = {
    'version': 1,
    'disable_existing_loggers': False,
    'formatters': {
        'verbose': {
            'format': '{levelname} {asctime} {module} {process:d} {thread:d} {message}',
            'style': '{',
        },
        'simple': {
            'format': '{levelname} {asctime} {module} {message}',
            'style': '{',
        },
    },
    'handlers': {
        'console': {
            'class': 'logging.StreamHandler',
            'formatter': 'simple',
        },
    },
    'root': {
        'handlers': ['console'],
        'level': LOG_LEVEL,
    },
    'loggers': {
        'src.adapters': {
            'level': LOG_LEVEL,
            'propagate': True,
        },
    },
}


def as_dict() -> dict:
    """Configurações no formato esperado pelo container de DI."""
    return {
        'event_publisher_mode': EVENT_PUBLISHER_MODE,
    }


def configure_logging(level: Optional[str] = None) -> None:
    """
    Aplica LOGGING via dictConfig.

    Args:
        level: Sobrescreve LOG_LEVEL (ex: "DEBUG")
    """
    config = LOGGING
    if level:
        config = {
            **LOGGING,
            'root': {**LOGGING['root'], 'level': level},
            'loggers': {
                name: {**logger_config, 'level': level}
                for name, logger_config in LOGGING['loggers'].items()
            },
        }
    logging.config.dictConfig(config)
