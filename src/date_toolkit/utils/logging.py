"""Configuração centralizada de logging da biblioteca."""

import logging
import logging.config
import sys
from pathlib import Path
from typing import Any

LOGGER_NAME = "date_toolkit"

DEFAULT_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

# httpx registra cada requisição em INFO; ruído para quem só consulta feriados
NOISY_LIBRARIES = ("httpx", "httpcore")


def _normalize_level(level: str | int) -> str:
    """Converte nível numérico ou em minúsculas para o nome aceito pelo logging."""
    if isinstance(level, int):
        return logging.getLevelName(level)

    name = level.strip().upper()
    if name not in logging.getLevelNamesMapping():
        raise ValueError(f"Nível de log inválido: {level!r}")
    return name


def _file_handler(log_file: str | Path, level: str) -> dict[str, Any]:
    log_path = Path(log_file)
    log_path.parent.mkdir(parents=True, exist_ok=True)
    return {
        "class": "logging.handlers.RotatingFileHandler",
        "level": level,
        "formatter": "standard",
        "filename": str(log_path),
        "maxBytes": 1_048_576,
        "backupCount": 3,
        "encoding": "utf-8",
    }


def build_config(
    level: str | int = "INFO",
    log_file: str | Path | None = None,
    format: str | None = None,
) -> dict[str, Any]:
    """
    Monta o dicionário para logging.config.dictConfig.

    Apenas o logger `date_toolkit` recebe handlers e não propaga; o root
    fica em WARNING e as bibliotecas HTTP são silenciadas abaixo disso.
    """
    level = _normalize_level(level)
    handlers = {
        "console": {
            "class": "logging.StreamHandler",
            "level": level,
            "formatter": "standard",
            "stream": sys.stdout,
        },
    }
    if log_file:
        handlers["file"] = _file_handler(log_file, level)

    loggers = {
        LOGGER_NAME: {"handlers": list(handlers), "level": level, "propagate": False},
    }
    for name in NOISY_LIBRARIES:
        loggers[name] = {"level": "WARNING"}

    return {
        "version": 1,
        "disable_existing_loggers": False,
        "formatters": {
            "standard": {"format": format or DEFAULT_FORMAT, "datefmt": "%Y-%m-%d %H:%M:%S"},
        },
        "handlers": handlers,
        "loggers": loggers,
        "root": {"handlers": ["console"], "level": "WARNING"},
    }


def setup_logging(
    level: str | int = "INFO",
    log_file: str | Path | None = None,
    format: str | None = None,
) -> None:
    """
    Configura o logging da biblioteca.

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL) ou valor numérico
        log_file: Arquivo para salvar logs (None para apenas console)
        format: Formato personalizado dos logs
    """
    config = build_config(level, log_file, format)
    logging.config.dictConfig(config)

    logging.getLogger(LOGGER_NAME).debug(
        f"Logging configurado (level: {config['loggers'][LOGGER_NAME]['level']})"
    )


def get_logger(name: str) -> logging.Logger:
    """Retorna logger com nome qualificado (geralmente __name__)."""
    return logging.getLogger(name)
