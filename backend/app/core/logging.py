"""
Sistema de logging estruturado em JSON
"""
import logging
import sys
from datetime import datetime, timezone
from typing import Any, Dict
from pythonjsonlogger import jsonlogger

QUIET_LOGGERS = ("sqlalchemy.engine", "sqlalchemy.pool", "uvicorn.access")


class CustomJsonFormatter(jsonlogger.JsonFormatter):
    """Formatter customizado para logs em JSON"""

    def add_fields(self, log_record: Dict[str, Any], record: logging.LogRecord, message_dict: Dict[str, Any]):
        super(CustomJsonFormatter, self).add_fields(log_record, record, message_dict)

        # Timestamp ISO 8601 em UTC
        log_record['timestamp'] = datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z')

        log_record['level'] = record.levelname
        log_record['logger'] = record.name

        log_record['process'] = {
            'id': record.process,
            'name': record.processName
        }

        log_record['thread'] = {
            'id': record.thread,
            'name': record.threadName
        }

        # Localização do código
        log_record['location'] = {
            'file': record.pathname,
            'line': record.lineno,
            'function': record.funcName
        }


def setup_logging(level: str = "INFO", json_logs: bool = True) -> None:
    """
    Configura o sistema de logging

    Args:
        level: Nível de log (DEBUG, INFO, WARNING, ERROR, CRITICAL)
        json_logs: Se True, usa formato JSON. Se False, usa formato texto.
    """
    log_level = getattr(logging, level.upper(), logging.INFO)

    # Remover handlers existentes
    root_logger = logging.getLogger()
    for handler in root_logger.handlers[:]:
        root_logger.removeHandler(handler)

    handler = logging.StreamHandler(sys.stdout)

    if json_logs:
        formatter = CustomJsonFormatter(
            '%(timestamp)s %(level)s %(name)s %(message)s'
        )
    else:
        formatter = logging.Formatter(
            '%(asctime)s - %(name)s - %(levelname)s - %(message)s'
        )

    handler.setFormatter(formatter)
    root_logger.addHandler(handler)
    root_logger.setLevel(log_level)

    # SQL e acesso do uvicorn duplicam o que log_request e log_database_error já registram
    for name in QUIET_LOGGERS:
        logging.getLogger(name).setLevel(logging.WARNING)


def log_request(
    logger: logging.Logger,
    method: str,
    path: str,
    status_code: int,
    duration_ms: float,
    ip_address: str = None
):
    """
    Loga uma requisição HTTP

    Args:
        logger: Logger a ser usado
        method: Método HTTP (GET, POST, etc)
        path: Caminho da requisição
        status_code: Código de status HTTP
        duration_ms: Duração em milissegundos
        ip_address: IP do cliente (opcional)
    """
    logger.info(
        "HTTP Request",
        extra={
            'http': {
                'method': method,
                'path': path,
                'status_code': status_code,
                'duration_ms': duration_ms
            },
            'ip_address': ip_address
        }
    )


def log_database_error(
    logger: logging.Logger,
    operation: str,
    error: Exception,
    params: Dict[str, Any] = None
):
    """
    Loga uma falha de banco de dados com traceback

    O detalhe do driver fica apenas no log, nunca na resposta HTTP.

    Args:
        logger: Logger a ser usado
        operation: Operação que falhou (add_custom, list_fixed, etc)
        error: Exceção original
        params: Parâmetros da operação (opcional)
    """
    logger.error(
        f"Database error during {operation}",
        exc_info=error,
        extra={
            'database': {
                'operation': operation,
                'params': params,
                'error': type(error).__name__
            }
        }
    )
