"""
Testes para o logging estruturado
"""
import json
import logging

from app.core.logging import QUIET_LOGGERS, CustomJsonFormatter, log_database_error, setup_logging


def make_record(msg="hello", level=logging.INFO, **extra):
    record = logging.LogRecord("app.test", level, __file__, 10, msg, None, None, func="fn")
    for key, value in extra.items():
        setattr(record, key, value)
    return record


def test_json_formatter_fields():
    formatter = CustomJsonFormatter('%(timestamp)s %(level)s %(name)s %(message)s')

    data = json.loads(formatter.format(make_record(http={"method": "GET"})))

    assert data["message"] == "hello"
    assert data["level"] == "INFO"
    assert data["logger"] == "app.test"
    assert data["timestamp"].endswith("Z")
    assert data["location"]["line"] == 10
    assert data["http"] == {"method": "GET"}


def test_setup_logging_replaces_handlers():
    setup_logging(level="DEBUG", json_logs=True)
    root = logging.getLogger()

    assert len(root.handlers) == 1
    assert isinstance(root.handlers[0].formatter, CustomJsonFormatter)
    assert root.level == logging.DEBUG

    setup_logging(level="WARNING", json_logs=False)
    assert not isinstance(root.handlers[0].formatter, CustomJsonFormatter)
    assert root.level == logging.WARNING


def test_log_database_error_keeps_detail_in_log():
    records = []

    class ListHandler(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = logging.getLogger("app.test.db")
    logger.addHandler(ListHandler())
    try:
        log_database_error(logger, "add_custom", RuntimeError("boom"), {"name": "tmp"})
    finally:
        logger.handlers.clear()

    assert len(records) == 1
    assert records[0].levelno == logging.ERROR
    assert records[0].database["operation"] == "add_custom"
    assert records[0].database["error"] == "RuntimeError"
    assert records[0].exc_info[1].args == ("boom",)


def test_setup_logging_quiets_noisy_loggers():
    setup_logging(level="DEBUG", json_logs=False)

    for name in QUIET_LOGGERS:
        assert logging.getLogger(name).level == logging.WARNING
