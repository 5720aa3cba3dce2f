import json
import logging

import pytest

from morris.core.rules import RulesEngine
from morris.infra.app_data import resolve_logs_dir
from morris.infra.logging import JsonFormatter, setup_logging


@pytest.fixture
def restore_root_logging():
    root = logging.getLogger()
    handlers = list(root.handlers)
    level = root.level
    yield root
    for handler in root.handlers:
        if handler not in handlers:
            handler.close()
    root.handlers[:] = handlers
    root.setLevel(level)


def test_json_formatter_includes_fields_and_message() -> None:
    logger = logging.getLogger("test.json.formatter")
    record = logger.makeRecord(
        name=logger.name,
        level=logging.INFO,
        fn=__file__,
        lno=1,
        msg="hello %s",
        args=("world",),
        exc_info=None,
        extra={"custom": 1},
    )
    payload = json.loads(JsonFormatter().format(record))
    assert payload["msg"] == "hello world"
    assert payload["fields"]["custom"] == 1
    assert payload["level"] == "INFO"


def test_setup_logging_text_and_json(monkeypatch, restore_root_logging) -> None:
    monkeypatch.delenv("MORRIS_LOG_LEVEL", raising=False)
    monkeypatch.delenv("MORRIS_LOG_TO_FILE", raising=False)
    monkeypatch.setenv("LOG_LEVEL", "DEBUG")
    monkeypatch.setenv("LOG_FORMAT", "text")
    assert setup_logging() is None
    root = restore_root_logging
    assert root.level == logging.DEBUG
    assert len(root.handlers) == 1
    assert not isinstance(root.handlers[0].formatter, JsonFormatter)

    monkeypatch.setenv("LOG_FORMAT", "json")
    monkeypatch.setenv("MORRIS_LOG_LEVEL", "warning")
    setup_logging()
    assert root.level == logging.WARNING
    assert isinstance(root.handlers[0].formatter, JsonFormatter)


def test_setup_logging_writes_run_log_under_app_data(
    monkeypatch, tmp_path, restore_root_logging
) -> None:
    monkeypatch.setenv("MORRIS_APP_DATA_DIR", str(tmp_path / "appdata"))
    monkeypatch.delenv("MORRIS_LOG_DIR", raising=False)
    monkeypatch.setenv("MORRIS_LOG_TO_FILE", "1")
    monkeypatch.setenv("MORRIS_LOG_LEVEL", "INFO")
    assert resolve_logs_dir() == tmp_path / "appdata" / "logs"

    log_file = setup_logging()
    assert log_file is not None
    engine = RulesEngine()
    for point in (0, 3, 1, 5, 2):
        engine.place_piece(point)
    for handler in restore_root_logging.handlers:
        handler.flush()

    files = list((tmp_path / "appdata" / "logs").glob("morris_run_*.jsonl"))
    assert files == [log_file]
    entries = [json.loads(line) for line in log_file.read_text(encoding="utf-8").splitlines()]
    assert any(entry["msg"].startswith("mill_formed") for entry in entries)


def test_log_dir_override_relative_to_app_data(monkeypatch, tmp_path) -> None:
    monkeypatch.setenv("MORRIS_APP_DATA_DIR", str(tmp_path))
    monkeypatch.setenv("MORRIS_LOG_DIR", "custom")
    assert resolve_logs_dir() == tmp_path / "custom"
