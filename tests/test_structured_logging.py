"""Tests for structured logging and home-directory redaction."""

from __future__ import annotations

import io
import json

from navpath.logging import DataRedactor, LogLevel, StructuredLogger, create_logger


class TestDataRedactor:
    """Test home-directory and sensitive field redaction."""

    def test_generic_home_dirs(self):
        redactor = DataRedactor()
        assert redactor.redact_string("/home/alice/src/x.c") == "[REDACTED]/src/x.c"
        assert redactor.redact_string("/Users/bob/Desktop") == "[REDACTED]/Desktop"
        assert redactor.redact_string("C:\\Users\\jane\\a.txt") == "[REDACTED]\\a.txt"

    def test_configured_home_dir(self):
        redactor = DataRedactor(home_dirs=["/srv/me/"])
        assert redactor.redact_string("/srv/me") == "[REDACTED]"
        assert redactor.redact_string("/srv/me/notes") == "[REDACTED]/notes"
        assert redactor.redact_string("/srv/meow") == "/srv/meow"

    def test_root_home_is_ignored(self):
        redactor = DataRedactor(home_dirs=["/"])
        assert redactor.redact_string("/etc/passwd") == "/etc/passwd"

    def test_nested_and_sensitive(self):
        redactor = DataRedactor()
        result = redactor.redact_dict(
            {
                "token": "abc123",
                "input": ["/home/alice/a", "/tmp"],
                "nested": {"password": "x", "output": "/home/alice"},
                "count": 3,
            }
        )
        assert result["token"] == "[REDACTED]"
        assert result["input"] == ["[REDACTED]/a", "/tmp"]
        assert result["nested"] == {"password": "[REDACTED]", "output": "[REDACTED]"}
        assert result["count"] == 3


class TestStructuredLogger:
    """Test structured logging functionality."""

    def test_basic_logging(self, tmp_path):
        log_file = tmp_path / "logs" / "test.jsonl"
        logger = StructuredLogger(component="test", session_id="s1", output_file=log_file)
        logger.info("Path transform", op="canonicalize", output="/home/alice/x")
        logger.close()

        entry = json.loads(log_file.read_text().splitlines()[0])
        assert entry["level"] == "info"
        assert entry["component"] == "test"
        assert entry["session_id"] == "s1"
        assert entry["message"] == "Path transform"
        assert entry["op"] == "canonicalize"
        assert entry["output"] == "[REDACTED]/x"
        assert "timestamp" in entry
        assert entry["iso_timestamp"].endswith("Z")

    def test_levels(self):
        stream = io.StringIO()
        logger = StructuredLogger(component="test", output_file=stream)
        logger.debug("d")
        logger.warning("w")
        logger.error("e")
        logger.log(LogLevel.INFO, "i")
        levels = [json.loads(line)["level"] for line in stream.getvalue().splitlines()]
        assert levels == ["debug", "warning", "error", "info"]

    def test_close_leaves_borrowed_stream_open(self):
        stream = io.StringIO()
        logger = StructuredLogger(component="test", output_file=stream)
        logger.close()
        assert not stream.closed

    def test_console_goes_to_stderr(self, capsys):
        logger = StructuredLogger(component="test", enable_console=True)
        logger.info("hello")
        captured = capsys.readouterr()
        assert captured.out == ""
        assert json.loads(captured.err)["message"] == "hello"

    def test_session_id_generated(self):
        logger = StructuredLogger(component="test")
        assert len(logger.session_id) == 8


def test_create_logger_uses_log_dir(tmp_path):
    logger = create_logger("cli", session_id="abc", log_dir=tmp_path)
    logger.info("x")
    logger.close()
    assert (tmp_path / "cli_abc.jsonl").exists()


def test_create_logger_env_log_dir(tmp_path, monkeypatch):
    monkeypatch.setenv("NAVPATH_LOG_DIR", str(tmp_path))
    logger = create_logger("cli")
    logger.info("x")
    logger.close()
    assert (tmp_path / "cli_default.jsonl").exists()


def test_create_logger_without_dir(monkeypatch):
    monkeypatch.delenv("NAVPATH_LOG_DIR", raising=False)
    logger = create_logger("cli")
    assert logger.log_file is None
