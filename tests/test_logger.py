# File: tests/test_logger.py
import logging

from robots_scout.logger import configure, logger


def test_configure_replaces_handlers(tmp_path):
    log_file = tmp_path / "out.log"
    lg = configure(level="DEBUG", log_file=log_file)
    assert lg is logger
    assert len(lg.handlers) == 2
    assert lg.propagate is False

    lg.debug("hello %s", "file")
    assert "hello file" in log_file.read_text(encoding="utf-8")

    lg = configure()
    assert len(lg.handlers) == 1
    assert lg.level == logging.WARNING


def test_configure_append(tmp_path):
    configure()
    lg = configure(log_file=tmp_path / "extra.log", replace_handlers=False)
    assert len(lg.handlers) == 3
