import logging

import pytest

from agent0_installer import logging_utils


@pytest.fixture
def clean_root():
    root = logging.getLogger()
    saved_handlers = list(root.handlers)
    saved_level = root.level
    yield root
    for h in list(root.handlers):
        if h not in saved_handlers:
            root.removeHandler(h)
            h.close()
    root.setLevel(saved_level)
    for attr in ("_agent0_configured", "_agent0_log_path"):
        if hasattr(root, attr):
            delattr(root, attr)


def test_console_only(clean_root):
    before = len(clean_root.handlers)

    assert logging_utils.configure_logging() is None
    assert len(clean_root.handlers) == before + 2


def test_writes_log_file(clean_root, tmp_path):
    log_path = tmp_path / "logs" / "install.log"

    actual = logging_utils.configure_logging(log_path=str(log_path))
    logging.getLogger("agent0_installer.test").info("hello file")
    for h in clean_root.handlers:
        h.flush()

    assert actual == str(log_path)
    assert "hello file" in log_path.read_text(encoding="utf-8")


def test_configure_is_idempotent(clean_root, tmp_path):
    first = logging_utils.configure_logging(log_path=str(tmp_path / "a.log"))
    count = len(clean_root.handlers)

    second = logging_utils.configure_logging(log_path=str(tmp_path / "b.log"))

    assert second == first
    assert len(clean_root.handlers) == count


def test_console_splits_streams(clean_root, capsys):
    logging_utils.configure_logging()
    log = logging.getLogger("agent0_installer.test")

    log.info("status line")
    log.error("it broke")

    captured = capsys.readouterr()
    assert "==> status line" in captured.out
    assert "it broke" not in captured.out
    assert "ERROR: it broke" in captured.err
