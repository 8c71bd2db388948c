import logging
import re

from hostprep.main import main
from hostprep.utils import Logger


def _file_handlers(logger: Logger):
    return [h for h in logger.logger.handlers if isinstance(h, logging.FileHandler)]


def test_default_format_is_prefixed_message_only(capsys):
    logger = Logger()
    logger.debug("hidden")
    logger.info("Updating package index...")

    assert capsys.readouterr().out == "[setup] Updating package index...\n"


def test_verbose_adds_timestamp_level_and_debug_output(fake_host, capsys):
    fake_host.available = {"apt-get", "cc"}

    assert main(["install", "--verbose"]) == 0

    out = capsys.readouterr().out
    assert re.search(r"^\d\d:\d\d:\d\d \[setup\] \[INFO\] Detected apt-based distribution\.$", out, re.M)
    assert re.search(r"^\d\d:\d\d:\d\d \[setup\] \[DEBUG\] Running: sudo apt-get update$", out, re.M)
    assert "[SUCCESS] System dependencies installed successfully." in out


def test_log_file_receives_progress(fake_host, tmp_path):
    fake_host.available = {"apt-get", "cc"}
    log_file = tmp_path / "hostprep.log"

    assert main(["install", "--log-file", str(log_file)]) == 0

    text = log_file.read_text()
    assert "[INFO] Detected apt-based distribution." in text
    assert "[SUCCESS] System dependencies installed successfully." in text


def test_reinitializing_closes_previous_log_file(tmp_path):
    first = Logger(log_file=str(tmp_path / "first.log"))
    first.info("opened")
    handler = _file_handlers(first)[0]

    second = Logger()

    assert handler.stream is None
    assert _file_handlers(second) == []
