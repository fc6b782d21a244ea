import logging
from unittest.mock import MagicMock

from finitetop.logger import Logger, format_assignment, format_candidate, topo_logger


def test_disabled_logger_records_nothing():
    topo_logger.info("hidden")
    assert "hidden" not in topo_logger.get_html_content()


def test_enabled_logger_collects_html(tmp_path):
    log = Logger("finitetop.test.html")
    log.section("Search")
    log.info("a < b")
    log.result("topologies", 29)
    log.table([[2, 1], [3, 6]], headers=["open sets", "topologies"], title="Counts")
    html = log.get_html_content()
    assert "<h3>Search</h3>" in html
    assert "a &lt; b" in html
    assert "<strong>topologies:</strong> 29" in html
    assert "<th>open sets</th>" in html

    path = log.write_debug_output(tmp_path / "log.html")
    assert path.read_text(encoding="utf-8").startswith("<!DOCTYPE html>")


def test_html_buffer_is_capped():
    log = Logger("finitetop.test.cap")
    log.echo = False
    log.max_html_entries = 5
    for i in range(10):
        log.debug(f"step {i}")
    html = log.get_html_content()
    # the buffer starts with the content wrapper, leaving room for four entries
    assert html.count('<p class="debug">') == 4
    assert log.dropped_entries == 6
    assert "6 further log entries omitted (limit 5)" in html

    log.clear()
    assert log.dropped_entries == 0


def test_html_logging_keeps_console_quiet():
    log = Logger("finitetop.test.quiet")
    log.disabled = True
    log.setup_html_logging()
    log.logger.log = MagicMock()
    log.info("recorded only")
    log.table([[1, 2]], headers=["x", "y"])
    assert not log.disabled
    log.logger.log.assert_not_called()
    assert "recorded only" in log.get_html_content()


def test_log_execution_reraises():
    log = Logger("finitetop.test.decorator")

    @log.log_execution
    def broken():
        raise RuntimeError("boom")

    try:
        broken()
    except RuntimeError:
        pass
    assert "Error in broken: boom" in log.get_html_content()


def test_setup_console_logging_enables():
    log = Logger("finitetop.test.console")
    log.disabled = True
    log.echo = False
    log.setup_console_logging(logging.DEBUG)
    assert not log.disabled
    assert log.echo
    assert log.logger.level == logging.DEBUG


def test_formatting_helpers():
    assert format_candidate([0, 7]) == "[0, 7]"
    assert format_assignment([1, 0, 2, 1]) == "10?1"
