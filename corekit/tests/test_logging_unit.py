"""Unit coverage for the leveled logger: filtering, parsing, formatting, relays."""

from __future__ import annotations

import re

import pytest

from corekit import logging as log
from corekit.log_support import LogConfig, LogLevel, LogLevelError, log_level_from_string
from corekit.log_support.levels import RESET
from corekit.log_support.line_formatter import format_message

LINE_RE = re.compile(r"^\d{4}-\d{2}-\d{2}T\d{2}:\d{2}:\d{2}\.\d{3}Z \[(?P<level>[A-Z ]{5})\] (?P<rest>.*)$")


def test_default_level_is_info(captured_lines):
    logger = log.Log()
    logger.debug("hidden")
    logger.info("shown")

    assert log.get_level() is LogLevel.INFO  # nosec B101 - asserts are fine in tests
    assert len(captured_lines) == 1  # nosec B101 - asserts are fine in tests


def test_warn_minimum_filters_lower_levels(captured_lines):
    log.set_level("warn")
    logger = log.Log()

    logger.trace("t")
    logger.debug("d")
    logger.info("i")
    assert captured_lines == []  # nosec B101 - asserts are fine in tests

    logger.warn("w")
    logger.error("e")
    logger.fatal("f")
    labels = [LINE_RE.match(line).group("level") for line in captured_lines]
    assert labels == ["WARN ", "ERROR", "FATAL"]  # nosec B101 - asserts are fine in tests


def test_level_is_shared_between_instances(captured_lines):
    first = log.Log("first")
    second = log.Log("second")

    first.set_level(LogLevel.ERROR)
    second.warn("suppressed")
    log.warn("suppressed too")

    assert second.get_level() is LogLevel.ERROR  # nosec B101 - asserts are fine in tests
    assert captured_lines == []  # nosec B101 - asserts are fine in tests


@pytest.mark.parametrize("raw", ["warn", "WARN", "  Warn "])
def test_level_strings_parse_case_insensitively(raw):
    assert log_level_from_string(raw) is LogLevel.WARN  # nosec B101 - asserts are fine in tests


def test_unknown_level_string_raises_and_keeps_level():
    with pytest.raises(LogLevelError, match="bogus"):
        log_level_from_string("bogus")
    with pytest.raises(ValueError):
        log.set_level("bogus")
    assert log.get_level() is LogLevel.INFO  # nosec B101 - asserts are fine in tests


def test_numeric_levels_are_accepted():
    assert log.set_level(10) is LogLevel.DEBUG  # nosec B101 - asserts are fine in tests
    with pytest.raises(LogLevelError):
        log.set_level(12)


def test_line_layout_with_context_and_arguments(captured_lines):
    log.Log("db").info("took %d ms", 42)

    match = LINE_RE.match(captured_lines[0])
    assert match is not None  # nosec B101 - asserts are fine in tests
    assert match.group("level") == "INFO "  # nosec B101 - asserts are fine in tests
    assert match.group("rest") == "<db> took 42 ms"  # nosec B101 - asserts are fine in tests


def test_line_without_context_has_no_tag(captured_lines):
    log.Log().info("plain")
    assert LINE_RE.match(captured_lines[0]).group("rest") == "plain"  # nosec B101 - asserts are fine in tests


def test_format_message_appends_unmatched_arguments():
    assert format_message("values", (1, 2)) == "values 1 2"  # nosec B101 - asserts are fine in tests
    assert format_message("%s=%s", ("a", 1)) == "a=1"  # nosec B101 - asserts are fine in tests
    assert format_message("100%", ()) == "100%"  # nosec B101 - asserts are fine in tests


def test_format_message_fills_placeholders_left_to_right():
    assert format_message("%s %s", ("a",)) == "a %s"  # nosec B101 - missing argument keeps placeholder
    assert format_message("%s and %d%%", ("x", 5)) == "x and 5%"  # nosec B101 - asserts are fine in tests
    assert format_message("%d items", ("many",)) == "many items"  # nosec B101 - mismatched conversion
    assert format_message("pair %s", ((1, 2), "extra")) == "pair (1, 2) extra"  # nosec B101 - asserts are fine in tests
    assert format_message("%.1f ms", (12.5,)) == "12.5 ms"  # nosec B101 - asserts are fine in tests


def test_instance_callback_receives_only_own_lines(captured_lines):
    own = []
    a = log.Log("a")
    b = log.Log("b")
    a.set_log_callback(own.append)

    a.info("from a")
    b.info("from b")

    assert len(own) == 1 and own[0].endswith("<a> from a")  # nosec B101 - asserts are fine in tests
    assert len(captured_lines) == 2  # nosec B101 - global relay sees every instance


def test_defaults_seed_new_instances_only():
    log.set_defaults(context="svc", color=True)
    seeded = log.Log()
    explicit = log.Log("api", color=False)

    log.set_defaults(context="other")

    assert seeded.get_context() == "svc" and seeded.config.color is True  # nosec B101 - asserts are fine in tests
    assert explicit.get_context() == "api" and explicit.config.color is False  # nosec B101 - asserts are fine in tests
    assert log.Log().get_context() == "other"  # nosec B101 - asserts are fine in tests


def test_constructor_accepts_config_object():
    logger = log.Log(LogConfig(context="cfg", color=True))
    assert logger.get_context() == "cfg" and logger.config.color is True  # nosec B101 - asserts are fine in tests


def test_set_config_replaces_context_and_keeps_color_when_omitted():
    logger = log.Log("a", color=True)

    logger.set_config(color=False)
    assert logger.get_context() is None and logger.config.color is False  # nosec B101 - asserts are fine in tests

    logger.set_config(context="b")
    assert logger.get_context() == "b" and logger.config.color is False  # nosec B101 - asserts are fine in tests


def test_set_config_rejects_unknown_fields():
    with pytest.raises(ValueError):
        log.Log().set_config(colour=True)


def test_global_log_functions_and_config(captured_lines):
    log.set_global_config(context="main")
    log.info("hello %s", "world")
    log.log("explicit", LogLevel.ERROR)

    assert captured_lines[0].endswith("<main> hello world")  # nosec B101 - asserts are fine in tests
    assert "[ERROR] <main> explicit" in captured_lines[1]  # nosec B101 - asserts are fine in tests


def test_console_output_is_colored_but_callbacks_are_not(capsys, captured_lines):
    log.Log("c", color=True).warn("careful")

    err = capsys.readouterr().err
    assert err.startswith("\x1b[33m")  # nosec B101 - yellow for WARN
    assert RESET in err and "<c> careful" in err  # nosec B101 - asserts are fine in tests
    assert "\x1b" not in captured_lines[0]  # nosec B101 - asserts are fine in tests


def test_console_output_plain_without_color(capsys):
    log.Log("c").error("boom")
    err = capsys.readouterr().err
    assert "\x1b" not in err and err.rstrip("\n").endswith("[ERROR] <c> boom")  # nosec B101 - asserts are fine in tests


def test_env_seeds_level_color_and_context(monkeypatch):
    monkeypatch.setenv("COREKIT_LOG_LEVEL", " debug ")
    monkeypatch.setenv("COREKIT_LOG_COLOR", "yes")
    monkeypatch.setenv("COREKIT_LOG_CONTEXT", "worker")
    log.reset_log_settings()

    logger = log.Log()
    assert log.get_level() is LogLevel.DEBUG  # nosec B101 - asserts are fine in tests
    assert logger.get_context() == "worker" and logger.config.color is True  # nosec B101 - asserts are fine in tests


def test_invalid_env_level_is_a_configuration_error(monkeypatch):
    monkeypatch.setenv("COREKIT_LOG_LEVEL", "loud")
    log.reset_log_settings()
    with pytest.raises(LogLevelError):
        log.get_log_settings()


def test_log_file_receives_plain_lines(tmp_path):
    path = tmp_path / "logs" / "app.log"
    handler = log.configure_log_file(str(path))
    log.Log("f", color=True).info("to file")
    handler.flush()

    text = path.read_text(encoding="utf-8")
    assert "<f> to file" in text and "\x1b" not in text  # nosec B101 - asserts are fine in tests

    assert log.configure_log_file(str(path)) is handler  # nosec B101 - idempotent for same path
    assert log.configure_log_file(None) is None  # nosec B101 - asserts are fine in tests


def test_get_logger_nests_under_corekit(capsys):
    log.set_level("debug")
    internal = log.get_logger("jobs")
    internal.debug("queued %d", 3)

    assert internal.name == "corekit.jobs"  # nosec B101 - asserts are fine in tests
    assert "[DEBUG] <corekit.jobs> queued 3" in capsys.readouterr().err  # nosec B101 - asserts are fine in tests
