"""Tests for logging of table operations."""

import logging

from grapher.cli.app import setup_logging
from grapher.config import GrapherConfig
from grapher.core.models import ConstantFunction
from grapher.tables import TableStore


def test_store_operations_log_at_info(caplog):
    store = TableStore()
    with caplog.at_level(logging.INFO, logger="grapher"):
        store.add_function(ConstantFunction(value=6.0), 4, 17)
        store.remove_table(0)

    messages = [r.getMessage() for r in caplog.records]
    assert "Added table 0 (const:6.0, 14 rows)" in messages
    assert "Removed table 0 (const:6.0)" in messages


def test_sampling_and_ignored_removal_log_at_debug(caplog):
    store = TableStore()
    with caplog.at_level(logging.DEBUG, logger="grapher"):
        store.add_function(ConstantFunction(value=1.0), 0, 2)
        store.remove_table(5)
        store.render()

    messages = " ".join(r.getMessage() for r in caplog.records)
    assert "Sampled const:1.0" in messages
    assert "3 rows" in messages
    assert "remove_table(5) ignored" in messages
    assert "Rendered 1 table(s)" in messages


def test_invalid_env_value_logs_warning(caplog, monkeypatch):
    monkeypatch.setenv("GRAPHER_PAD_LENGTH", "abc")
    with caplog.at_level(logging.WARNING, logger="grapher"):
        GrapherConfig.load()

    assert any("GRAPHER_PAD_LENGTH" in r.getMessage() for r in caplog.records)
    assert all(r.levelno == logging.WARNING for r in caplog.records)


def test_setup_logging_levels():
    setup_logging()
    assert logging.getLogger("grapher").level == logging.WARNING
    setup_logging(verbose=True)
    assert logging.getLogger("grapher").level == logging.INFO
    setup_logging(verbose=True, debug=True)
    assert logging.getLogger("grapher").level == logging.DEBUG
    setup_logging()


def test_rendering_does_not_log_to_stdout(capsys):
    setup_logging(debug=True)
    try:
        store = TableStore()
        store.add_function(ConstantFunction(value=1.0), 0, 0)
        text = store.render()
    finally:
        setup_logging()

    assert capsys.readouterr().out == ""
    assert text == "0.0=========|=========1.0\n" + "-" * 25 + "\n"
