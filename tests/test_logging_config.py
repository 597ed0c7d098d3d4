"""Tests for logging_config.py."""

import logging

from schematic_graph.logging_config import get_logger, setup_logging


class TestGetLogger:
    def test_root_logger(self):
        assert get_logger().name == "schematic_graph"

    def test_namespaced(self):
        assert get_logger("graph.builder").name == "schematic_graph.graph.builder"

    def test_already_namespaced(self):
        assert get_logger("schematic_graph.api").name == "schematic_graph.api"

    def test_children_propagate_to_package_logger(self):
        child = get_logger("file_ops")
        assert child.parent is logging.getLogger("schematic_graph")


def _file_handlers():
    return [h for h in get_logger().handlers if isinstance(h, logging.FileHandler)]


class TestSetupLogging:
    def test_levels(self):
        assert setup_logging(verbose=True).level == logging.DEBUG
        assert setup_logging(quiet=True).level == logging.ERROR
        assert setup_logging().level == logging.WARNING

    def test_log_file_receives_records(self, tmp_path):
        log_path = tmp_path / "run.log"
        setup_logging(log_file=str(log_path))
        get_logger("graph.builder").warning("row scan finished")
        for handler in _file_handlers():
            handler.flush()
        text = log_path.read_text(encoding="utf-8")
        assert "schematic_graph.graph.builder - WARNING - row scan finished" in text

    def test_repeated_setup_keeps_one_file_handler(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"))
        setup_logging(log_file=str(tmp_path / "b.log"))
        handlers = _file_handlers()
        assert len(handlers) == 1
        assert handlers[0].baseFilename == str(tmp_path / "b.log")

    def test_setup_without_log_file_detaches(self, tmp_path):
        setup_logging(log_file=str(tmp_path / "a.log"))
        setup_logging()
        assert _file_handlers() == []
