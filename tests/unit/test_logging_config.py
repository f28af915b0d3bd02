"""
Unit tests for structured logging configuration.
"""

import json
import logging
from pathlib import Path

import pytest
import structlog

from narytree.logging_config import (
    get_logger,
    log_proof_verification,
    log_tree_construction,
    setup_logging,
)
from narytree.merkle import is_proven, new_tree, prove


def _read_entries(log_file: Path) -> list:
    lines = [line for line in log_file.read_text().strip().split("\n") if line]
    return [json.loads(line) for line in lines]


class TestLoggingConfiguration:
    """Test structured logging configuration functionality."""

    def test_setup_logging_default(self):
        """Test setup_logging with default parameters."""
        setup_logging()

        logger = get_logger("test")
        assert hasattr(logger, 'info') and hasattr(logger, 'warning') and hasattr(logger, 'error')

    def test_setup_logging_with_level(self):
        """Test setup_logging with custom log level."""
        setup_logging(level="DEBUG")

        assert logging.getLogger().level == logging.DEBUG

    def test_setup_logging_unknown_level_falls_back_to_info(self):
        """Test an unknown level name falls back to INFO."""
        setup_logging(level="chatty")

        assert logging.getLogger().level == logging.INFO

    def test_setup_logging_with_file(self, temp_dir: Path):
        """Test setup_logging with log file."""
        log_file = temp_dir / "logs" / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger("test").info("test_message", key="value")

        assert log_file.exists()
        assert "test_message" in log_file.read_text()

    def test_setup_logging_json_format(self, temp_dir: Path):
        """Test setup_logging with JSON format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=True)

        get_logger("test").info("test_message", key="value")

        entry = _read_entries(log_file)[0]
        assert entry["event"] == "test_message"
        assert entry["key"] == "value"
        assert entry["logger"] == "narytree.test"
        assert "timestamp" in entry
        assert "level" in entry

    def test_setup_logging_human_format(self, temp_dir: Path):
        """Test setup_logging with human-readable format."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file, json_format=False)

        get_logger("test").info("test_message", key="value")

        content = log_file.read_text()
        assert "test_message" in content
        assert "key=value" in content

    @pytest.mark.parametrize("name,expected", [
        ("cli", "narytree.cli"),
        ("narytree.merkle.tree", "narytree.merkle.tree"),
    ])
    def test_logger_names_are_namespaced(self, temp_dir: Path, name, expected):
        """Test module loggers are not prefixed twice."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        get_logger(name).info("named")

        assert _read_entries(log_file)[0]["logger"] == expected


class TestLoggingHelpers:
    """Test structured event helpers."""

    def test_log_tree_construction(self, temp_dir: Path):
        """Test tree construction events carry the tree shape."""
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file)

        log_tree_construction(
            get_logger("test"),
            leaf_count=4,
            number_of_children=2,
            height=2,
            root_hash="abc",
        )

        entry = _read_entries(log_file)[0]
        assert entry["event"] == "tree_construction"
        assert entry["leaf_count"] == 4
        assert entry["height"] == 2
        assert entry["level"] == "debug"

    def test_log_proof_verification_failure(self, temp_dir: Path):
        """Test failed verifications include the failure reason."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        log_proof_verification(
            get_logger("test"),
            index=3,
            proof_length=2,
            success=False,
            failure_reason="root_mismatch",
        )

        entry = _read_entries(log_file)[0]
        assert entry["event"] == "proof_verification_failed"
        assert entry["failure_reason"] == "root_mismatch"
        assert entry["success"] is False

    def test_successful_verification_logged_at_debug(self, temp_dir: Path):
        """Test successful verifications stay below INFO."""
        log_file = temp_dir / "test.log"
        setup_logging(level="INFO", log_file=log_file)

        log_proof_verification(get_logger("test"), index=0, proof_length=1, success=True)

        assert log_file.read_text().strip() == ""

    def test_library_operations_emit_events(self, temp_dir: Path):
        """Test construction and verification log through module loggers."""
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file)

        tree = new_tree(["a", "b"])
        is_proven("a", 0, tree.root_hash, ["wrong"])

        events = [entry["event"] for entry in _read_entries(log_file)]
        assert "tree_construction" in events
        assert "proof_verification_failed" in events


class TestUnconfiguredLogging:
    """Test library behaviour when the application never sets up logging."""

    def test_library_calls_write_nothing_to_stdout(self, capsys):
        """Test build, prove and verify stay silent on stdout."""
        structlog.reset_defaults()

        tree = new_tree(["a", "b", "c", "d"])
        proof = prove(tree, 1)
        is_proven("x", 1, tree.root_hash, proof)

        assert capsys.readouterr().out == ""

    def test_events_reach_stdlib_logging(self, caplog):
        """Test events go through the logging module before setup."""
        structlog.reset_defaults()

        with caplog.at_level(logging.DEBUG, logger="narytree"):
            new_tree(["a", "b"])

        assert any(record.name == "narytree.merkle.tree" for record in caplog.records)
        assert any("tree_construction" in record.getMessage() for record in caplog.records)


class TestNonBinaryProofWarning:
    """Test the warning for proofs on trees that are not binary."""

    def test_ternary_tree_logs_warning(self, temp_dir: Path):
        """Test prove() on a ternary tree emits non_binary_proof_path."""
        log_file = temp_dir / "test.log"
        setup_logging(level="WARNING", log_file=log_file, json_format=True)
        tree = new_tree([str(i) for i in range(9)], number_of_children=3)

        prove(tree, 0)

        warnings = [e for e in _read_entries(log_file) if e["event"] == "non_binary_proof_path"]
        assert len(warnings) == 1
        assert warnings[0]["number_of_children"] == 3
        assert warnings[0]["index"] == 0
        assert warnings[0]["level"] == "warning"

    def test_binary_tree_logs_no_warning(self, temp_dir: Path):
        """Test prove() on a binary tree stays below WARNING."""
        log_file = temp_dir / "test.log"
        setup_logging(level="DEBUG", log_file=log_file, json_format=True)
        tree = new_tree(["a", "b", "c", "d"])

        prove(tree, 1)

        events = [e["event"] for e in _read_entries(log_file)]
        assert "non_binary_proof_path" not in events
