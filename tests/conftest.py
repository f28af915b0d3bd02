"""
Pytest configuration and shared fixtures for Narytree tests.
"""

import logging
import tempfile
from pathlib import Path
from typing import Generator, List

import pytest
import structlog

from narytree.merkle import Tree, new_tree


@pytest.fixture(autouse=True)
def reset_logging() -> Generator[None, None, None]:
    """
    Restore logging state after each test.
    
    setup_logging() attaches handlers to the root logger, and the CLI binds
    them to CliRunner streams that are closed once the invocation ends.
    """
    yield
    logging.getLogger().handlers.clear()
    logging.getLogger().setLevel(logging.WARNING)
    structlog.reset_defaults()


@pytest.fixture
def temp_dir() -> Generator[Path, None, None]:
    """
    Create a temporary directory for test files.
    
    Yields:
        Path to temporary directory that is cleaned up after test.
    """
    with tempfile.TemporaryDirectory() as tmpdir:
        yield Path(tmpdir)


@pytest.fixture
def abcd_blocks() -> List[str]:
    """Blocks of the reference binary tree."""
    return ["a", "b", "c", "d"]


@pytest.fixture
def abcd_tree(abcd_blocks: List[str]) -> Tree:
    """Binary SHA-256 tree over ["a", "b", "c", "d"]."""
    return new_tree(abcd_blocks)


@pytest.fixture
def missing_config(temp_dir: Path) -> Path:
    """
    Path to a configuration file that does not exist.
    
    Passing it keeps tests independent of ~/.narytree/config.yaml.
    """
    return temp_dir / "absent.yaml"
