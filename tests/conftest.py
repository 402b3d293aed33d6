"""Pytest configuration and fixtures for apache-skeleton tests."""

import io
from datetime import datetime, timezone
from unittest.mock import MagicMock

import pytest
from rich.console import Console

from apache_skeleton.config import Settings
from apache_skeleton.connector.local import CommandResult, LocalConnector
from apache_skeleton.model.project import AuditRecord


@pytest.fixture
def mock_connector():
    """Create a mock connector for a host with nothing installed."""
    connector = MagicMock(spec=LocalConnector)

    connector.run.return_value = CommandResult(
        command="test",
        stdout="",
        stderr="not found",
        exit_code=127,
    )
    connector.is_socket.return_value = False
    connector.glob.return_value = []
    connector.dir_exists.return_value = False
    connector.which.return_value = None
    connector.is_root.return_value = False
    connector.read_file.return_value = None

    return connector


@pytest.fixture
def console():
    """Console writing to a buffer; read it back with console.file.getvalue()."""
    return Console(file=io.StringIO(), width=200, color_system=None)


@pytest.fixture
def settings():
    return Settings()


@pytest.fixture
def audit_record():
    return AuditRecord(
        project="example.com",
        created=datetime(2026, 1, 8, 12, 30, 0, tzinfo=timezone.utc),
        os="Ubuntu 24.04 LTS",
        php_mode="none",
    )
