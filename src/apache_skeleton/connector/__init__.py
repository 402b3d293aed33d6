"""Connector package - Access to the host the project is created on."""

from apache_skeleton.connector.local import CommandResult, LocalConnector

__all__ = ["CommandResult", "LocalConnector"]
