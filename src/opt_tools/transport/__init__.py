"""HTTP transport for the optimization API."""

from opt_tools.transport.http import HttpTransport

__all__ = ["HttpTransport"]
