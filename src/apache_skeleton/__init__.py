"""apache-skeleton: scaffold Apache2 + PHP web projects with a public web root."""

__version__ = "0.1.0"
