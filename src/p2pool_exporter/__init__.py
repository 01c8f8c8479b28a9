"""Prometheus metrics and HTML dashboard for a Monero P2Pool node."""

__version__ = "0.1.0"
