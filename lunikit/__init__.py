"""Delimited-text streams, template tokens and data nodes, and error-message helpers."""

__version__ = "0.1.0"
__all__ = ["csvstream", "template_token", "nodes", "errors"]