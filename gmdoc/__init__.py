"""Generate Markdown documents from project source files using a YAML configuration."""

__version__ = "0.1.0"