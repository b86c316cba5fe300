"""semgraph - segment parsing and graph validation for documentation artifacts."""

__version__ = "0.1.0"
