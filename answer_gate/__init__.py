"""Answer-quality gate for knowledge-retention questionnaires."""

__version__ = "0.1.0"
