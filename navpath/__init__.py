"""navpath: textual path algebra for a terminal file manager's navigation layer."""

__version__ = "0.1.0"
