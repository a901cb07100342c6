"""Command line entry points for navpath."""
