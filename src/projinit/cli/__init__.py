"""projinit command-line interface."""
