"""presstrack command-line interface."""
