"""Qt view layer for grid columns with row actions."""
