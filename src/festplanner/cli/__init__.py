"""Command-line front end for the festival planner."""
