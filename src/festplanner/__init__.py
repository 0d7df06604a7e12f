"""Festival planner core: catalog filtering, timeline layout and ranked favorites."""

__version__ = "0.1.0"
