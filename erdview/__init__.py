"""Load and validate entity-relationship diagrams stored as JSON and render them to SVG."""

__version__ = "0.1.0"