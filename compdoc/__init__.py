"""Generate reference documentation for Vue component libraries."""

__version__ = "0.1.0"
