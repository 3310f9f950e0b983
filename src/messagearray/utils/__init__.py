"""Helper utilities shared by the rendering pipeline."""

from .escape import html_escape

__all__ = ["html_escape"]
