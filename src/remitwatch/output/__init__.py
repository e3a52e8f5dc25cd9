from .summary import render_json, render_markdown

__all__ = ["render_json", "render_markdown"]
