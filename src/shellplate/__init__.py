"""shellplate: Jinja templates whose values come from Python snippets and shell commands."""

__version__ = "0.1.0"
