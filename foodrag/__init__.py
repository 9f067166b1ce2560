"""Food question answering over a static corpus or web search."""

__version__ = "0.1.0"
