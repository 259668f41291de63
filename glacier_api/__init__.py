"""Voice of the Glacier backend: glacier news feed and blog media API."""

__version__ = "0.1.0"
