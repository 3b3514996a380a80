"""Number parsing, string helpers, line reading, printf-style formatting, X11 colours, XPM images, room lines and an operation log."""

__version__ = "0.1.0"