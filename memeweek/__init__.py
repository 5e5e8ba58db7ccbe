"""Weekly meme contest bot for Discord."""

__version__ = "1.0.0"
