"""Configuration and clock helpers shared across the bot."""
