"""Discord bot for the weekly meme and bone contests."""
