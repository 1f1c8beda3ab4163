"""Non-visual core for procedural-language auto-completion."""
