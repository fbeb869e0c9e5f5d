"""Render documentation-generator output into chat embeds and export descriptors."""
