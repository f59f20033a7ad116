"""Command line interface for danger-zone-mcp."""
