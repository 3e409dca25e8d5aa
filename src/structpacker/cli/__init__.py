"""Command-line tools for structpacker."""
