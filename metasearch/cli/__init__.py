"""Command-line tools for the metasearch engine layer."""
