"""sass-deps configuration."""
