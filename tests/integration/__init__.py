"""End-to-end tests of the sass-deps command."""
