"""Sass import resolution on top of libsass."""
