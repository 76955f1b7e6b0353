"""Tests for sass-dependencies."""
