"""Print Makefile dependency rules for Sass stylesheets."""
