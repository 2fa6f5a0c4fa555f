"""cvblog - related articles, category pagination and IA validation for the blog."""

__version__ = "0.1.0"
