"""GitHub login web application."""
