"""Employee directory API with bearer-token authentication."""
