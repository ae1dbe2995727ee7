"""Optional integrations with third-party tooling."""
