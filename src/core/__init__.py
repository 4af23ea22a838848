"""Core: settings, domain models and the services behind each command."""
