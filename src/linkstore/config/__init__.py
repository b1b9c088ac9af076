"""Configuration: settings resolution, config discovery and logging setup."""
