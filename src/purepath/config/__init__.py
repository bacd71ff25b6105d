"""Configuration loading and default locations for purepath."""
