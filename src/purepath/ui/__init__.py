"""User interfaces for purepath."""
