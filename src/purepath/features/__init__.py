"""Feature packages for purepath."""
