"""SwitchBot v1.0 endpoint modules (internal)."""
