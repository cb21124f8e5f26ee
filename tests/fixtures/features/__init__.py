"""Feature classes scanned by the discovery tests."""
