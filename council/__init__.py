"""Council: proposal voting and content feed service."""
