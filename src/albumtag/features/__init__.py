"""Feature slices: album resolution, file handling and tag writing."""
