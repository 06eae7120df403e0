"""Application layer: orchestration shared by user interfaces."""
