"""Infrastructure layer: MongoDB connection and repositories."""
