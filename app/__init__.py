"""Blog posts backend application package."""
