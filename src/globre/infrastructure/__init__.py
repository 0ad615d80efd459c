"""Infrastructure layer: regex engine adapter and path filters."""
