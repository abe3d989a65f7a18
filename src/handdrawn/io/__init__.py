"""Writers for generated strokes."""
