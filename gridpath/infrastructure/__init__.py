"""Infrastructure layer: file formats."""
