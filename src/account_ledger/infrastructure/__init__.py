"""Infrastructure layer - storage and instrumentation."""
