"""Quote API core: config, logging, catalog, feature registry."""
