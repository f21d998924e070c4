"""Session-scoped data collection and visualization for civil engineering test samples."""
