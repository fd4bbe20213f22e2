"""Route groups mounted by core.feature_loader."""
