"""Layer compositing: branch selection, safe-zone scaling and the engine."""
