"""Export engine components."""
