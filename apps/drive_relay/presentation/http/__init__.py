"""HTTP presentation."""
