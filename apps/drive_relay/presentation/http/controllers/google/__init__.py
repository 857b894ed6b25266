"""Google token controllers."""
