"""Application common components."""
