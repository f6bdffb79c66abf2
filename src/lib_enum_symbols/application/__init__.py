"""Application layer: symbol ports and conversion use cases."""
