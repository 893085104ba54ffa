"""Core reminder pipeline: filtering, message composition and delivery."""
