"""HTTP API for Commentbox."""
