"""Discord ping relay: posts mention messages over one shared gateway session."""
