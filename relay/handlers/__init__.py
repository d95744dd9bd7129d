"""HTTP boundary: request parsing, response building and the relay handler."""
