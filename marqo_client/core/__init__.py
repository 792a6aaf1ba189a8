"""Request pipeline building blocks: config, logging, errors, validation,
defaulting, encoding and dispatch."""
