"""Infrastructure: configuration, logging, metrics, tracing and DI."""
