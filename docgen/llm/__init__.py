"""Text generation capability and provider adapters."""
