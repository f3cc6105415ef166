"""Security helpers: input sanitizers and security event logging."""
