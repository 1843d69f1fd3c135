"""Core utilities and shared infrastructure.

- config: Configuration loading and validation
- constants: Named constants shared across the converter
- exceptions: Custom exception hierarchy
- ingress: Upload boundary used by the HTTP entry point
"""
