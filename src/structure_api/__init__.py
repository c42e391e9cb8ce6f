"""Structure API - HTTP proxy for Snowflake."""

__version__ = "0.1.0"
