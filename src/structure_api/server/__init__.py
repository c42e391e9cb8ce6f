"""FastAPI application serving the Snowflake proxy routes."""
