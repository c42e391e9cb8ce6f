"""
Presence checks for request fields.

Validators never raise. They return the reason a request is rejected, or
nothing when the input is acceptable; callers decide how to report it. A value
counts as missing when it is falsy, so empty strings are rejected the same way
as absent fields.
"""


def validate_connection_params(account: str | None, username: str | None, password: str | None) -> str | None:
    """Returns the reason for the first missing credential, checked in order account, username, password."""
    if not account:
        return "invalid account"
    if not username:
        return "invalid username"
    if not password:
        return "invalid password"
    return None


def validate_query_text(query: str | None) -> str | None:
    if not query:
        return "A query must be provided"
    return None


def validate_relation_params(database: str | None, schema: str | None, relation: str | None) -> list[str]:
    """Returns a reason for every missing identifier, in order database, schema, relation."""
    checks = [
        (database, "A database must be provided"),
        (schema, "A schema must be provided"),
        (relation, "A relation must be provided"),
    ]
    return [reason for value, reason in checks if not value]
