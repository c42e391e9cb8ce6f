"""
This module defines the Pydantic models for incoming API requests.

Every field is optional at the schema level. Presence of the required ones is
checked by `structure_api.validators` so that a missing field produces the
API's own `{"status": "unsuccessful", "reason": ...}` body instead of a 422.
For the same reason a field that is not a string is read as missing, and a
body that is not a JSON object is read as an empty request.
"""

from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator


class ConnectionRequest(BaseModel):
    """
    Represents the credentials needed to open a Snowflake connection.

    Attributes:
        account: Account URL prefix (without ".snowflakecomputing.com").
        username: Username used for Snowflake auth.
        password: Password used for Snowflake auth.
        role: Optional role. The user's default role is used when omitted.
        warehouse: Optional warehouse. The user's default warehouse is used when omitted.
    """

    account: str | None = Field(None, description="Account URL prefix for the target Snowflake environment")
    username: str | None = Field(None, description="Username to use for Snowflake auth")
    password: str | None = Field(None, description="Password to use for Snowflake auth")
    role: str | None = Field(None, description="Snowflake role; the user's default role when omitted")
    warehouse: str | None = Field(None, description="Snowflake warehouse; the user's default warehouse when omitted")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "account": "my_snowflake_account",
                    "username": "some.user@company.com",
                    "password": "secret_password",
                    "warehouse": "DEMO_WH",
                    "role": "ACCOUNTADMIN",
                }
            ]
        }
    }

    @model_validator(mode="before")
    @classmethod
    def _non_object_as_empty(cls, data: Any) -> Any:
        return data if isinstance(data, (dict, BaseModel)) else {}

    @field_validator("*", mode="before")
    @classmethod
    def _non_string_as_missing(cls, value: Any) -> str | None:
        return value if isinstance(value, str) else None


class QueryRequest(ConnectionRequest):
    """Credentials plus a single statement to execute."""

    query: str | None = Field(None, description="Single Snowflake statement to execute, with a trailing ';'")

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "account": "my_snowflake_account",
                    "username": "some.user@company.com",
                    "password": "secret_password",
                    "query": "SHOW DATABASES;",
                }
            ]
        }
    }


class RelationPreviewRequest(ConnectionRequest):
    """Credentials plus the fully qualified name of the relation to preview."""

    database: str | None = Field(None, description="The database where the relation exists")
    schema_: str | None = Field(None, alias="schema", description="The schema where the relation exists")
    relation: str | None = Field(None, description="The name of the relation to preview")

    model_config = {
        "populate_by_name": True,
        "json_schema_extra": {
            "examples": [
                {
                    "account": "my_snowflake_account",
                    "username": "some.user@company.com",
                    "password": "secret_password",
                    "database": "MY_DATABASE",
                    "schema": "MY_SCHEMA",
                    "relation": "MY_TABLE",
                }
            ]
        },
    }
