"""Error body returned by every multifinance endpoint."""

from pydantic import BaseModel, Field


class ErrorResponseSchema(BaseModel):
    """
    Body of every 4xx and 5xx response.

    ``error`` is the stable code partners branch on, for example
    INSUFFICIENT_LIMIT (422) or TRANSACTION_TIMEOUT (503). Storage failures
    carry a generic message and never the underlying driver error.
    """
    error: str = Field(
        ...,
        description="Stable error code",
        examples=["INSUFFICIENT_LIMIT", "CUSTOMER_NOT_VERIFIED", "TRANSACTION_TIMEOUT"],
    )
    message: str = Field(
        ...,
        description="Explanation safe to show to the caller",
        examples=["Insufficient limit for this transaction"],
    )
    request_id: str | None = Field(
        None,
        description="X-Request-ID of the failed request, for log correlation",
    )

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "error": "LIMIT_NOT_SET",
                    "message": "Limit for 12-month tenor is not set for the customer",
                    "request_id": "3f2b9c1e7a",
                }
            ]
        }
    }
