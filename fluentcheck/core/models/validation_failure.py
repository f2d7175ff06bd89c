"""
ValidationFailure model representing a single reported problem.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict


class ValidationFailure(BaseModel):
    """
    A single validation failure (immutable).

    Attributes:
        property_name: Full dotted path of the failing property ("" for whole-object rules)
        error_message: Formatted, user-facing message
        attempted_value: The value that failed validation
        custom_state: Optional payload attached with with_state()
    """

    model_config = ConfigDict(
        frozen=True,
        arbitrary_types_allowed=True,
        json_schema_extra={
            "example": {
                "property_name": "customer.address.postcode",
                "error_message": "'Postcode' is not in the correct format.",
                "attempted_value": "12-AB",
                "custom_state": None,
            }
        },
    )

    property_name: str
    error_message: str
    attempted_value: Any = None
    custom_state: Any = None

    def __str__(self) -> str:
        return self.error_message
