"""Base model for all variantbox Pydantic models.

This module provides a base model class that enforces consistent serialization
behavior across all variantbox models.
"""

from typing import Any

from pydantic import BaseModel, ConfigDict, ValidationError


class VariantboxBaseModel(BaseModel):
    """Base model class for all variantbox Pydantic models.

    Descriptor files use camelCase keys (``minifyEnabled``) while Python code
    uses snake_case attributes; both are accepted on input and aliases are used
    on output.
    """

    model_config = ConfigDict(
        # Unknown keys are dropped unless a model forbids them
        extra="ignore",
        # Accept both field names and aliases
        populate_by_name=True,
        # Strip whitespace from string fields
        str_strip_whitespace=True,
        # Use enum values in serialization
        use_enum_values=True,
        # Validate assignment after model creation
        validate_assignment=True,
    )

    def to_dict(self, **context: Any) -> dict[str, Any]:
        """Convert model to dictionary with consistent serialization parameters.

        Keyword arguments are passed to field serializers as context, e.g.
        ``reveal_secrets=True``.

        Returns:
            Dictionary representation using JSON-compatible serialization
        """
        return self.model_dump(
            by_alias=True, exclude_unset=False, mode="json", context=context
        )


def validation_error_details(error: ValidationError) -> str:
    """Summarize a validation error as ``loc: msg`` pairs.

    Input values are left out so secrets never reach error messages.
    """
    return "; ".join(
        f"{'.'.join(str(loc) for loc in err['loc'])}: {err['msg']}"
        for err in error.errors(include_input=False)
    )
