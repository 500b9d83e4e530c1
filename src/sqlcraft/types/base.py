"""Base model class for all sqlcraft models with serialization support."""

from typing import Any, Dict

from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel


class SqlCraftBaseModel(BaseModel):
    """Base model for all sqlcraft models with built-in serialization.

    Provides common functionality for all sqlcraft models including:
    - Serialization to dictionary via to_dict()
    - camelCase aliases alongside the snake_case field names
    - Consistent configuration
    """
    model_config = ConfigDict(
        use_enum_values=True,
        validate_assignment=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )

    def to_dict(self, by_alias: bool = False) -> Dict[str, Any]:
        """Convert model to dictionary for serialization.

        Args:
            by_alias: Emit camelCase keys instead of field names

        Returns:
            Dictionary representation suitable for JSON serialization
        """
        return self.model_dump(mode="json", by_alias=by_alias, exclude_none=True)
