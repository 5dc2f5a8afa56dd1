"""
Pydantic schema definitions for API payloads.

Field names are snake_case in Python and camelCase on the wire; each
model declares the camelCase name as its alias.  Request models keep
their required fields optional at the type level so that a missing
value can be reported with the endpoint's own message rather than a
generic validation error; ``RequestModel.missing_fields`` performs that
check.
"""

from typing import ClassVar, List, Tuple

from pydantic import BaseModel


class RequestModel(BaseModel):
    """Base class for request bodies with "present and truthy" fields."""

    model_config = {"populate_by_name": True}

    required_fields: ClassVar[Tuple[str, ...]] = ()

    def missing_fields(self) -> List[str]:
        """Return the aliases of required fields that are absent, null or empty."""
        missing = []
        for name in self.required_fields:
            if not getattr(self, name):
                field = type(self).model_fields[name]
                missing.append(field.alias or name)
        return missing
