"""
Shared pydantic base for canteen entities
"""
from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel

class CamelModel(BaseModel):
    """Snake-case attributes, camelCase documents and JSON"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    def to_document(self) -> dict:
        """Serialize for storage (aliases, enums as values, no id)"""
        return self.model_dump(by_alias=True, mode="json", exclude={"id"})
