from typing import ClassVar

from pydantic import BaseModel, ConfigDict


class Document(BaseModel):
    """
    Base class for models persisted as MongoDB documents.
    Subclasses name their collection through ``collection_name``.
    """

    collection_name: ClassVar[str]

    model_config = ConfigDict(populate_by_name=True, from_attributes=True, arbitrary_types_allowed=True)
