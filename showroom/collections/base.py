from bson import ObjectId
from pydantic import BaseModel, ConfigDict, Field


from showroom.utils.objectid_utils import PyObjectId


class BaseMongoModel(BaseModel):
    """
    Base model for all MongoDB documents with ObjectId support.
    """

    model_config = ConfigDict(
        from_attributes=True, populate_by_name=True, use_enum_values=True
    )

    id: PyObjectId = Field(alias="_id", default_factory=ObjectId)

    def to_document(self) -> dict:
        """
        Dump the model in the shape stored in MongoDB.

        Returns:
            Dictionary keyed by field names with `_id` as the identifier
        """
        return self.model_dump(by_alias=True)
