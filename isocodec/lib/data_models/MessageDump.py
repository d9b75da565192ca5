from pydantic import BaseModel, Field
from isocodec.lib.data_models.Types import TypeFields


class MessageDump(BaseModel):
    mti: str = Field(min_length=4, max_length=4)
    fields: TypeFields = Field(default_factory=dict)
