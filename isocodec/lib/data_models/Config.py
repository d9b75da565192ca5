from typing import Literal
from pydantic import BaseModel, Field


LogLevel = Literal["TRACE", "DEBUG", "INFO", "SUCCESS", "WARNING", "ERROR", "CRITICAL"]


class DebugConfig(BaseModel):
    level: LogLevel = "INFO"
    log_file: str | None = None
    print_description: bool = False


class SpecificationConfig(BaseModel):
    scheme_file: str | None = None
    mti_file: str | None = None


class MessageConfig(BaseModel):
    skip_missing_elements: bool = True
    use_header: bool = False


class Config(BaseModel):
    debug: DebugConfig = Field(default_factory=DebugConfig)
    specification: SpecificationConfig = Field(default_factory=SpecificationConfig)
    message: MessageConfig = Field(default_factory=MessageConfig)
