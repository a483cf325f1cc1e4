import codecs

from pydantic import Field, field_validator
from pydantic_settings import BaseSettings, SettingsConfigDict

from restdocs_testclient import constants


class Config(BaseSettings):
    """
    Configuration for documenting operations

    output_dir: the directory that converted responses are saved under
    autosave: whether each documented response is written as soon as it is converted
    default_charset: used to decode bodies whose content type has no charset
    text_content_types: content types saved as text rather than base64 (text/* is always text)
    """

    model_config = SettingsConfigDict(extra="ignore")

    output_dir: str = Field(default=".restdocs", alias="RESTDOCS_OUTPUT_DIR")
    autosave: bool = Field(default=True, alias="RESTDOCS_AUTOSAVE")
    default_charset: str = Field(default=constants.DEFAULT_CHARSET, alias="RESTDOCS_DEFAULT_CHARSET")
    text_content_types: list[str] = Field(
        default=list(constants.DEFAULT_TEXT_CONTENT_TYPES), alias="RESTDOCS_TEXT_CONTENT_TYPES"
    )

    @field_validator("default_charset")
    @classmethod
    def _validate_charset(cls, value: str) -> str:
        try:
            codecs.lookup(value)
        except LookupError as e:
            raise ValueError(f"Unknown charset: {value}") from e
        return value

    @field_validator("text_content_types")
    @classmethod
    def _normalize_content_types(cls, value: list[str]) -> list[str]:
        return [content_type.strip().lower() for content_type in value]
