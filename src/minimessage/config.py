import os
from pathlib import Path

import dotenv
from pydantic import BaseModel, ConfigDict, field_validator
from typing_extensions import Self

from .color import Color, resolve_color
from .log import logger_wrapper

logger = logger_wrapper("Config")

ENV_PREFIX = "MINIMESSAGE_"


class ParserConfig(BaseModel):
    """Options of a parse call.

    Attributes:
        default_color: color of the outermost scope, a name or ``#rrggbb``.
        strict: raise on unknown tags instead of dropping them.
        parse_hover_text: parse ``show_text`` hover content as markup.
        gradient_inclusive: let the last character of a gradient reach the
            final color.
        keep_close_content: emit text following a closing tag with the
            restored style instead of dropping it.
    """
    model_config = ConfigDict(frozen=True)

    default_color: str = "white"
    strict: bool = False
    parse_hover_text: bool = False
    gradient_inclusive: bool = False
    keep_close_content: bool = False

    @field_validator("default_color")
    @classmethod
    def check_color(cls, value: str) -> str:
        resolve_color(value)
        return value

    @property
    def color(self) -> Color:
        return resolve_color(self.default_color)

    @classmethod
    def from_env(cls, env_file: str | Path | None = None) -> Self:
        """Read ``MINIMESSAGE_<FIELD>`` variables, after loading `env_file`
        if one is given."""
        if env_file is not None:
            dotenv.load_dotenv(env_file)
        values = {}
        for name, field in cls.model_fields.items():
            env_value = os.getenv(ENV_PREFIX + name.upper(), None)
            if env_value is None:
                continue
            if field.annotation is bool:
                values[name] = env_value.lower() in {"true", "1"}
            else:
                values[name] = env_value
        config = cls(**values)
        if values:
            logger.debug("Loaded from environment: {}",
                         ", ".join(f"{k}={v}" for k, v in values.items()))
        return config
