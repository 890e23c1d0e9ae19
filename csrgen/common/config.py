"""Runtime settings for csrgen.

Values come from the environment (a local .env file is honoured through
python-dotenv) and can be overridden by command line options.

    CSRGEN_KEY_SIZE     RSA modulus size in bits (default 2048)
    CSRGEN_TEMPLATE     manifest template path (default template.yaml)
    CSRGEN_OUTPUT_ROOT  directory the bundle directory is created in (default .)
    CSRGEN_LOG_LEVEL    logging level name (default INFO)
"""
import os
from typing import Literal, Optional

from dotenv import load_dotenv
from pydantic import BaseModel, PositiveInt, ValidationError

from csrgen.common.errors import ArgumentError

DEFAULT_KEY_SIZE = 2048
DEFAULT_TEMPLATE = "template.yaml"


class Settings(BaseModel):
    key_size: PositiveInt = DEFAULT_KEY_SIZE
    template_path: str = DEFAULT_TEMPLATE
    output_root: str = "."
    log_level: Literal["DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL"] = "INFO"


def load_settings(key_size: Optional[int] = None, template_path: Optional[str] = None,
                  output_root: Optional[str] = None, log_level: Optional[str] = None) -> Settings:
    """Build Settings from the environment, with explicit arguments taking precedence."""
    load_dotenv()
    values = {
        "key_size": key_size if key_size is not None else os.getenv("CSRGEN_KEY_SIZE", str(DEFAULT_KEY_SIZE)),
        "template_path": template_path or os.getenv("CSRGEN_TEMPLATE", DEFAULT_TEMPLATE),
        "output_root": output_root or os.getenv("CSRGEN_OUTPUT_ROOT", "."),
        "log_level": (log_level or os.getenv("CSRGEN_LOG_LEVEL", "INFO")).upper(),
    }
    try:
        return Settings(**values)
    except ValidationError as e:
        first = e.errors()[0]
        raise ArgumentError(f"invalid configuration {first['loc'][0]}: {first['msg']}") from e


__all__ = ["Settings", "load_settings", "DEFAULT_KEY_SIZE", "DEFAULT_TEMPLATE"]
