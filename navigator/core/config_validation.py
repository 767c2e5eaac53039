import base64
import binascii

import orjson

from navigator.core.exceptions import MalformedConfig
from navigator.core.logger import logger
from navigator.core.models import SelectionConfig, default_config


def decode_config(b64config: str):
    try:
        padded = b64config + "=" * (-len(b64config) % 4)
        config = orjson.loads(base64.urlsafe_b64decode(padded))
    except (binascii.Error, ValueError, orjson.JSONDecodeError) as e:
        raise MalformedConfig(f"Undecodable configuration: {e}")

    if not isinstance(config, dict):
        raise MalformedConfig("Configuration must be a JSON object")

    return config


def config_check(b64config: str = None):
    if not b64config:
        return default_config

    try:
        config = decode_config(b64config)
    except MalformedConfig as e:
        logger.warning(f"{e.message}, using default configuration")
        return default_config

    # field validators replace every invalid value with its default
    return SelectionConfig(**config)


def encode_config(config: SelectionConfig):
    return (
        base64.urlsafe_b64encode(orjson.dumps(config.model_dump()))
        .decode()
        .rstrip("=")
    )
