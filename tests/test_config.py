import base64

import orjson
import pytest
from pydantic import ValidationError

from navigator.core.config_validation import config_check, encode_config
from navigator.core.models import SelectionConfig, default_config


def _b64(payload):
    return base64.b64encode(orjson.dumps(payload)).decode()


def test_missing_config_uses_defaults():
    assert config_check(None) == default_config
    assert config_check("") == default_config


def test_defaults():
    config = SelectionConfig()

    assert config.preferredResolution == "1080p"
    assert config.prioritizeCached is True
    assert config.excludeLowQuality is True
    assert config.minSeeders == 5
    assert config.maxSizeMB == 20480
    assert config.fallbackToUnfiltered is False


def test_short_resolution_key_is_accepted():
    assert config_check(_b64({"resolution": "2160p"})).preferredResolution == "2160p"
    assert config_check(_b64({"preferredResolution": "720p"})).preferredResolution == "720p"
    assert config_check(_b64({"resolution": "4K"})).preferredResolution == "2160p"


def test_invalid_fields_fall_back_individually():
    config = config_check(
        _b64(
            {
                "resolution": "8k",
                "minSeeders": -3,
                "prioritizeCached": "yes",
                "excludeLowQuality": False,
                "maxSizeMB": 4096,
                "unknownKey": 1,
            }
        )
    )

    assert config.preferredResolution == "1080p"
    assert config.minSeeders == 5
    assert config.prioritizeCached is True
    assert config.excludeLowQuality is False
    assert config.maxSizeMB == 4096


def test_undecodable_config_uses_defaults():
    assert config_check("!!!not-base64!!!") == default_config
    assert config_check(base64.b64encode(b"[1, 2, 3]").decode()) == default_config
    assert config_check(base64.b64encode(b"{broken").decode()) == default_config


def test_encode_round_trip():
    config = SelectionConfig(preferredResolution="720p", minSeeders=20, prioritizeCached=False)
    assert config_check(encode_config(config)) == config


def test_config_is_immutable():
    config = SelectionConfig()
    with pytest.raises(ValidationError):
        config.minSeeders = 1
