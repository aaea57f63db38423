"""JSON Schema checks for packer configuration files.

Every offending key is reported at once so a user editing the config by
hand can fix all of them in one pass.
"""

import json
from functools import lru_cache
from pathlib import Path
from typing import Any

from jsonschema import Draft202012Validator

SCHEMA_PATH = Path(__file__).parent.parent / "schemas" / "config.schema.json"


@lru_cache(maxsize=1)
def config_validator() -> Draft202012Validator:
    """Build the validator for the bundled config schema.

    Raises:
        OSError: If the schema file can't be read
        json.JSONDecodeError: If the schema is not JSON
        jsonschema.SchemaError: If the schema itself is invalid
    """
    with SCHEMA_PATH.open("r", encoding="utf-8") as f:
        schema = json.load(f)
    Draft202012Validator.check_schema(schema)
    return Draft202012Validator(schema)


def config_errors(data: Any) -> list[str]:
    """List every schema violation in a config document.

    Example:
        {"registry_url": "ftp://host"} -> ["registry_url: 'ftp://host' does not match '^https?://'"]

    Returns:
        One "key: message" line per violation, ordered by key; empty if valid
    """
    errors = sorted(
        config_validator().iter_errors(data),
        key=lambda e: [str(p) for p in e.absolute_path],
    )
    return [
        f"{'.'.join(str(p) for p in e.absolute_path) or '<document>'}: {e.message}"
        for e in errors
    ]
