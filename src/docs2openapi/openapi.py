"""OpenAPI document envelope and writer."""

import json
from pathlib import Path

import yaml

from docs2openapi.config import ExtractorConfig
from docs2openapi.parser.base import EndpointModel

COMPONENT_PREFIX = "#/components/schemas/"

# Shared schema behind the synthetic ``id`` property of every definition
RECORD_ID_SCHEMA = {"type": "string", "readOnly": True}


def build_document(model: EndpointModel, config: ExtractorConfig | None = None) -> dict:
    """Wrap an endpoint model in an OpenAPI 3 document."""
    config = config or ExtractorConfig()

    schemas = model.schemas_to_openapi()
    if config.id_reference.startswith(COMPONENT_PREFIX):
        id_name = config.id_reference[len(COMPONENT_PREFIX):]
        if "/" not in id_name and id_name not in schemas:
            schemas[id_name] = dict(RECORD_ID_SCHEMA)

    return {
        "openapi": config.openapi_version,
        "info": config.info.model_dump(),
        "paths": model.paths_to_openapi(),
        "components": {"schemas": schemas},
    }


def detect_output_format(path: Path) -> str:
    """Return 'yaml' for .yaml/.yml files, 'json' otherwise."""
    if path.suffix.lower() in (".yaml", ".yml"):
        return "yaml"
    return "json"


def write_document(document: dict, path: Path, fmt: str = "auto") -> Path:
    """Write the document as JSON (indent 2) or YAML."""
    if fmt == "auto":
        fmt = detect_output_format(path)

    if fmt == "yaml":
        text = yaml.safe_dump(document, sort_keys=False, allow_unicode=True)
    else:
        text = json.dumps(document, indent=2, ensure_ascii=False) + "\n"

    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_text(text, encoding="utf-8")
    return path
