"""Extractor configuration.

Defaults match the markup of the NetSuite REST API Browser. A YAML file can
override any field, e.g.::

    schema_sections: first
    selectors:
      group: "div#docs article div.ns-support-ga"
    info:
      title: My API
"""

from pathlib import Path
from typing import Literal

import yaml
from pydantic import BaseModel, ConfigDict


class Selectors(BaseModel):
    """CSS selectors for every documentation idiom the extractors read."""

    model_config = ConfigDict(extra="forbid")

    # Tag groups and operations
    group: str = "div#docs article div.ns-support-ga"
    group_heading: str = 'h1[id^="tag-"]'
    operation: str = 'div[id^="operation-"]'
    operation_method: str = ".operation-method"
    operation_path: str = ".operation-path"
    operation_summary: str = ".operation-summary"
    request_ref: str = ".swagger-request-body .json-schema-ref"
    # the page renders one generic schema per operation; both read the first link
    response_ref: str = ".swagger-responses .json-schema-ref"
    error_ref: str = ".swagger-responses .json-schema-ref"

    # Parameter rows
    parameter: str = ".swagger-request-params .prop-row"
    parameter_name: str = ".prop-name .prop-title"
    parameter_location: str = ".prop-subtitle"
    parameter_format: str = ".prop-format"

    # Shared property facets
    description: str = ".prop-value p"
    type: str = ".prop-type .json-property-type"
    required: str = ".json-property-required"
    enum_item: str = ".json-property-enum-item"
    default: str = ".json-property-default-value"

    # Schema definitions
    definition: str = "div#definitions div.swagger-definition"
    definition_name: str = "h2"
    schema_properties: str = ".json-schema-properties"
    property_name: str = ".prop-name .prop-title"
    property_title: str = ".json-property-title"
    property_format: str = ".json-property-format"
    property_read_only: str = ".json-property-read-only"
    continuation: str = ".json-inner-schema"
    array_items: str = ".json-schema-array-items"
    schema_ref: str = ".json-schema-ref"


class OutputInfo(BaseModel):
    model_config = ConfigDict(extra="forbid")

    title: str = "NetSuite REST API"
    version: str = "1.0.0"
    description: str = "Generated OpenAPI schema for NetSuite REST API."


class ExtractorConfig(BaseModel):
    """Top-level configuration for one extraction run."""

    model_config = ConfigDict(extra="forbid")

    selectors: Selectors = Selectors()
    info: OutputInfo = OutputInfo()
    openapi_version: str = "3.0.0"
    # "first" keeps only the first schema-definition section
    schema_sections: Literal["all", "first"] = "all"
    id_reference: str = "#/components/schemas/recordId"
    ref_prefixes: dict[str, str] = {"#/definitions/": "#/components/schemas/"}
    wait_until: Literal["load", "domcontentloaded", "networkidle", "commit"] = "networkidle"
    timeout_ms: int = 60000


def load_config(path: Path | None = None) -> ExtractorConfig:
    """Load configuration from a YAML file, or return the defaults."""
    if path is None:
        return ExtractorConfig()

    data = yaml.safe_load(path.read_text(encoding="utf-8")) or {}
    return ExtractorConfig(**data)
