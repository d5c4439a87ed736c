import pytest
from bs4 import BeautifulSoup

from docs2openapi.config import ExtractorConfig
from docs2openapi.errors import EmptyContent, InvalidMethod, NotFound
from docs2openapi.parser.base import HttpMethod, ReferenceType
from docs2openapi.parser.operations import extract_operation, schema_reference

CONFIG = ExtractorConfig()


def _operation(method="GET", path="/account", summary="List accounts", body=""):
    parts = []
    if method is not None:
        parts.append(f'<span class="operation-method">{method}</span>')
    if path is not None:
        parts.append(f'<span class="operation-path">{path}</span>')
    if summary is not None:
        parts.append(f'<div class="operation-summary">{summary}</div>')
    html = f'<div id="operation-test">{"".join(parts)}{body}</div>'
    return BeautifulSoup(html, "html.parser").select_one("div")


REQUEST_BODY = '<section class="swagger-request-body"><a class="json-schema-ref" href="#/definitions/account">account</a></section>'
RESPONSES = """
<section class="swagger-responses">
  <a class="json-schema-ref" href="#/definitions/nsError">nsError</a>
  <a class="json-schema-ref" href="#/definitions/other">other</a>
</section>
"""
SPLIT_RESPONSES = """
<section class="swagger-responses">
  <div class="swagger-response-success"><a class="json-schema-ref" href="#/definitions/account-collection">x</a></div>
  <div class="swagger-response-error"><a class="json-schema-ref" href="#/definitions/nsError">e</a></div>
</section>
"""


class TestOperationLeaves:
    def test_minimal_operation(self):
        op = extract_operation(_operation(), "account", CONFIG)
        assert op.method is HttpMethod.GET
        assert op.path == "/account"
        assert op.summary == "List accounts"
        assert op.parameters == []
        assert op.tags == ["Account"]

    def test_minimal_operation_to_openapi(self):
        op = extract_operation(_operation(), "account", CONFIG)
        assert op.to_openapi() == {
            "summary": "List accounts",
            "parameters": [],
            "responses": {},
            "tags": ["Account"],
        }

    def test_tag_keeps_rest_of_name(self):
        op = extract_operation(_operation(), "accountingPeriod", CONFIG)
        assert op.tags == ["AccountingPeriod"]

    def test_missing_summary(self):
        with pytest.raises(NotFound):
            extract_operation(_operation(summary=None), "account", CONFIG)

    def test_missing_path(self):
        with pytest.raises(NotFound):
            extract_operation(_operation(path=None), "account", CONFIG)

    def test_blank_method(self):
        with pytest.raises(EmptyContent):
            extract_operation(_operation(method="  "), "account", CONFIG)

    def test_invalid_method(self):
        with pytest.raises(InvalidMethod):
            extract_operation(_operation(method="FETCH"), "account", CONFIG)


class TestOperationSchemas:
    def test_request_body_reference(self):
        op = extract_operation(_operation(method="POST", body=REQUEST_BODY), "account", CONFIG)
        assert op.request_schema == ReferenceType(target="#/components/schemas/account")
        assert op.to_openapi()["requestBody"] == {
            "content": {"application/json": {"schema": {"$ref": "#/components/schemas/account"}}}
        }

    def test_no_request_body(self):
        op = extract_operation(_operation(), "account", CONFIG)
        assert op.request_schema is None
        assert "requestBody" not in op.to_openapi()

    def test_first_response_link_fills_both_entries(self):
        op = extract_operation(_operation(body=RESPONSES), "account", CONFIG)
        assert op.response_schema == ReferenceType(target="#/components/schemas/nsError")
        assert op.error_schema == ReferenceType(target="#/components/schemas/nsError")
        assert op.responses == {
            "200": {
                "description": "Successful response",
                "content": {"application/json": {"schema": {"$ref": "#/components/schemas/nsError"}}},
            },
            "default": {
                "description": "Error response",
                "content": {"application/json": {"schema": {"$ref": "#/components/schemas/nsError"}}},
            },
        }

    def test_no_responses_section(self):
        op = extract_operation(_operation(), "account", CONFIG)
        assert op.responses == {}

    def test_split_response_selectors(self):
        selectors = CONFIG.selectors.model_copy(update={
            "response_ref": ".swagger-responses .swagger-response-success .json-schema-ref",
            "error_ref": ".swagger-responses .swagger-response-error .json-schema-ref",
        })
        config = CONFIG.model_copy(update={"selectors": selectors})
        op = extract_operation(_operation(body=SPLIT_RESPONSES), "account", config)
        assert op.response_schema == ReferenceType(target="#/components/schemas/account-collection")
        assert op.error_schema == ReferenceType(target="#/components/schemas/nsError")

    def test_error_only_with_split_selectors(self):
        selectors = CONFIG.selectors.model_copy(update={
            "response_ref": ".swagger-response-success .json-schema-ref",
            "error_ref": ".swagger-response-error .json-schema-ref",
        })
        config = CONFIG.model_copy(update={"selectors": selectors})
        body = '<section class="swagger-responses"><div class="swagger-response-error"><a class="json-schema-ref" href="#/definitions/nsError">e</a></div></section>'
        op = extract_operation(_operation(body=body), "account", config)
        assert list(op.responses) == ["default"]


class TestSchemaReference:
    def test_link_without_href(self):
        scope = BeautifulSoup('<div><a class="json-schema-ref">x</a></div>', "html.parser")
        assert schema_reference(scope, ".json-schema-ref", {}) is None

    def test_unmapped_target_passes_through(self):
        scope = BeautifulSoup('<div><a class="json-schema-ref" href="#/x/y">x</a></div>', "html.parser")
        assert schema_reference(scope, ".json-schema-ref", {}) == ReferenceType(target="#/x/y")
