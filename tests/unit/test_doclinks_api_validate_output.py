"""Unit tests for doclinks.api.validate_output."""

import pytest

from doclinks.api._output_schemas import get_output_schema, register_output_schema
from doclinks.api._output_schemas.site import SiteUrlOutput
from doclinks.api.validate_output import validate_output


def make_func(module, name):
    def func():
        pass

    func.__module__ = module
    func.__name__ = name
    return func


def test_schema_lookup():
    assert get_output_schema("site", "url") is SiteUrlOutput
    assert get_output_schema("site", "missing") is None


def test_duplicate_registration_rejected():
    with pytest.raises(ValueError, match="already registered"):
        register_output_schema("site", "url", SiteUrlOutput)


def test_validate_output_accepts_matching_output():
    func = make_func("doclinks.api.site.cmd_url", "cmd_url")
    output = {"errors": [], "warnings": [], "url": "https://example.com"}
    assert validate_output(func, output) == output


def test_validate_output_rejects_missing_field():
    func = make_func("doclinks.api.site.cmd_url", "cmd_url")
    with pytest.raises(ValueError, match="Output validation failed for site.url"):
        validate_output(func, {"errors": [], "warnings": []})


def test_validate_output_ignores_foreign_functions():
    func = make_func("somewhere.else", "cmd_url")
    assert validate_output(func, {"anything": 1}) == {"anything": 1}
