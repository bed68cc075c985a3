"""Tests for hashing, ids, JSON helpers, payload validation and logging setup."""

import json
import logging
import re
import sys

import pytest
from hypothesis import given, strategies as st
from pythonjsonlogger import jsonlogger
from returns.result import Failure, Success

from tabular_input.core import PayloadError, Settings, configure_logging, create_container
from tabular_input.core.hash import Algorithm, create_hasher, hash_string
from tabular_input.core.id import is_element_id, new_script_key, new_widget_id
from tabular_input.core.json import (
    loads_json,
    safe_json_dumps,
    validate_json_depth,
    validate_json_size,
)
from tabular_input.core.validate import validate_payload


def test_hash_string_xxhash():
    result = hash_string("jQuery('#w0').multipleInput({});")
    assert len(result) == 16
    assert hash_string("jQuery('#w0').multipleInput({});") == result


def test_hash_string_md5():
    assert hash_string("test", Algorithm.MD5) == "098f6bcd4621d373cade4e832627b4f6"


def test_create_hasher_unknown():
    with pytest.raises(ValueError):
        create_hasher("crc32")


def test_new_widget_id():
    widget_id = new_widget_id()

    assert re.fullmatch(r"w_[0-9a-z]{26}", widget_id)
    assert is_element_id(widget_id)
    assert new_widget_id() != widget_id


def test_new_script_key_unique():
    keys = {new_script_key() for _ in range(50)}
    assert len(keys) == 50
    assert all(key.startswith("boot_") for key in keys)


@pytest.mark.parametrize("value", ["w0", "W0", "order-items", "a_b-C9"])
def test_element_id_accepted(value):
    assert is_element_id(value)


@pytest.mark.parametrize("value", ["", "0w", "w 0", "w0'); alert(1); //", "w.0", "w#0"])
def test_element_id_rejected(value):
    assert not is_element_id(value)


def test_safe_json_dumps_compact():
    assert safe_json_dumps({"a": [1, 2]}) == '{"a":[1,2]}'


def test_safe_json_dumps_big_int():
    """Integers outside 64-bit range still encode (orjson refuses them)."""
    assert json.loads(safe_json_dumps({"n": 2**70})) == {"n": 2**70}


def test_safe_json_dumps_max_int():
    assert safe_json_dumps({"max": sys.maxsize}) == f'{{"max":{sys.maxsize}}}'


def test_loads_json():
    assert loads_json('{"a": 1}') == {"a": 1}
    assert loads_json(b'{"a": "<\\/tr>"}') == {"a": "</tr>"}

    with pytest.raises(PayloadError):
        loads_json("{broken")


def test_validate_json_size():
    validate_json_size('{"test": "data"}', 1000)

    with pytest.raises(PayloadError):
        validate_json_size("x" * 2000, 1000)


def test_validate_json_depth():
    deep = {"level": 1}
    current = deep
    for i in range(25):
        current["nested"] = {"level": i + 2}
        current = current["nested"]

    validate_json_depth({"a": {"b": 1}}, max_depth=5)
    with pytest.raises(PayloadError):
        validate_json_depth(deep, max_depth=20)


def test_validate_payload_result():
    payload = {
        "id": "w0",
        "inputId": "items",
        "template": "",
        "preludeScripts": [],
        "deferredScripts": [],
        "max": 3,
        "min": 1,
        "attributes": {},
        "indexPlaceholder": "multiple_index_w0",
    }
    payload_json = safe_json_dumps(payload)

    assert validate_payload(payload, payload_json, 10_000, 20) == Success(None)

    missing = {k: v for k, v in payload.items() if k != "template"}
    result = validate_payload(missing, safe_json_dumps(missing), 10_000, 20)
    assert isinstance(result, Failure)
    assert "template" in result.failure().message

    inverted = {**payload, "max": 0}
    assert isinstance(validate_payload(inverted, payload_json, 10_000, 20), Failure)


@given(st.dictionaries(st.text(max_size=10), st.integers(min_value=-(2**63), max_value=2**63 - 1)))
def test_json_round_trip_property(data):
    """Property test: compact encoding decodes back to the same mapping."""
    assert loads_json(safe_json_dumps(data)) == data


@pytest.fixture
def restore_logging():
    yield
    configure_logging(Settings(log_level="DEBUG"))


def test_configure_logging_from_settings(restore_logging):
    package_logger = configure_logging(Settings(log_level="warning", json_logs=True))

    assert package_logger.name == "tabular_input"
    assert package_logger.level == logging.WARNING
    assert package_logger.propagate is False
    assert len(package_logger.handlers) == 1
    assert isinstance(package_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_configure_logging_replaces_handler(restore_logging):
    configure_logging(Settings(log_level="INFO"))
    package_logger = configure_logging(Settings(log_level="ERROR"))

    assert len(package_logger.handlers) == 1
    assert package_logger.level == logging.ERROR
    assert not isinstance(package_logger.handlers[0].formatter, jsonlogger.JsonFormatter)


def test_container_configures_logging(restore_logging):
    create_container(Settings(log_level="ERROR"))
    assert logging.getLogger("tabular_input").level == logging.ERROR
