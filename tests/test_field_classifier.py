import pytest

from reqlab.fields import (
    DETECTORS,
    classify,
    classify_form,
    classify_query,
    extract_body_mappings,
    extract_fields,
)


@pytest.mark.parametrize(
    "value, expected",
    [
        ("true", "boolean"),
        ("FALSE", "boolean"),
        (True, "boolean"),
        (False, "boolean"),
        (42, "number"),
        (-3.5, "number"),
        ("-12.75", "number"),
        ("1234567", "number"),          # number is checked before phone
        ("abc@def.com", "email"),
        ("https://example.com/a?b=c", "url"),
        ("HTTP://EXAMPLE.COM", "url"),
        ("ftp://files.example.com/x.zip", "ftp_url"),
        ("+1 (555) 123-4567", "phone"),
        ("555-1234", "phone"),
        ("USD", "currency"),
        ("ABC", "currency"),            # any 3 uppercase letters
        ("2024-01-05", "date_yyyy_mm_dd"),
        ("pikachu", "string"),
        ("", "string"),
        (None, "string"),
        ({"a": 1}, "string"),
        ([1, 2], "string"),
        ("a @b.com", "string"),
        ("usd", "string"),
    ],
)
def test_classify(value, expected):
    assert classify(value) == expected


def test_detector_order_is_fixed():
    assert [tag for tag, _ in DETECTORS] == [
        "boolean",
        "number",
        "email",
        "url",
        "ftp_url",
        "phone",
        "currency",
        "date_yyyy_mm_dd",
    ]


def test_extract_fields_nested_paths():
    assert extract_fields({"a": {"b": [1, "x@y.com"]}}) == {
        "a.b[0]": "number",
        "a.b[1]": "email",
    }


def test_extract_fields_top_level_array_and_nulls():
    out = extract_fields([{"id": 7, "tags": ["EUR"]}, None])
    assert out == {"[0].id": "number", "[0].tags[0]": "currency", "[1]": "string"}


def test_extract_fields_do_not_test_override():
    body = {"id": "8f14e45f", "user": {"email": "ash@kanto.org"}}
    out = extract_fields(body, do_not_test={"id"})
    assert out == {"id": "do-not-test", "user.email": "email"}


def test_extract_fields_scalar_root_and_empty_containers():
    assert extract_fields("hello") == {}
    assert extract_fields({"a": {}, "b": []}) == {}


def test_classify_form_prefixes_keys():
    out = classify_form([("email", "misty@cerulean.gym"), ("age", "12"), ("email", "x")])
    assert out == {"form.email": "string", "form.age": "number"}


def test_classify_query_last_duplicate_wins():
    out = classify_query("http://x/api?limit=3&offset=0&tag=a@b.co&tag=true")
    assert out == {"limit": "number", "offset": "number", "tag": "boolean"}


def test_classify_query_without_query_or_with_bad_url():
    assert classify_query("http://x/api") == {}
    assert classify_query("") == {}
    assert classify_query("http://[::1") == {}


def test_body_mappings_json_string():
    assert extract_body_mappings('{"level":5}', {"Content-Type": "application/json"}) == {
        "level": "number"
    }


def test_body_mappings_form():
    headers = {"content-type": "application/x-www-form-urlencoded"}
    assert extract_body_mappings("a=1&b=USD", headers) == {"form.a": "number", "form.b": "currency"}
    assert extract_body_mappings("a=1\nb=hello", headers) == {"form.a": "number", "form.b": "string"}


def test_body_mappings_unparsable_or_scalar_is_empty():
    assert extract_body_mappings("{not json", {}) == {}
    assert extract_body_mappings("5", {}) == {}
    assert extract_body_mappings(None, {}) == {}


def test_body_mappings_accepts_decoded_json():
    assert extract_body_mappings({"ok": True}, {}) == {"ok": "boolean"}


def test_custom_classifier_is_used():
    class Everything:
        def classify(self, value):
            return "string"

    assert extract_fields({"n": 1}, classifier=Everything()) == {"n": "string"}
    assert classify_query("http://x?n=1", classifier=Everything()) == {"n": "string"}


def test_phone_separators_are_literal_spaces():
    assert classify("555 1234") == "phone"
    assert classify("555\t1234") == "string"
    assert classify("555\n1234") == "string"


def test_extract_fields_nested_do_not_test_path():
    out = extract_fields({"user": {"id": "x", "name": "y"}}, do_not_test={"user.id"})
    assert out == {"user.id": "do-not-test", "user.name": "string"}


def test_extract_fields_deeper_than_recursion_limit():
    tree = 1
    for _ in range(5000):
        tree = {"a": tree}
    out = extract_fields(tree)
    assert out == {".".join(["a"] * 5000): "number"}


def test_body_mappings_deeply_nested_json_never_raises():
    assert extract_body_mappings("[" * 100000 + "]" * 100000, {}) == {}
    # may or may not decode depending on the interpreter; either way no exception
    out = extract_body_mappings('{"a":' * 990 + "1" + "}" * 990, {})
    assert out in ({}, {".".join(["a"] * 990): "number"})
