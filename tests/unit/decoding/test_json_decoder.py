from __future__ import annotations

import json
from typing import Annotated, TypedDict

import pytest
from pydantic import BaseModel
from result import Ok, is_err, is_ok

from pawfetch.decoding import DecodingError, JsonPayloadDecoder, KeyDecodingStrategy, camel_to_snake
from pawfetch.pets.models import Cat, Dog


class DogRecord(TypedDict):
    id: int
    breed: str


class Owner(BaseModel):
    first_name: str
    pet_names: list[str]


def test_decode_list_of_models() -> None:
    decoder = JsonPayloadDecoder()

    result = decoder.decode(b'[{"id":1,"breed":"Husky"}]', list[Dog])

    assert result == Ok([Dog(id=1, breed="Husky")])


def test_decode_is_structurally_equal_to_source_json() -> None:
    payload = b'[{"id": 1, "breed": "Husky"}, {"id": 2, "breed": "Beagle"}]'
    decoder = JsonPayloadDecoder()

    result = decoder.decode(payload, list[DogRecord])

    assert is_ok(result)
    assert result.ok_value == json.loads(payload)


def test_decode_serves_every_target_type_with_one_instance() -> None:
    decoder = JsonPayloadDecoder()

    assert decoder.decode(b"42", int) == Ok(42)
    assert decoder.decode(b'{"a": [1, 2]}', dict[str, list[int]]) == Ok({"a": [1, 2]})
    assert decoder.decode(b'{"id": 3, "breed": "Pug"}', Dog) == Ok(Dog(id=3, breed="Pug"))


def test_decode_invalid_json_returns_decoding_error() -> None:
    decoder = JsonPayloadDecoder()

    result = decoder.decode(b"not json", list[Dog])

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, DecodingError)
    assert "Invalid JSON payload" in error.message
    assert "Dog" in error.target


def test_decode_invalid_utf8_returns_decoding_error() -> None:
    decoder = JsonPayloadDecoder()

    result = decoder.decode(b"\x80abc", list[Dog])

    assert is_err(result)
    assert isinstance(result.err_value, DecodingError)


@pytest.mark.parametrize(
    "payload",
    [
        b'[{"id": "abc", "breed": "Husky"}]',
        b'[{"id": 1}]',
        b'{"id": 1, "breed": "Husky"}',
        b"null",
    ],
)
def test_decode_mismatched_shape_returns_decoding_error(payload: bytes) -> None:
    decoder = JsonPayloadDecoder()

    result = decoder.decode(payload, list[Dog])

    assert is_err(result)
    error = result.err_value
    assert isinstance(error, DecodingError)
    assert error.message.startswith("Invalid ")


def test_decode_model_target_reports_class_name() -> None:
    decoder = JsonPayloadDecoder()

    result = decoder.decode(b"[]", Dog)

    assert is_err(result)
    assert result.err_value.target == "Dog"


def test_camel_case_strategy_rewrites_nested_keys() -> None:
    payload = json.dumps(
        [
            {
                "identifier": "c1",
                "breed": "Siamese",
                "size": {"heightInCentimeters": 25, "weightInKilograms": 4, "description": "Small"},
            }
        ]
    ).encode()

    camel = JsonPayloadDecoder(KeyDecodingStrategy.CONVERT_FROM_CAMEL_CASE).decode(payload, list[Cat])
    default = JsonPayloadDecoder().decode(payload, list[Cat])

    assert is_ok(camel)
    assert camel.ok_value[0].size.height_in_centimeters == 25
    assert is_err(default)


def test_camel_case_strategy_rewrites_keys_inside_lists() -> None:
    decoder = JsonPayloadDecoder(KeyDecodingStrategy.CONVERT_FROM_CAMEL_CASE)

    result = decoder.decode(b'{"firstName": "Ana", "petNames": ["Rex", "Tom"]}', Owner)

    assert result == Ok(Owner(first_name="Ana", pet_names=["Rex", "Tom"]))


def test_strict_decoder_refuses_coercion() -> None:
    payload = b'[{"id": "1", "breed": "Husky"}]'

    lax = JsonPayloadDecoder().decode(payload, list[Dog])
    strict = JsonPayloadDecoder(strict=True).decode(payload, list[Dog])

    assert lax == Ok([Dog(id=1, breed="Husky")])
    assert is_err(strict)


@pytest.mark.parametrize(
    ("key", "expected"),
    [
        ("heightInCentimeters", "height_in_centimeters"),
        ("canFly", "can_fly"),
        ("id", "id"),
        ("URLPath", "url_path"),
        ("already_snake", "already_snake"),
        ("size2Label", "size2_label"),
    ],
)
def test_camel_to_snake(key: str, expected: str) -> None:
    assert camel_to_snake(key) == expected


@pytest.mark.parametrize("strategy", list(KeyDecodingStrategy))
def test_deeply_nested_payload_is_decoding_error(strategy: KeyDecodingStrategy) -> None:
    decoder = JsonPayloadDecoder(strategy)

    result = decoder.decode(b"[" * 100_000, list[Dog])

    assert is_err(result)
    assert isinstance(result.err_value, DecodingError)


def test_unbuildable_target_is_decoding_error() -> None:
    class Opaque:
        pass

    result = JsonPayloadDecoder().decode(b"{}", Opaque)

    assert is_err(result)
    assert result.err_value.target == "Opaque"
    assert "Unsupported target type" in result.err_value.message


def test_unhashable_target_is_decoding_error() -> None:
    result = JsonPayloadDecoder().decode(b"1", Annotated[int, {"unit": "kg"}])

    assert is_err(result)
    assert "Unsupported target type" in result.err_value.message
