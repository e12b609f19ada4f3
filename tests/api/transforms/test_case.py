"""Testes para api/transforms/case.

Cobre regra de siglas, dígitos, chaves não-identificadoras, idempotência,
par inverso e recursão profunda vs rasa.
"""

from __future__ import annotations

import datetime

import pytest

from api.transforms.case import (
    camelcase,
    camelcase_keys,
    pascalcase,
    snakecase,
    snakecase_keys,
    to_camel_case,
    to_pascal_case,
    to_snake_case,
)
from utils.errors import TransformError


class TestSnakecase:
    """Conversão de uma chave para snake_case."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("myKey", "my_key"),
            ("recipientId", "recipient_id"),
            ("URLId", "url_id"),
            ("userID", "user_id"),
            ("HTTPServer", "http_server"),
            ("has2fa", "has_2fa"),
            ("image1024", "image_1024"),
            ("already_snake", "already_snake"),
            ("text", "text"),
        ],
    )
    def test_acronym_and_digit_rules(self, key: str, expected: str) -> None:
        assert snakecase(key) == expected

    @pytest.mark.parametrize("key", ["123", "x-request-id", "a.b", "_private", ""])
    def test_non_identifier_keys_are_untouched(self, key: str) -> None:
        assert snakecase(key) == key

    def test_idempotent(self) -> None:
        for key in ("URLId", "has2fa", "quickReplies", "imageUrl"):
            once = snakecase(key)
            assert snakecase(once) == once


class TestCamelcase:
    """Conversão de uma chave para camelCase."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("recipient_id", "recipientId"),
            ("message_id", "messageId"),
            ("url_id", "urlId"),
            ("has_2fa", "has2fa"),
            ("image_1024", "image1024"),
            ("first_name", "firstName"),
            ("alreadyCamel", "alreadyCamel"),
        ],
    )
    def test_conversion(self, key: str, expected: str) -> None:
        assert camelcase(key) == expected

    @pytest.mark.parametrize("key", ["42", "content-type", "_id", "a.b"])
    def test_non_identifier_keys_are_untouched(self, key: str) -> None:
        assert camelcase(key) == key

    @pytest.mark.parametrize("key", ["url_id", "has_2fa", "profile_pic", "recipient_id"])
    def test_inverse_of_snakecase(self, key: str) -> None:
        assert snakecase(camelcase(key)) == key


class TestPascalcase:
    """Conversão de uma chave para PascalCase (wire da Twilio)."""

    @pytest.mark.parametrize(
        ("key", "expected"),
        [
            ("to", "To"),
            ("from", "From"),
            ("statusCallback", "StatusCallback"),
            ("media_url", "MediaUrl"),
            ("mediaUrl", "MediaUrl"),
            ("messagingServiceSid", "MessagingServiceSid"),
        ],
    )
    def test_conversion(self, key: str, expected: str) -> None:
        assert pascalcase(key) == expected


class TestKeyMapping:
    """Conversão de valores JSON inteiros."""

    def test_deep_conversion_preserves_values_and_list_order(self) -> None:
        value = {
            "recipientId": "USER_ID",
            "quickReplies": [
                {"contentType": "text", "title": "Sim", "payload": "YES"},
                {"contentType": "text", "title": "Não", "payload": "NO"},
            ],
            "camelValue": "someCamelString",
        }

        result = to_snake_case(value)

        assert result == {
            "recipient_id": "USER_ID",
            "quick_replies": [
                {"content_type": "text", "title": "Sim", "payload": "YES"},
                {"content_type": "text", "title": "Não", "payload": "NO"},
            ],
            "camel_value": "someCamelString",
        }

    def test_shallow_conversion_keeps_nested_keys(self) -> None:
        value = {"outerKey": {"innerKey": 1}}

        assert snakecase_keys(value) == {"outer_key": {"innerKey": 1}}
        assert camelcase_keys({"outer_key": {"inner_key": 1}}) == {"outerKey": {"inner_key": 1}}

    def test_scalars_and_none_pass_through(self) -> None:
        for value in (None, True, 0, 1.5, "camelCase"):
            assert to_camel_case(value) == value

    def test_top_level_list(self) -> None:
        assert to_camel_case([{"message_id": "m1"}, 42]) == [{"messageId": "m1"}, 42]

    def test_numeric_keys_survive_round_trip(self) -> None:
        value = {"123": {"some_key": True}}
        assert to_camel_case(value) == {"123": {"someKey": True}}

    def test_deep_idempotence(self) -> None:
        value = {"userID": {"HTTPServer": [{"image1024": None}]}}
        once = to_snake_case(value)
        assert to_snake_case(once) == once

    def test_camel_case_idempotence(self) -> None:
        value = {"recipient_id": {"quick_replies": [{"content_type": "text"}]}}
        once = to_camel_case(value)
        assert to_camel_case(once) == once

    def test_snake_then_camel_restores_nested_mapping(self) -> None:
        value = {
            "recipientId": "1",
            "message": {
                "quickReplies": [{"contentType": "text", "imageUrl": None}],
                "123": {"isReusable": True},
            },
            "tags": ["firstName", 2],
        }
        assert to_camel_case(to_snake_case(value)) == value

    def test_pascal_case_body(self) -> None:
        body = {"to": "+15005550006", "statusCallback": "https://x", "mediaUrl": ["a", "b"]}
        assert to_pascal_case(body) == {
            "To": "+15005550006",
            "StatusCallback": "https://x",
            "MediaUrl": ["a", "b"],
        }

    def test_non_json_value_raises_transform_error(self) -> None:
        with pytest.raises(TransformError):
            to_snake_case({"createdAt": datetime.date(2024, 1, 1)})

    def test_non_string_key_raises_transform_error(self) -> None:
        with pytest.raises(TransformError):
            to_camel_case({1: "x"})

    def test_transform_error_is_type_error(self) -> None:
        assert issubclass(TransformError, TypeError)
