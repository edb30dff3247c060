"""Testes para reescrita recursiva de chaves (to_wire_case / to_idiomatic_case)."""

from __future__ import annotations

import copy
import io

from utils.case import (
    UploadFile,
    camelcase_keys,
    is_opaque,
    pascalcase_keys_deep,
    snakecase_keys,
    to_idiomatic_case,
    to_wire_case,
)


class TestToWireCase:
    """Testes para to_wire_case."""

    def test_quick_replies_scenario(self) -> None:
        """Chaves aninhadas em listas também são convertidas."""
        payload = {"quickReplies": [{"contentType": "text", "title": "Red"}]}
        assert to_wire_case(payload) == {
            "quick_replies": [{"content_type": "text", "title": "Red"}]
        }

    def test_does_not_mutate_input(self) -> None:
        payload = {"replyMarkup": {"inlineKeyboard": [[{"callbackData": "x"}]]}}
        snapshot = copy.deepcopy(payload)
        to_wire_case(payload)
        assert payload == snapshot

    def test_primitives_keep_identity(self) -> None:
        """Números, booleanos e None não são convertidos em string."""
        result = to_wire_case({"chatId": 1, "disableNotification": False, "replyTo": None, "ratio": 1.5})
        assert result == {"chat_id": 1, "disable_notification": False, "reply_to": None, "ratio": 1.5}
        assert result["disable_notification"] is False
        assert result["reply_to"] is None

    def test_values_are_not_rewritten(self) -> None:
        assert to_wire_case({"parseMode": "MarkdownV2"}) == {"parse_mode": "MarkdownV2"}

    def test_top_level_primitives_and_lists(self) -> None:
        assert to_wire_case("fooBar") == "fooBar"
        assert to_wire_case(42) == 42
        assert to_wire_case(None) is None
        assert to_wire_case([{"fooBar": 1}, 2]) == [{"foo_bar": 1}, 2]

    def test_tuples_are_traversed(self) -> None:
        assert to_wire_case(({"fooBar": 1},)) == ({"foo_bar": 1},)

    def test_preserves_sequence_order(self) -> None:
        items = [{"itemId": index} for index in range(20)]
        result = to_wire_case(items)
        assert [item["item_id"] for item in result] == list(range(20))

    def test_non_string_keys_pass_unchanged(self) -> None:
        assert to_wire_case({1: {"fooBar": True}}) == {1: {"foo_bar": True}}


class TestToIdiomaticCase:
    """Testes para to_idiomatic_case."""

    def test_telegram_message_scenario(self) -> None:
        response = {"message_id": 1, "chat": {"first_name": "a"}}
        assert to_idiomatic_case(response) == {"messageId": 1, "chat": {"firstName": "a"}}

    def test_round_trip(self) -> None:
        value = {
            "recipientId": "123",
            "message": {
                "quickReplies": [{"contentType": "text", "imageUrl": "https://x"}],
                "attachment": {"type": "image", "payload": {"isReusable": True}},
            },
            "tags": ["a", "b"],
        }
        assert to_idiomatic_case(to_wire_case(value)) == value

    def test_idempotent(self) -> None:
        value = {"messageId": 1, "from": {"isBot": False}, "entities": [{"type": "bold"}]}
        once = to_idiomatic_case(value)
        assert to_idiomatic_case(once) == once
        wire = to_wire_case(value)
        assert to_wire_case(wire) == wire


class TestOpaquePayloads:
    """Payloads binários nunca são percorridos."""

    def test_bytes_keep_identity(self) -> None:
        buffer = b"\x89PNG..."
        result = to_wire_case({"message": {"fileData": buffer}})
        assert result["message"]["file_data"] is buffer

    def test_stream_keeps_identity(self) -> None:
        stream = io.BytesIO(b"content")
        assert to_idiomatic_case({"file_data": stream})["fileData"] is stream

    def test_upload_file_keeps_identity(self) -> None:
        upload = UploadFile(b"abc", filename="a.png", content_type="image/png")
        assert to_wire_case([upload])[0] is upload

    def test_is_opaque(self) -> None:
        assert is_opaque(b"x")
        assert is_opaque(bytearray(b"x"))
        assert is_opaque(memoryview(b"x"))
        assert is_opaque(io.BytesIO())
        assert not is_opaque({"a": 1})
        assert not is_opaque("text")


class TestShallowConversion:
    """deep=False converte apenas o primeiro nível."""

    def test_snakecase_keys_shallow(self) -> None:
        assert snakecase_keys({"myObj": {"myKey": "value"}}) == {"my_obj": {"myKey": "value"}}

    def test_snakecase_keys_deep(self) -> None:
        assert snakecase_keys({"myObj": {"myKey": "value"}}, deep=True) == {
            "my_obj": {"my_key": "value"}
        }

    def test_camelcase_keys_shallow(self) -> None:
        assert camelcase_keys({"my_obj": {"my_key": "value"}}) == {"myObj": {"my_key": "value"}}

    def test_pascalcase_keys_deep(self) -> None:
        keyboard = {"type": "keyboard", "buttons": [{"actionType": "reply", "bgColor": "#fff"}]}
        assert pascalcase_keys_deep(keyboard) == {
            "Type": "keyboard",
            "Buttons": [{"ActionType": "reply", "BgColor": "#fff"}],
        }
