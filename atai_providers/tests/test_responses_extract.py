from __future__ import annotations

from atai_providers.openai.responses_extract import extract_error_message, extract_structured_text


def test_output_text_string_and_list():
    assert extract_structured_text({"output_text": " Hi "}) == "Hi"  # nosec B101
    assert extract_structured_text({"output_text": ["A", "B"]}) == "A\nB"  # nosec B101


def test_output_array_parts_are_joined():
    payload = {
        "output": [
            {"type": "reasoning", "content": []},
            {"type": "message", "content": [{"type": "output_text", "text": "A"}, {"type": "output_text", "text": "B"}]},
        ]
    }
    assert extract_structured_text(payload) == "A\nB"  # nosec B101


def test_priority_order_first_non_empty_wins():
    payload = {"output_text": "", "output": [], "result": "r", "message": {"content": "m"}, "content": "c"}
    assert extract_structured_text(payload) == "r"  # nosec B101
    assert extract_structured_text({"output_text": "x", "content": "y"}) == "x"  # nosec B101


def test_result_containers_are_serialized():
    assert extract_structured_text({"result": {"k": 1}}) == '{"k": 1}'  # nosec B101
    assert extract_structured_text({"result": 42}) == "42"  # nosec B101


def test_message_and_content_fallbacks():
    assert extract_structured_text({"message": {"content": [{"text": "m1"}, "m2"]}}) == "m1\nm2"  # nosec B101
    assert extract_structured_text({"content": ["a", {"text": "b"}, {"content": "c"}]}) == "a\nb\nc"  # nosec B101


def test_nothing_to_extract():
    assert extract_structured_text({}) == ""  # nosec B101
    assert extract_structured_text(None) == ""  # nosec B101
    assert extract_structured_text({"output": [{"content": [{"type": "image"}]}]}) == ""  # nosec B101


def test_extract_error_message_shapes():
    assert extract_error_message({"error": {"message": "bad"}}) == "bad"  # nosec B101
    assert extract_error_message({"error": "oops"}) == "oops"  # nosec B101
    assert extract_error_message({"message": "top"}) == "top"  # nosec B101
    assert extract_error_message({"error": None, "output_text": "x"}) is None  # nosec B101
