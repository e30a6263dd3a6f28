import dataclasses

import pytest

from plumlabs.tokens import Token, TokenType


@pytest.mark.parametrize("member", list(TokenType))
def test_value_lookup_round_trips(member):
    assert TokenType(member.value) is member


def test_token_types_compare_equal_to_their_names():
    header = TokenType("HEADER")
    code_block = TokenType("CODE_BLOCK")
    assert header is TokenType.HEADER
    assert header == "HEADER"
    assert code_block is TokenType.CODE_BLOCK
    assert code_block == "CODE_BLOCK"


def test_unmatched_kind_has_empty_value():
    assert TokenType("") is TokenType.NONE


def test_unknown_value_is_rejected():
    with pytest.raises(ValueError):
        TokenType("NOPE")


def test_tokens_compare_by_value():
    first = Token(TokenType.TEXT, "hi")
    second = Token(TokenType.TEXT, "hi")
    assert first == second
    assert hash(first) == hash(second)
    assert first != Token(TokenType.TEXT, "ho")
    assert first != Token(TokenType.HEADER, "hi")


def test_token_is_immutable():
    token = Token(TokenType.TEXT, "hi")
    with pytest.raises(dataclasses.FrozenInstanceError):
        token.literal = "other"
    assert token.literal == "hi"
    assert token == Token(TokenType.TEXT, "hi")