import pytest

from chipeight.sprites import FONT_SET, SPRITE_BYTES, font_sprite


def test_zero_sprite_matches_font_table():
    assert font_sprite(0x0) == (0xF0, 0x90, 0x90, 0x90, 0xF0)


def test_f_sprite_matches_font_table():
    assert font_sprite(0xF) == (0xF0, 0x80, 0xF0, 0x80, 0x80)


@pytest.mark.parametrize("character", range(16))
def test_every_digit_has_five_bytes(character):
    sprite = font_sprite(character)
    assert len(sprite) == SPRITE_BYTES
    assert all(0 <= b <= 0xFF for b in sprite)


def test_font_covers_all_hex_digits():
    assert sorted(FONT_SET) == list(range(16))
    for character in range(16):
        assert tuple(font_sprite(character)) == tuple(FONT_SET[character])


def test_sprites_are_distinct():
    sprites = {font_sprite(c) for c in range(16)}
    assert len(sprites) == 16


@pytest.mark.parametrize("character", [-1, 0x10, 0xFF])
def test_unknown_character_raises(character):
    with pytest.raises(ValueError):
        font_sprite(character)