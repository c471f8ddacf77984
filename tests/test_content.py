"""Tests for DLC and post-game filtering."""

from digiroll.core.models import Creature, Tier
from digiroll.randomizer.content import (
    filter_by_content,
    is_content_allowed,
    is_dlc,
    is_post_game,
)


def _creature(number: str, **kwargs) -> Creature:
    return Creature(number=number, name=f"Mon{number}", generation=Tier.MEGA, **kwargs)


class TestContentFlags:
    def test_dlc_by_number(self):
        assert is_dlc(_creature("458"))
        assert is_dlc(_creature("473"))
        assert not is_dlc(_creature("457"))
        assert not is_dlc(_creature("474"))

    def test_dlc_by_flag(self):
        assert is_dlc(_creature("100", is_dlc=True))

    def test_post_game(self):
        assert is_post_game(_creature("474"))
        assert is_post_game(_creature("475"))
        assert is_post_game(_creature("200", is_post_game=True))
        assert not is_post_game(_creature("473"))


class TestFilterByContent:
    """Tests for the content filter."""

    def test_default_keeps_everything(self):
        creatures = [_creature("100"), _creature("460"), _creature("474")]
        assert filter_by_content(creatures) == creatures

    def test_excludes_dlc(self):
        creatures = [_creature("100"), _creature("460"), _creature("474")]
        result = filter_by_content(creatures, include_dlc=False)
        assert [c.number for c in result] == ["100", "474"]

    def test_excludes_post_game(self):
        creatures = [_creature("100"), _creature("460"), _creature("474")]
        result = filter_by_content(creatures, include_post_game=False)
        assert [c.number for c in result] == ["100", "460"]

    def test_is_content_allowed_both_off(self):
        assert is_content_allowed(_creature("100"), False, False)
        assert not is_content_allowed(_creature("465"), False, False)
