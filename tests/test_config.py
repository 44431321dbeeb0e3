import pytest

from techradar.config import RadarConfig, get_default_config, set_default_config
from techradar.model import Assessment, Item, Quadrant, UnknownEnumValue


def test_inactive_item_uses_inactive_color_unless_print_layout():
    tech = Item(name='Perl', active=False, assessment=Assessment.HOLD, quadrant=Quadrant.SECOND)
    config = RadarConfig()

    assert config.color(tech) == config.colors.inactive

    config.print_layout = True
    assert config.color(tech) == config.colors.tech.hold


def test_active_item_uses_assessment_color():
    config = RadarConfig()
    tech = Item(name='Kotlin', active=True, assessment=Assessment.TRIAL, quadrant=Quadrant.SECOND)

    assert config.color(tech) == config.colors.tech.trial


def test_quadrant_titles_map_to_screen_corners():
    config = RadarConfig()

    assert config.quadrant_title(Quadrant.FIRST) == config.names.right_top
    assert config.quadrant_title(Quadrant.SECOND) == config.names.left_top
    assert config.quadrant_title(Quadrant.THIRD) == config.names.left_bottom
    assert config.quadrant_title(Quadrant.FOURTH) == config.names.right_bottom

    config.set_quadrant_title(Quadrant.THIRD, 'Platforms')
    assert config.names.left_bottom == 'Platforms'

    with pytest.raises(UnknownEnumValue):
        config.quadrant_title('fifth')


def test_default_config_is_copied():
    original = get_default_config()
    try:
        changed = get_default_config()
        changed.title = 'Changed'
        assert get_default_config().title == original.title

        set_default_config(changed)
        changed.title = 'Mutated after set'
        assert get_default_config().title == 'Changed'
    finally:
        set_default_config(original)
