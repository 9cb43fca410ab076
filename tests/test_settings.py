# tests/test_settings.py

import pytest

from core.settings import ConverterSettings


def test_defaults():
    s = ConverterSettings()
    assert (s.default_input, s.default_source, s.default_target) == ("1", "mil", "mm")
    assert (s.result_places, s.factor_places, s.shortcut_count) == (8, 6, 8)


@pytest.mark.parametrize("field", ["result_places", "factor_places", "shortcut_count"])
def test_negative_counts_rejected(field):
    with pytest.raises(ValueError, match=field):
        ConverterSettings(**{field: -1})
