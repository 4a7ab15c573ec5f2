import os

import pytest

from volslice import configfile, ConfigurationError, compute_slice_range
from volslice.settings import SliceRangeSettings, default_value


def test_defaults(slice_settings):
    assert slice_settings.zero_direction == 'error'
    assert slice_settings.report_range is False
    assert not slice_settings.on_disk()
    assert default_value('zero_direction') == 'error'
    assert default_value('report_range') is False


def test_unknown_setting(slice_settings):
    with pytest.raises(AttributeError):
        slice_settings.color
    with pytest.raises(AttributeError):
        slice_settings.color = 'red'


def test_saved_settings_are_read_back(config_dir, recording_logger):
    s = SliceRangeSettings(config_dir, logger=recording_logger)
    s.zero_direction = 'identity'
    s.report_range = True
    assert os.path.exists(s.filename)
    assert os.path.basename(s.filename) == 'Slice Range-1'

    s2 = SliceRangeSettings(config_dir, logger=recording_logger)
    assert s2.on_disk()
    assert s2.zero_direction == 'identity'
    assert s2.report_range is True
    assert recording_logger.messages == []


def test_default_values_not_written(slice_settings):
    slice_settings.report_range = True
    slice_settings.report_range = False
    with open(slice_settings.filename, encoding='utf-8') as f:
        assert 'report_range' not in f.read()


def test_illegal_zero_direction(slice_settings):
    with pytest.raises(ConfigurationError):
        slice_settings.zero_direction = 'sideways'
    assert slice_settings.zero_direction == 'error'


def test_invalid_value_on_disk(config_dir, recording_logger):
    os.makedirs(config_dir)
    with open(os.path.join(config_dir, 'Slice Range-1'), 'w', encoding='utf-8') as f:
        f.write('[DEFAULT]\nzero_direction = sideways\nreport_range = yes\n')
    s = SliceRangeSettings(config_dir, logger=recording_logger)
    assert s.zero_direction == 'error'
    assert s.report_range is False
    levels = set(level for level, msg in recording_logger.messages)
    assert levels == {'warning'}
    assert 'zero_direction' in recording_logger.messages[0][1]
    assert 'report_range' in recording_logger.messages[1][1]


def test_only_use_defaults(monkeypatch, config_dir):
    monkeypatch.setattr(configfile, 'only_use_defaults', True)
    s = SliceRangeSettings(config_dir)
    assert s.zero_direction == 'error'
    assert s.filename is None
    with pytest.raises(ConfigurationError):
        s.zero_direction = 'identity'
    assert not os.path.exists(config_dir)


def test_settings_used_by_slice_range(unit_cube, slice_settings):
    slice_settings.zero_direction = 'identity'
    r = compute_slice_range(unit_cube, (0, 0, 0), (0.25, 0, 0), settings=slice_settings)
    assert r.as_tuple() == pytest.approx((0, 1, 0.25))


def test_shared_settings(monkeypatch, config_dir, tmp_path):
    from volslice import settings
    monkeypatch.setattr(settings, '_settings', None)
    monkeypatch.setattr(settings, '_settings_dir', None)
    s = settings.get_settings(config_dir)
    assert settings.get_settings() is s
    assert settings.get_settings(config_dir) is s
    assert os.path.dirname(s.filename) == config_dir
    with pytest.raises(ConfigurationError):
        settings.get_settings(str(tmp_path / "other"))


def test_error_classes():
    from volslice import ZeroDirectionError, UserError, NotABug
    assert issubclass(ZeroDirectionError, ValueError)
    assert issubclass(ConfigurationError, UserError)
    assert issubclass(UserError, NotABug)
