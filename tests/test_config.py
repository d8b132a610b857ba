import pytest

from config import AppConfig, parse_args


def test_no_arguments_uses_defaults():
    config = parse_args([])
    assert config.places_path is None
    assert config.states_path is None
    assert config.log_level == 'WARNING'
    assert config.source_description() == 'default file(s)'


def test_caller_supplied_defaults():
    defaults = AppConfig(places_path='data/named-places.txt', states_path='data/states.txt')
    config = parse_args([], defaults)
    assert config.places_path == 'data/named-places.txt'
    assert config.states_path == 'data/states.txt'
    assert config.source_description() == 'default file(s)'


def test_places_only():
    defaults = AppConfig(states_path='data/states.txt')
    config = parse_args(['places.txt'], defaults)
    assert config.places_path == 'places.txt'
    assert config.states_path == 'data/states.txt'
    assert config.source_description() == 'specified file for places'


def test_both_files_and_log_level():
    config = parse_args(['places.txt', 'states.txt', '--log-level', 'DEBUG'])
    assert config.places_path == 'places.txt'
    assert config.states_path == 'states.txt'
    assert config.log_level == 'DEBUG'
    assert config.source_description() == 'specified files'


def test_bad_log_level_exits():
    with pytest.raises(SystemExit):
        parse_args(['--log-level', 'LOUD'])
