import pytest
import yaml
from textloader.config import load_config, loader_options, validate_config
from textloader.exceptions import ArgumentError

def test_valid_config():
    config = {
        'data_file': 'datasets/train.tsv',
        'separator': ',',
        'label_column': 0,
        'cache': False
    }
    # Should not raise
    validate_config(config)

def test_missing_required_keys():
    config = {
        'separator': '\t',
        # 'data_file' missing
    }
    with pytest.raises(ValueError) as excinfo:
        validate_config(config)
    assert 'Missing required config keys' in str(excinfo.value)

def test_unknown_keys():
    with pytest.raises(ArgumentError) as excinfo:
        validate_config({'data_file': 'a.tsv', 'delimiter': ','})
    assert 'Unknown config keys' in str(excinfo.value)

@pytest.mark.parametrize('key, value', [
    ('separator', '::'),
    ('label_column', -1),
    ('weight_column', 'two'),
    ('name_column', True),
    ('cache', 'yes'),
])
def test_invalid_values(key, value):
    with pytest.raises(ArgumentError):
        validate_config({'data_file': 'a.tsv', key: value})

def test_load_config_resolves_relative_paths(tmp_path):
    config_path = tmp_path / 'config.yaml'
    config_path.write_text(yaml.safe_dump({
        'data_file': 'train.tsv',
        'label_map_file': 'labels.txt',
        'separator': '\t',
        'name_column': 1,
    }))
    config = load_config(str(config_path))
    assert config['data_file'] == str(tmp_path / 'train.tsv')
    assert config['label_map_file'] == str(tmp_path / 'labels.txt')
    options = loader_options(config)
    assert options['separator'] == '\t'
    assert options['name_column'] == 1
    assert options['cache'] is True
    assert 'data_file' not in options

def test_load_config_missing_file(tmp_path):
    with pytest.raises(ArgumentError):
        load_config(str(tmp_path / 'nope.yaml'))

@pytest.mark.parametrize('config', [
    {'data_file': None},
    {'data_file': ''},
    {'data_file': 3},
    {'data_file': 'a.tsv', 'label_map_file': ''},
    {'data_file': 'a.tsv', 'label_map_file': ['labels.txt']},
])
def test_invalid_paths(config):
    with pytest.raises(ArgumentError):
        validate_config(config)

def test_label_map_file_may_be_null():
    validate_config({'data_file': 'a.tsv', 'label_map_file': None})
