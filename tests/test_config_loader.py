"""Unit tests for YAML configuration loading."""

import pytest
import yaml

from gabriel_paths.utils.config_loader import (load_algorithm_config, load_environment_config,
                                               load_yaml_config, merge_configs)


class TestShippedConfigs:
    """Test the configuration files in configs/."""

    def test_environment(self, config_dir):
        env = load_environment_config(str(config_dir))
        assert env['map_size'] == {'width': 800, 'height': 600}
        assert env['num_points'] == 250
        assert env['seed'] is None

    def test_astar(self, config_dir):
        alg = load_algorithm_config('astar', str(config_dir))
        params = alg['parameters']
        assert params['heuristic_type'] == 'euclidean'
        assert params['initial_g'] == 10.0
        assert params['symmetrize'] is False
        assert set(alg) == {'name', 'parameters', 'visualization'}


class TestLoadYaml:
    """Test file handling."""

    def test_missing_file(self, tmp_path):
        with pytest.raises(FileNotFoundError):
            load_yaml_config(str(tmp_path / 'missing.yaml'))

    def test_empty_file(self, tmp_path):
        path = tmp_path / 'empty.yaml'
        path.write_text('')
        assert load_yaml_config(str(path)) == {}

    def test_invalid_yaml(self, tmp_path):
        path = tmp_path / 'broken.yaml'
        path.write_text('environment: [unclosed\n')
        with pytest.raises(yaml.YAMLError):
            load_yaml_config(str(path))

    def test_missing_environment_keys(self, tmp_path):
        (tmp_path / 'environment.yaml').write_text('environment:\n  num_points: 5\n')
        with pytest.raises(ValueError, match="map_size"):
            load_environment_config(str(tmp_path))

    def test_missing_algorithm_section(self, tmp_path):
        (tmp_path / 'astar.yaml').write_text('other: 1\n')
        assert load_algorithm_config('astar', str(tmp_path)) == {}


class TestMergeConfigs:
    """Test dictionary merging."""

    def test_later_wins(self):
        assert merge_configs({'a': 1, 'b': 2}, {'b': 3, 'c': 4}) == {'a': 1, 'b': 3, 'c': 4}

    def test_inputs_untouched(self):
        base = {'a': 1}
        merge_configs(base, {'a': 2})
        assert base == {'a': 1}
