"""Tests for the command line entry point."""

from gabriel_paths.main import main


class TestMain:
    """Test headless CLI runs."""

    def test_headless_run(self, config_dir, capsys):
        code = main(['--config-dir', str(config_dir), '--points', '30', '--seed', '5', '--no-viz'])
        out = capsys.readouterr().out

        assert code == 0
        assert "Results:" in out
        assert "num_nodes: 30" in out

    def test_fixed_endpoints_and_heuristic(self, config_dir, capsys):
        code = main(['--config-dir', str(config_dir), '--points', '20', '--seed', '2',
                     '--start', '3', '--goal', '3', '--heuristic', 'manhattan', '--no-viz'])
        out = capsys.readouterr().out

        assert code == 0
        assert "heuristic: manhattan" in out
        assert "Path found with 1 nodes: 3" in out

    def test_save_plot(self, config_dir, tmp_path):
        target = tmp_path / 'plots' / 'path.png'
        code = main(['--config-dir', str(config_dir), '--points', '15', '--seed', '7',
                     '--no-viz', '--save', str(target)])
        assert code == 0
        assert target.exists()

    def test_unknown_goal(self, config_dir, capsys):
        code = main(['--config-dir', str(config_dir), '--points', '10', '--seed', '1',
                     '--start', '0', '--goal', '50', '--no-viz'])
        assert code == 1
        assert "Goal node 50" in capsys.readouterr().out

    def test_missing_config_dir(self, tmp_path, capsys):
        code = main(['--config-dir', str(tmp_path), '--no-viz'])
        assert code == 1
        assert "Config file not found" in capsys.readouterr().out
