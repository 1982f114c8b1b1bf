"""
Main entry point for the Gabriel graph path planning demo.

Scatters a random point cloud, connects it into a Gabriel graph, runs A*
between two of its nodes and draws the result. Parameters come from YAML
configuration files and can be overridden on the command line.
"""

import argparse
import logging
import sys
from pathlib import Path

from .algorithms.astar import AStarPlanner
from .core.environment import PointCloud
from .utils.config_loader import load_environment_config, load_algorithm_config, merge_configs
from .utils.visualization import save_figure


def create_environment_from_config(env_config: dict) -> PointCloud:
    """
    Create PointCloud object from configuration dictionary.

    Args:
        env_config: Environment configuration from YAML

    Returns:
        PointCloud object (no points generated yet)
    """
    map_size = (env_config['map_size']['width'], env_config['map_size']['height'])

    return PointCloud(map_size,
                      min_margin=env_config.get('min_margin', 10),
                      max_margin=env_config.get('max_margin', 20))


def run_planner(config_dir: str = 'configs',
                num_points: int = None,
                seed: int = None,
                heuristic: str = None,
                start_id: int = None,
                goal_id: int = None,
                visualize: bool = True,
                save: str = None) -> int:
    """
    Run the demo once.

    Args:
        config_dir: Directory containing configuration files
        num_points: Override for the number of points
        seed: Override for the random seed
        heuristic: Override for the heuristic ('euclidean' or 'manhattan')
        start_id: Start node id (random if None)
        goal_id: Goal node id (random if None)
        visualize: Whether to show the plot
        save: Optional file to save the plot to

    Returns:
        Process exit code
    """
    print(f"\n{'='*60}")
    print("Gabriel Graph + A* Path Planning")
    print(f"{'='*60}\n")

    print("Loading configurations...")
    env_config = load_environment_config(config_dir)
    alg_config = load_algorithm_config('astar', config_dir)

    if heuristic is not None:
        alg_config['parameters'] = merge_configs(alg_config.get('parameters', {}),
                                                 {'heuristic_type': heuristic})
    if num_points is None:
        num_points = env_config['num_points']
    if seed is None:
        seed = env_config.get('seed')

    environment = create_environment_from_config(env_config)
    planner = AStarPlanner(environment, alg_config)
    print(f"Planner: {planner!r}")

    planner.regenerate(num_points, seed=seed)
    print(f"Point cloud: {environment.map_size[0]}x{environment.map_size[1]} with {num_points} points")

    print("\nBuilding Gabriel graph...")
    planner.build_graph()

    if start_id is None or goal_id is None:
        random_start, random_goal = environment.random_pair(seed)
        start_id = random_start if start_id is None else start_id
        goal_id = random_goal if goal_id is None else goal_id
    print(f"Start: node {start_id}")
    print(f"Goal: node {goal_id}")

    print("\nPlanning path...")
    planner.plan(start_id, goal_id)

    print("\n" + "="*60)
    print("Results:")
    print("="*60)
    for key, value in planner.get_metrics().items():
        print(f"  {key}: {value}")
    print("="*60 + "\n")

    if planner.path is None:
        print("No path was found")
    else:
        print(f"Path found with {len(planner.path)} nodes: "
              f"{' -> '.join(str(node_id) for node_id in reversed(planner.result.path_ids))}")

    if visualize or save:
        import matplotlib
        if not visualize:
            matplotlib.use('Agg')
        import matplotlib.pyplot as plt

        vis_config = alg_config.get('visualization', {})
        fig, ax = plt.subplots(figsize=(10, 7.5))
        planner.visualize(ax,
                          show_explored=vis_config.get('show_explored', True),
                          node_size=vis_config.get('node_size', 25))
        plt.tight_layout()

        if save:
            save_path = Path(save)
            save_path.parent.mkdir(parents=True, exist_ok=True)
            save_figure(fig, str(save_path))
            print(f"Plot saved to: {save_path}")

        if visualize:
            plt.show()
        plt.close(fig)

    return 0


def main(argv=None):
    """Main entry point with command-line argument parsing."""
    parser = argparse.ArgumentParser(
        description='Gabriel graph construction and A* path planning',
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
  # Random cloud, random start and goal
  gabriel-paths

  # Reproducible run with Manhattan distances, saved without a window
  gabriel-paths --seed 42 --heuristic manhattan --no-viz --save out/path.png

  # Fixed endpoints on a small cloud
  gabriel-paths --points 50 --seed 1 --start 0 --goal 49
        """
    )

    parser.add_argument('--config-dir', '-c', type=str, default='configs',
                        help='Directory containing YAML configuration files (default: configs)')
    parser.add_argument('--points', '-n', type=int, default=None,
                        help='Number of points (default: from environment.yaml)')
    parser.add_argument('--seed', type=int, default=None,
                        help='Random seed (default: from environment.yaml)')
    parser.add_argument('--heuristic', type=str, choices=['euclidean', 'manhattan'],
                        default=None, help='Distance used by A* (default: from astar.yaml)')
    parser.add_argument('--start', type=int, default=None, help='Start node id')
    parser.add_argument('--goal', type=int, default=None, help='Goal node id')
    parser.add_argument('--save', '-s', type=str, default=None,
                        help='Save the plot to this file')
    parser.add_argument('--no-viz', action='store_true', help='Disable the plot window')
    parser.add_argument('--verbose', '-v', action='store_true', help='Enable debug logging')

    args = parser.parse_args(argv)

    logging.basicConfig(
        level=logging.DEBUG if args.verbose else logging.WARNING,
        format='%(asctime)s %(levelname)s %(name)s: %(message)s',
    )

    try:
        return run_planner(
            config_dir=args.config_dir,
            num_points=args.points,
            seed=args.seed,
            heuristic=args.heuristic,
            start_id=args.start,
            goal_id=args.goal,
            visualize=not args.no_viz,
            save=args.save,
        )
    except (FileNotFoundError, ValueError) as e:
        print(f"Error: {e}")
        return 1


if __name__ == '__main__':
    sys.exit(main())
