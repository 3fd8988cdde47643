"""
Inspect connectivity of a level file from the command line.

    python -m isopath.inspect_level level.json --view 1 --to 12
    python -m isopath.inspect_level level.json --reachable --rotate tower=1
    python -m isopath.inspect_level level.json --explain 4 9
"""

import argparse
import logging
import sys

from .engine_config import EngineConfig
from .graph.level_data import GroupState
from .graph.level_loader import context_from_dict, load_level
from .pathfinding.connection_debug import describe_connection
from .pathfinding.core_pathfinder import NavigationQuery
from .utils.vector_math import round_half_up


def _parse_assignment(text: str):
    group_id, sep, value = text.partition("=")
    if not sep or not group_id:
        raise argparse.ArgumentTypeError(f"expected GROUP=VALUE, got {text!r}")
    try:
        return group_id, float(value)
    except ValueError:
        raise argparse.ArgumentTypeError(f"invalid number in {text!r}")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(description="Inspect isopath level connectivity.")
    parser.add_argument("level", help="Path to a level JSON file.")
    parser.add_argument("--view", type=int, default=None, help="Camera view index (0-3).")
    parser.add_argument("--from", dest="start", type=int, default=None,
                        help="Start node id (defaults to the level start node).")
    parser.add_argument("--to", dest="goal", type=int, default=None,
                        help="Goal node id (defaults to the first goal node).")
    parser.add_argument("--reachable", action="store_true",
                        help="Print the reachable set instead of a path.")
    parser.add_argument("--max-depth", type=int, default=EngineConfig().max_reachable_depth,
                        help="Depth cap for --reachable.")
    parser.add_argument("--rotate", action="append", type=_parse_assignment, default=[],
                        metavar="GROUP=TURNS", help="Set a rotator's quarter turns.")
    parser.add_argument("--offset", action="append", type=_parse_assignment, default=[],
                        metavar="GROUP=VALUE", help="Set a slider's offset (clamped).")
    parser.add_argument("--explain", nargs=2, type=int, default=None, metavar=("A", "B"),
                        help="Print a connection report for one node pair.")
    parser.add_argument("--use-spatial-hash", action="store_true",
                        help="Use the spatial hash for neighbour candidates.")
    parser.add_argument("--debug", action="store_true",
                        help="Log every adjacency decision.")
    parser.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging.")
    return parser


def main(argv=None) -> int:
    args = build_parser().parse_args(argv)
    logging.basicConfig(
        level=logging.DEBUG if (args.verbose or args.debug) else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    config = EngineConfig.from_args(args)

    try:
        level = load_level(args.level)
    except (OSError, ValueError, TypeError) as e:
        print(f"Could not load level: {e}", file=sys.stderr)
        return 2

    context = context_from_dict({}, level)
    if args.view is not None:
        context = context.with_view(args.view)
    for group_id, turns in args.rotate:
        state = context.state_for(group_id)
        context = context.with_group_state(
            GroupState(group_id, round_half_up(turns), state.offset_value)
        )
    for group_id, value in args.offset:
        group = level.group_by_id(group_id)
        state = context.state_for(group_id)
        offset = group.clamp_offset(value) if group is not None else value
        context = context.with_group_state(
            GroupState(group_id, state.rotation_value, offset)
        )

    query = NavigationQuery(level, context, config)

    if args.explain:
        a, b = args.explain
        node_a, node_b = level.node_by_id(a), level.node_by_id(b)
        if node_a is None or node_b is None:
            print(f"Unknown node id in {a}, {b}", file=sys.stderr)
            return 1
        report = describe_connection(
            node_a, node_b, query.position_of(a), query.position_of(b), context.view, config
        )
        print(report.format())
        return 0

    start = args.start if args.start is not None else level.start_node

    if args.reachable:
        result = query.find_reachable(start, args.max_depth)
        print(f"Reachable from {start}: {sorted(result.reachable_nodes)}")
        if result.max_depth_reached:
            print(f"(stopped at depth {args.max_depth})")
        return 0

    goal = args.goal
    if goal is None:
        goals = level.goal_ids()
        if not goals:
            print("Level has no goal node; pass --to", file=sys.stderr)
            return 1
        goal = goals[0]

    result = query.find_path(start, goal)
    if not result.success:
        print(f"No path from {start} to {goal} ({result.nodes_explored} nodes explored)")
        return 1

    print(f"Path ({result.hop_count} hops): {' -> '.join(str(n) for n in result.path)}")
    print(f"Moves: {', '.join(m.value for m in result.move_types)}")
    return 0


if __name__ == "__main__":
    sys.exit(main())
