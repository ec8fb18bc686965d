#!/usr/bin/env python3

import argparse

from dinoarena.core.config_loader import ArenaConfigLoader
from dinoarena.core.data.game_enums import VICTORY_MARGIN_NAMES
from dinoarena.core.events.event_manager import EventManager
from dinoarena.core.random_source import NumpyRandomSource
from dinoarena.core.renderer import RendererConfig
from dinoarena.game.catalog.roster_loader import RosterLoader
from dinoarena.game.combat.matchup_simulator import simulate_matchup
from dinoarena.game.managers.arena_manager import ArenaManager
from dinoarena.game.managers.log_manager import LogManager
from dinoarena.renderers.text_renderer import TextRenderer


def parse_args():
    parser = argparse.ArgumentParser(description="Dino Battle Arena")
    parser.add_argument("--config", help="Path to arena.yaml")
    parser.add_argument("--seed", type=int, help="Seed for a reproducible battle")
    parser.add_argument("--simulate", type=int, metavar="N", help="Run N battles and print matchup statistics")
    parser.add_argument("fighters", nargs="*", help="Two roster ids to fight (random if omitted)")
    return parser.parse_args()


def main():
    args = parse_args()

    config = ArenaConfigLoader(args.config).load_config()
    seed = args.seed if args.seed is not None else config.seed

    event_manager, log_manager = setup_event_system(config)

    roster = RosterLoader.load_from_file(config.roster_path, event_manager)
    arena = ArenaManager(roster, event_manager, NumpyRandomSource(seed))

    renderer = TextRenderer(RendererConfig(
        bar_width=config.bar_width,
        replay_delay=config.replay_delay,
    ))

    try:
        if len(args.fighters) == 2:
            arena.select_fighters(*(_parse_id(value) for value in args.fighters))
        else:
            arena.select_random()

        fighter_a, fighter_b = arena.fighters
        renderer.render_title(fighter_a, fighter_b)
        if args.simulate:
            print_summary(simulate_matchup(fighter_a, fighter_b, args.simulate, arena.rng))
            return
        result = arena.start_battle()
        renderer.replay(result, arena.stats)
    except KeyboardInterrupt:
        print("\n\nBattle interrupted by user")
    except Exception as e:
        print(f"\n\nError: {e}")
        raise
    finally:
        if config.debug_logging:
            log_manager.save_log_to_file()
        event_manager.shutdown()


def setup_event_system(config):
    """Create the event bus and the log manager fed by it."""
    event_manager = EventManager(enable_debug_logging=config.debug_logging)
    log_manager = LogManager(event_manager, max_messages=config.max_log_messages)
    event_manager.set_debug_callback(log_manager.debug)
    if config.debug_logging:
        log_manager.toggle_debug()
    return event_manager, log_manager


def print_summary(summary):
    rate_a, rate_b = summary.win_rates
    print(f"{summary.fighter_a.name}: {summary.wins[0]} wins ({rate_a:.1%})")
    print(f"{summary.fighter_b.name}: {summary.wins[1]} wins ({rate_b:.1%})")
    print(f"Knockouts: {summary.knockout_rate:.1%}, mean rounds: {summary.mean_rounds:.2f}")
    for margin, count in summary.margins.items():
        print(f"  {VICTORY_MARGIN_NAMES[margin]:<9}{count}")


def _parse_id(value: str):
    return int(value) if value.isdigit() else value


if __name__ == "__main__":
    main()
