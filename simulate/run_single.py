# run single
# play one interactive session of the car simulator in the console
# starting status and rng seed come from the YAML config

import argparse
import sys

from loguru import logger

from carsim.actions import MENU, Action
from carsim.config import build_rng, load_config, make_sim_cfg, make_status
from carsim.directions import DirectionContext
from carsim.logic import SimulationLogic
from carsim.session import play_turn, status_warnings
from carsim.status import MAX_ENERGY, MAX_GAS, MAX_HUNGER, is_game_over


# -------------------------
# helpers
# -------------------------

def print_menu():
    print()
    for action, label in MENU.items():
        print(f"  {action.value}. {label}")


def print_status(status):
    print(
        f"[status] energy {status.energy}/{MAX_ENERGY} | gas {status.gas}/{MAX_GAS}"
        f" | hunger {status.hunger}/{MAX_HUNGER} | heading {status.heading.name}"
    )
    for warning in status_warnings(status):
        print(f"[warning] {warning}")


# -------------------------
# main
# -------------------------

def main():
    ap = argparse.ArgumentParser()
    ap.add_argument(
        "--config",
        type=str,
        default="configs/default.yaml",
        help="Path to YAML config",
    )
    ap.add_argument("--log-level", type=str, default="WARNING")
    args = ap.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    cfg = load_config(args.config)
    rng = build_rng(make_sim_cfg(cfg).rng_seed)
    status = make_status(cfg)
    logic = SimulationLogic(DirectionContext(), rng=rng)

    print_status(status)

    # -------------------------
    # game loop
    # -------------------------

    while not is_game_over(status):
        print_menu()
        try:
            raw = input("Choose an action: ")
        except EOFError:
            break

        result = play_turn(logic, Action.parse(raw), status)
        status = result.status

        if result.action == Action.EXIT:
            break
        if result.action == Action.INVALID:
            print(f"[menu] '{raw.strip()}' is not a valid choice.")
            continue
        if result.blocked:
            print("[car] Out of gas, the car will not move.")

        print_status(status)

    if is_game_over(status):
        print("[game over] The driver is too hungry to go on.")

    logger.info(f"session ended: {status}")
    print("Bye!")


if __name__ == "__main__":
    main()
