# ------------------------------------------------------------
# run batch of random-driver sessions with the specified parameters
# randomizer seed is incremented by 1 with each iteration!
# data are recorded into the configured folder, plus summary data of the whole batch
# ------------------------------------------------------------

import argparse
import sys
from datetime import datetime
from pathlib import Path

import yaml
from loguru import logger

from carsim.config import build_rng, load_config, make_batch_cfg, make_sim_cfg, make_status
from carsim.directions import DirectionContext
from carsim.logic import SimulationLogic
from carsim.session import run_session


def make_experiment_dir(output_dir: str, name: str) -> Path:
    base = Path(output_dir)
    base.mkdir(parents=True, exist_ok=True)

    ts = datetime.now().strftime("%Y-%m-%d_%H-%M-%S")
    run_dir = base / f"{ts}_{name}"
    run_dir.mkdir()
    (run_dir / "runs").mkdir()
    return run_dir


def run_once(cfg, seed: int, max_turns: int):
    rng = build_rng(seed)
    status = make_status(cfg)
    logic = SimulationLogic(DirectionContext(), rng=rng)
    return run_session(logic, status, rng, max_turns)


def main():
    ap = argparse.ArgumentParser()
    ap.add_argument("--config", type=str, default="configs/default.yaml")
    ap.add_argument("--name", type=str, default="random_driver")
    ap.add_argument("--log-level", type=str, default="INFO")
    args = ap.parse_args()

    logger.remove()
    logger.add(sys.stderr, level=args.log_level.upper())

    cfg = load_config(args.config)
    batch = make_batch_cfg(cfg)
    base_seed = make_sim_cfg(cfg).rng_seed

    run_dir = make_experiment_dir(batch.output_dir, args.name)
    logger.info(f"[batch] writing to {run_dir}")

    # snapshot config
    (run_dir / "config_used.yaml").write_text(
        yaml.safe_dump(cfg, sort_keys=False),
        encoding="utf-8",
    )

    summary_lines = ["run_id,seed,turns,blocked_moves,final_energy,final_gas,final_hunger"]

    for run_id in range(batch.n_runs):
        seed = base_seed + run_id
        status, rec, turns, blocked = run_once(cfg, seed, batch.max_turns)

        rec.save_csv(run_dir / "runs" / f"run_{run_id:04d}.csv")
        summary_lines.append(
            f"{run_id},{seed},{turns},{blocked},{status.energy},{status.gas},{status.hunger}"
        )
        logger.info(f"[run {run_id:02d}] turns={turns} blocked={blocked}")

    (run_dir / f"summary_{args.name}.csv").write_text(
        "\n".join(summary_lines) + "\n", encoding="utf-8"
    )

    logger.info("[batch] done.")


if __name__ == "__main__":
    main()
