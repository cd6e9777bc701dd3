#!/usr/bin/env python3
# SPDX-FileCopyrightText: Copyright (c) 2025 NVIDIA CORPORATION & AFFILIATES. All rights reserved.
# SPDX-License-Identifier: Apache-2.0

"""
CI entrypoint: queue a simulation run and gate the pipeline on its score.

Usage:
    simgate run                                  # Inputs from INPUT_* environment variables
    simgate run -f gate.yaml --min-score 90      # YAML inputs with CLI overrides
    simgate dry-run -f gate.yaml                 # Show the queue request without sending it
"""

import argparse
import json
import logging
import sys
import time
from collections.abc import Callable, Sequence
from dataclasses import dataclass, field
from pathlib import Path

from rich.console import Console
from rich.panel import Panel
from rich.syntax import Syntax

from simgate.core.client import QUEUE_PATH, SimulationClient
from simgate.core.config import INPUT_NAMES, load_gate_config
from simgate.core.errors import SimGateError
from simgate.core.outputs import ActionOutputs
from simgate.core.poller import evaluate, format_score, poll_until_terminal
from simgate.core.schema import GateConfig
from simgate.logging_utils import section, setup_logging, step, success

logger = logging.getLogger(__name__)

console = Console()

OUTPUT_RUN_ID = "simulation-run-id"
OUTPUT_FINAL_STATUS = "final-status"
OUTPUT_SCORE = "score"


@dataclass
class GateOrchestrator:
    """Runs submit -> poll -> evaluate for one simulation run.

    Usage:
        config = load_gate_config(environ=os.environ)
        orchestrator = GateOrchestrator(config, SimulationClient.from_config(config), ActionOutputs.from_env())
        exit_code = orchestrator.run()
    """

    config: GateConfig
    client: SimulationClient
    outputs: ActionOutputs
    clock: Callable[[], float] = field(default=time.monotonic)
    sleep: Callable[[float], None] = field(default=time.sleep)

    def run(self) -> int:
        """Run the gate, returning the process exit code.

        Fatal errors stop the run at the failing step; outputs already
        published (such as the run id) stay visible.
        """
        try:
            self._run()
        except SimGateError as e:
            self.outputs.set_failed(str(e))
        return self.outputs.exit_code

    def _run(self) -> None:
        section("Queue simulation run", logger=logger)
        step(f"Queuing simulation run for simulation_id={self.config.simulation_id} ...", logger)
        handle = self.client.queue_run(self.config.to_payload())
        run_id = handle.simulation_run_id
        self.outputs.set_output(OUTPUT_RUN_ID, run_id)

        if not self.config.wait_for_results:
            logger.info("wait_for_results=false, not polling for simulation results.")
            return

        section("Wait for results", logger=logger)
        snapshot = poll_until_terminal(
            self.client,
            run_id,
            poll_interval_seconds=self.config.poll_interval_seconds,
            timeout_seconds=self.config.timeout_seconds,
            clock=self.clock,
            sleep=self.sleep,
        )

        verdict = evaluate(run_id, snapshot, min_score=self.config.min_score)
        self.outputs.set_output(OUTPUT_FINAL_STATUS, verdict.status)
        self.outputs.set_output(OUTPUT_SCORE, format_score(verdict.score))

        if verdict.passed:
            success(verdict.message, logger)
        else:
            self.outputs.set_failed(verdict.message)


def show_dry_run(config: GateConfig) -> None:
    """Render the queue request that `run` would send, without sending it."""
    payload = json.dumps(config.to_payload().model_dump(), indent=2)

    console.print()
    console.print(
        Panel(
            f"[bold]🔍 DRY-RUN[/] [dim]POST {config.api_base_url}{QUEUE_PATH}[/]",
            title=config.simulation_id,
            border_style="yellow",
        )
    )
    console.print(Panel(Syntax(payload, "json", theme="monokai"), title="Queue Request", border_style="cyan"))

    wait = (
        f"poll every {config.poll_interval_seconds:g}s for up to {config.timeout_seconds:g}s, "
        f"require score >= {config.min_score:g}"
        if config.wait_for_results
        else "queue only, do not wait for results"
    )
    console.print(f"[dim]Gate:[/] {wait}")
    console.print("[dim]X-API-Key:[/] ********")


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        description="simgate - queue a simulation run and gate CI on its score",
        epilog="""Examples:
  simgate run                                 # Inputs from INPUT_* environment
  simgate run -f gate.yaml --min-score 90     # YAML inputs with overrides
  simgate dry-run -f gate.yaml                # Show request, do not submit
""",
        formatter_class=argparse.RawDescriptionHelpFormatter,
    )

    subparsers = parser.add_subparsers(dest="command", required=True)

    def add_common_args(p):
        p.add_argument("-f", "--file", type=Path, dest="config", help="YAML file with gate inputs")
        p.add_argument("-v", "--verbose", action="store_true", help="Enable debug logging")
        for name in INPUT_NAMES:
            p.add_argument(f"--{name.replace('_', '-')}", dest=name, default=None, metavar="VALUE")

    add_common_args(subparsers.add_parser("run", help="Queue a run, wait for it and evaluate its score"))
    add_common_args(subparsers.add_parser("dry-run", help="Resolve inputs and show the queue request"))

    return parser


def main(argv: Sequence[str] | None = None) -> int:
    parser = build_parser()
    args = parser.parse_args(argv)

    setup_logging(logging.DEBUG if args.verbose else logging.INFO)

    outputs = ActionOutputs.from_env()
    overrides = {name: getattr(args, name) for name in INPUT_NAMES}

    try:
        config = load_gate_config(path=args.config, overrides=overrides)

        if args.command == "dry-run":
            show_dry_run(config)
            return 0

        orchestrator = GateOrchestrator(
            config=config,
            client=SimulationClient.from_config(config),
            outputs=outputs,
        )
        return orchestrator.run()

    except SimGateError as e:
        outputs.set_failed(str(e))
    except Exception as e:
        outputs.set_failed(str(e) or type(e).__name__)
        logger.debug("Full traceback:", exc_info=True)
    return outputs.exit_code


if __name__ == "__main__":
    sys.exit(main())
