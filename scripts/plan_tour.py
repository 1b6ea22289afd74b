#!/usr/bin/env python3
"""Plan a visiting tour over survey targets.

Targets come from a TSPLIB instance file or from the plant grid a survey
drone localises before take-off. The tour is optimized with the ant colony
(ACO) or particle swarm (PSO) engine and printed in visiting order.

Usage:
    python scripts/plan_tour.py --method pso --quantity 8 --layout 4 2
    python scripts/plan_tour.py --method aco --instance data/square4.tsp --ants 10 --iterations 50
"""

import argparse
import logging
import sys
from pathlib import Path

# Add project root to path
PROJECT_ROOT = Path(__file__).parent.parent
sys.path.insert(0, str(PROJECT_ROOT))

from swarmopt.core import ACOConfig, PSOConfig, ConfigurationError
from swarmopt.planning import plan_tour
from swarmopt.tsp import PlantGridConfig, load_tsplib, plant_target_grid

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)


def build_targets(args):
    """Resolve the target set from the command line."""
    if args.instance:
        return load_tsplib(args.instance)

    grid = PlantGridConfig(
        center=(args.center[0], args.center[1]),
        distances=(args.distances[0], args.distances[1]),
        layout=(args.layout[0], args.layout[1]),
        quantity=args.quantity,
    )
    targets = plant_target_grid(grid)
    logger.info("Target locations computed as:")
    for target in targets:
        logger.info(f"  ({target.x:.2f}, {target.y:.2f})")
    return targets


def build_config(args):
    """Engine configuration for the selected method."""
    if args.method == "aco":
        return ACOConfig(
            n_ants=args.ants,
            alpha=args.alpha,
            beta=args.beta,
            rho=args.rho,
            max_iterations=args.iterations,
            max_tours=args.max_tours,
            seed=args.seed,
        )
    return PSOConfig(
        n_particles=args.particles,
        self_trust=args.self_trust,
        past_trust=args.past_trust,
        global_trust=args.global_trust,
        max_iterations=args.iterations or 200,
        target_length=args.target,
        seed=args.seed,
    )


def main() -> int:
    parser = argparse.ArgumentParser(
        description="Plan a visiting tour with ACO or PSO",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python scripts/plan_tour.py --method pso --quantity 8 --layout 4 2 --target 86.63
    python scripts/plan_tour.py --method aco --instance data/square4.tsp --seed 1
        """,
    )
    parser.add_argument(
        "-m", "--method",
        choices=["aco", "pso"],
        default="aco",
        help="Optimization engine (default: aco)",
    )
    parser.add_argument(
        "--seed",
        type=int,
        default=None,
        help="RNG seed (default: wall-clock time)",
    )
    parser.add_argument(
        "--iterations",
        type=int,
        default=0,
        help="Iteration budget (default: ACO unbounded, PSO 200)",
    )

    # Targets
    targets = parser.add_argument_group("Targets")
    targets.add_argument("--instance", type=str, help="TSPLIB .tsp file with target coordinates")
    targets.add_argument("--center", type=float, nargs=2, default=(0.0, 0.0), help="Plant grid center (x z)")
    targets.add_argument("--distances", type=float, nargs=2, default=(1.0, 1.0), help="Plant spacing (dx dz)")
    targets.add_argument("--layout", type=int, nargs=2, default=(4, 2), help="Grid columns and rows")
    targets.add_argument("--quantity", type=int, default=8, help="Number of plants")

    # ACO
    aco = parser.add_argument_group("ACO parameters")
    aco.add_argument("--ants", type=int, default=10, help="Number of ants (default: 10)")
    aco.add_argument("--alpha", type=float, default=1.0, help="Pheromone weight (default: 1.0)")
    aco.add_argument("--beta", type=float, default=1.0, help="Heuristic weight (default: 1.0)")
    aco.add_argument("--rho", type=float, default=0.2, help="Evaporation rate (default: 0.2)")
    aco.add_argument("--max-tours", type=int, default=10000, help="Tour budget (default: 10000)")

    # PSO
    pso = parser.add_argument_group("PSO parameters")
    pso.add_argument("--particles", type=int, default=20, help="Number of particles (default: 20)")
    pso.add_argument("--self-trust", type=float, default=0.2, help="Inertia weight (default: 0.2)")
    pso.add_argument("--past-trust", type=float, default=0.1, help="Personal best pull (default: 0.1)")
    pso.add_argument("--global-trust", type=float, default=0.7, help="Global best pull (default: 0.7)")
    pso.add_argument("--target", type=float, default=None, help="Accept tours at or below this length")

    args = parser.parse_args()

    try:
        result = plan_tour(build_targets(args), method=args.method, config=build_config(args))
    except ConfigurationError as e:
        parser.error(str(e))

    print(f"\nShortest path: {result.to_string()}")
    print(f"Tour distance: {result.best_length:.4f}")
    print(f"Iterations: {result.iterations} (seed {result.seed})")

    if args.target is not None:
        verdict = "accepted" if result.accepted(args.target) else "rejected"
        print(f"Target tour distance {args.target}: {verdict}")

    return 0


if __name__ == "__main__":
    sys.exit(main())
