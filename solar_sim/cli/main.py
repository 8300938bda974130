"""CLI main entry point."""

import argparse
import sys

from solar_sim.errors import SimulationError
from solar_sim.numerics.context import DEFAULT_PRECISION, get_context
from solar_sim.physics.cadence import get_cadence
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.physics.gravity import G_SI
from solar_sim.physics.integrators import get_integrator, list_integrators
from solar_sim.physics.simulation import Simulation
from solar_sim.presets import get_preset, list_presets
from solar_sim.utils.config import Config, bodies_from_config, load_config


def config_from_args(args) -> Config:
    """Merge a config file (if any) with explicit command-line overrides."""
    config = load_config(args.config) if args.config else Config()
    overrides = {
        'preset': args.preset,
        'steps': args.steps,
        'precision': args.precision,
        'G': args.G,
        'dt': args.dt,
        'integrator': args.integrator,
        'reference_frame': args.reference_frame,
        'cadence': args.cadence,
        'step_rate_hz': args.rate,
        'frame_time': args.frame_time,
        'debug_every': args.debug_every,
    }
    for key, value in overrides.items():
        if value is not None:
            setattr(config, key, value)
    if args.circular and config.preset == 'sun_earth':
        config.preset_params['circular'] = True
    return config


def build_simulation(config: Config, no_reference_frame: bool = False) -> Simulation:
    """Create and configure a Simulation from a Config."""
    context = get_context(config.precision)
    integrator = get_integrator(config.integrator)

    if config.bodies:
        bodies = bodies_from_config(config, context)
        G = config.G if config.G is not None else G_SI
        reference_frame = config.reference_frame
    else:
        params = dict(config.preset_params)
        if config.preset == 'sun_earth':
            params.setdefault('dt', float(config.dt))
        preset = get_preset(config.preset, context, **params)
        bodies = preset.generate()
        G = config.G if config.G is not None else preset.G
        reference_frame = config.reference_frame or preset.reference_frame_id

    # An explicit choice replaces whatever the scene flagged
    if no_reference_frame or config.reference_frame:
        for body in bodies:
            body.is_reference_frame = False
    if no_reference_frame:
        reference_frame = None

    sim = Simulation(context, G=G, integrator=integrator, dt=config.dt)
    sim.configure(bodies, reference_frame_id=reference_frame)
    return sim


def print_row(sim: Simulation, diagnostics: Diagnostics):
    """Print one table row per body plus the total energy."""
    nstr = sim.context.nstr
    energy = diagnostics.total_energy(sim.bodies)
    for body in sim.bodies:
        pos = body.render_position()
        vel = body.render_acceleration()
        marker = '*' if body.is_reference_frame else ' '
        print(f"{sim.step_count:<8} {body.body_id + marker:<10} "
              f"{pos[0]:<14.6e} {pos[1]:<14.6e} {pos[2]:<14.6e} "
              f"{vel[0]:<12.4e} {vel[1]:<12.4e} {vel[2]:<12.4e} {nstr(energy, 10)}")


def run_simulation(args):
    """Run a simulation."""
    try:
        config = config_from_args(args)
        sim = build_simulation(config, no_reference_frame=args.no_reference_frame)
    except (SimulationError, ValueError, TypeError) as e:
        print(f"Configuration error: {e}")
        sys.exit(1)

    cadence_kwargs = {}
    if config.cadence == 'fixed':
        cadence_kwargs['rate_hz'] = config.step_rate_hz
    cadence = get_cadence(config.cadence, sim, **cadence_kwargs)
    diagnostics = Diagnostics.for_simulation(sim)

    source = 'config bodies' if config.bodies else config.preset
    print(f"Running simulation: {source} with {len(sim.bodies)} bodies")
    print(f"Precision: {sim.context.bits} bits, Integrator: {sim.integrator.name}, "
          f"dt: {sim.context.nstr(sim.dt)}, Cadence: {cadence.name}, "
          f"Reference frame: {sim.reference_frame_id or 'none'}")

    header = (f"{'Step':<8} {'Body':<10} {'x':<14} {'y':<14} {'z':<14} "
              f"{'vx':<12} {'vy':<12} {'vz':<12} E")
    print(header)
    print("-" * len(header))
    print_row(sim, diagnostics)

    last_printed = 0
    for _ in range(config.steps):
        cadence.update(config.frame_time)
        if config.debug_every and sim.step_count - last_printed >= config.debug_every:
            print_row(sim, diagnostics)
            last_printed = sim.step_count

    if sim.step_count != last_printed:
        print_row(sim, diagnostics)
    print(f"Simulation complete! {sim.step_count} gravity steps, simulated time {sim.context.nstr(sim.time, 8)}")


def main(argv=None):
    """CLI entry point."""
    parser = argparse.ArgumentParser(description="Solar Simulator - high-precision gravity simulation")

    # Scene
    parser.add_argument('--preset', type=str, default=None, choices=list_presets(),
                        help='Preset scene (default: sun_earth)')
    parser.add_argument('--config', type=str, default=None,
                        help='Load configuration from a .json or .yaml file')
    parser.add_argument('--circular', action='store_true',
                        help='Start planets on circular orbits (sun_earth preset)')
    parser.add_argument('--reference-frame', type=str, default=None,
                        help='Id of the body held fixed (default: preset choice)')
    parser.add_argument('--no-reference-frame', action='store_true',
                        help='Move every body in absolute coordinates')

    # Numerics
    parser.add_argument('--precision', type=int, default=None,
                        help=f'Significand bits (default: {DEFAULT_PRECISION})')
    parser.add_argument('--G', type=str, default=None,
                        help='Gravitational constant (default: preset value)')
    parser.add_argument('--dt', type=str, default=None,
                        help='Simulated time per step (default: 1)')
    parser.add_argument('--integrator', type=str, default=None, choices=list_integrators(),
                        help='Integrator policy (default: lagged_euler)')

    # Stepping
    parser.add_argument('--steps', type=int, default=None,
                        help='Number of host updates (frames) to run')
    parser.add_argument('--cadence', type=str, default=None, choices=['frame', 'fixed'],
                        help='Step once per frame or at a fixed rate')
    parser.add_argument('--rate', type=float, default=None,
                        help='Gravity steps per second for the fixed cadence (default: 30)')
    parser.add_argument('--frame-time', type=float, default=None,
                        help='Seconds per simulated frame for the fixed cadence (default: 1/60)')
    parser.add_argument('--debug-every', type=int, default=None,
                        help='Print state every N gravity steps')

    # Info
    parser.add_argument('--list-presets', action='store_true',
                        help='List available presets and exit')

    args = parser.parse_args(argv)

    if args.list_presets:
        print("Available presets:")
        for name in list_presets():
            print(f"  - {name}")
        return

    run_simulation(args)


if __name__ == '__main__':
    main()
