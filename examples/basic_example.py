"""Basic example of using the solar simulator."""

from solar_sim import Simulation, get_context
from solar_sim.physics.diagnostics import Diagnostics
from solar_sim.presets import SunEarth
from solar_sim.presets.solar import orbital_period

SECONDS_PER_STEP = 3600.0


def main():
    """Run one simulated year of the Sun-Earth system in hourly steps."""
    # 128 significant bits keeps metre-scale motion at 1.5e11 m resolvable
    context = get_context(128)

    # Sun is the reference frame; Earth starts on a circular orbit
    preset = SunEarth(context, dt=SECONDS_PER_STEP, circular=True)

    sim = Simulation(context, G=preset.G, dt=SECONDS_PER_STEP)
    sim.configure(preset.generate())
    diagnostics = Diagnostics.for_simulation(sim)

    year = orbital_period(context)
    n_steps = int(year / SECONDS_PER_STEP)

    sun, earth = sim.body("Sun"), sim.body("Earth")
    print("Running simulation...")
    print(f"Orbital period: {year / 86400.0:.2f} days ({n_steps} steps)")
    print(f"Initial energy: {context.nstr(diagnostics.total_energy(sim.bodies), 12)}")

    for step in range(n_steps):
        sim.step()
        if step % 1000 == 0:
            r = diagnostics.separation(sun, earth)
            print(f"Step {step}: Day={float(sim.time) / 86400.0:.1f}, "
                  f"Distance={context.nstr(r, 12)} m, Earth={sim.positions()['Earth']}")

    print(f"Final energy: {context.nstr(diagnostics.total_energy(sim.bodies), 12)}")
    print("Simulation complete!")


if __name__ == "__main__":
    main()
