"""
Microbenchmark: time per step vs number of bodies.
Run:
  python benchmarks/bench_steps.py
"""
import time
import numpy as np
from gravity_sim import Entity, Simulation, SimulationConfig
from gravity_sim.report import NullReporter

def build(n: int, steps: int) -> Simulation:
    sim = Simulation(SimulationConfig(total_steps=steps))

    rng = np.random.default_rng(12345)  # determinism (no randomness elsewhere)

    # spawn bodies on a grid with small random jitter so no two coincide
    side = int(np.ceil(np.sqrt(n)))
    k = 0
    for iy in range(side):
        for ix in range(side):
            if k >= n:
                break
            x = ix + 0.01 * float(rng.normal())
            y = iy + 0.01 * float(rng.normal())
            sim.add_entity(Entity(mass=1 + float(rng.random()), position=(x, y)))
            k += 1
    return sim

def run(n: int, steps: int = 200):
    # warmup
    warm = build(n, steps)
    for _ in range(10):
        warm.step()

    # full run loop with reports formatted but discarded
    sim = build(n, steps)
    t0 = time.perf_counter()
    sim.run(NullReporter())
    t1 = time.perf_counter()

    t2 = time.perf_counter()
    for _ in range(steps):
        sim.report()
    t3 = time.perf_counter()

    return (t1 - t0) / steps, (t3 - t2) / steps

if __name__ == "__main__":
    for n in [2, 3, 5, 10, 20]:
        per_step, per_report = run(n)
        print(f"N={n:3d}  step={1e3*per_step:8.3f} ms  steps/s={1/per_step:8.1f}  report={1e3*per_report:7.3f} ms")
