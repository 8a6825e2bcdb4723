# examples/three_body.py
from gravity_sim import Simulation, SimulationConfig, reference_entities
from gravity_sim.core import linear_momentum, total_energy
from gravity_sim.report import BufferedReporter

config = SimulationConfig(total_steps=2000, report_digits=10)
sim = Simulation(config=config, entities=reference_entities())

e0 = total_energy(sim.entities)
reporter = BufferedReporter()
sim.run(reporter)

for step, line in zip(reporter.steps, reporter.lines):
    print(f"{step:5d}  {line}")

print("t:", sim.time)
print("momentum:", linear_momentum(sim.entities))
print("energy drift:", total_energy(sim.entities) - e0)
