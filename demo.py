import json

import numpy as np

from ferrers import *
from ferrers.render import grid_to_text, steps_to_text
from ferrers.serialize import result_to_data

rng = np.random.default_rng(1729)

print("==== A partition and its statistics ====")
partition = Partition(4, 3, 3, 1)
partition.print_ferrers_diagram()
print(f"weight {partition.weight()}, rank {partition.rank()}, "
      f"crank {partition.crank()}, Durfee rank {partition.durfee_rank()}")
print(f"conjugate: {conjugate(partition)}")

print("==== Random partitions of 30 ====")
print(f"unrestricted:        {random_partition_exactly(30, rng=rng)}")
print(f"even parts:          {even_random_exactly(30, rng=rng)}")
print(f"odd parts:           {odd_random_exactly(30, rng=rng)}")
print(f"distinct odd parts:  "
      f"{distinct_odd_random_exactly(30, rng=rng, chatty=True)}")

# run each bijection on a random element of its domain
for bijection in Bijection:
    print(f"==== {bijection.value}: {bijection.description} ====")
    source = sample_domain(bijection, 12, exact=True, rng=rng)
    run = BijectionRun(bijection, source)
    print(grid_to_text(run.build_grid()))
    for step in run:
        print(f"-- {step}")
        print(grid_to_text(run.grid))
    print(f"{source} ↦ {run.result().partition}")

# the same run, as a renderer in another process would receive it
print("==== Glaisher, serialized ====")
source = Partition(5, 5)
result = run_bijection(Bijection.GLAISHER, source)
print(steps_to_text(result.steps))
print(json.dumps(result_to_data(Bijection.GLAISHER, source, result)))
