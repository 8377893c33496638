"""
ferrers/serialize.py

De/serialization of bijection step sequences, for consumers (e.g., a
renderer in another process) which want plain data rather than live objects.
"""

from dataclasses import asdict
from typing import Dict, List

from .bijections import Bijection, BijectionResult
from .grid import Region
from .partition import Partition
from .steps import Step


def _flatten(value):
    if isinstance(value, Region):
        return value.name
    return value


def step_to_data(step: Step) -> Dict:
    """
    Flattens `step` to a dictionary of strings and numbers: the operation by
    its value, regions by their names.
    """
    data = asdict(step)
    return {
        "operation": data["operation"].value,
        "region": _flatten(data["region"]),
        "parameters": [_flatten(p) for p in data["parameters"]],
    }


def steps_to_data(steps: List[Step]) -> List[Dict]:
    return [step_to_data(step) for step in steps]


def inflate_steps(data: List[Dict]) -> List[Step]:
    """Converts the output of `steps_to_data` back to live `Step`s."""
    return [Step.inflate(d) for d in data]


def result_to_data(bijection: Bijection, source: Partition,
                   result: BijectionResult) -> Dict:
    """
    Packages a finished bijection run: which bijection was applied, to what,
    the image, and the steps in between.
    """
    return {
        "bijection": bijection.value,
        "source": source.to_list(),
        "partition": result.partition.to_list(),
        "steps": steps_to_data(result.steps),
    }


def inflate_result(data: Dict):
    """
    Converts the output of `result_to_data` back to a triple
    (bijection, source partition, BijectionResult).
    """
    return (
        Bijection(data["bijection"]),
        Partition.from_iterable(data["source"]),
        BijectionResult(
            partition=Partition.from_iterable(data["partition"]),
            steps=inflate_steps(data["steps"]),
        ),
    )
