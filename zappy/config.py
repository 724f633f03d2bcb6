"""Resource respawn settings and initial population of the map."""

from dataclasses import dataclass, field

from zappy.resources import Resource
from zappy.text import _atoi

_DEFAULT_TIME = (6, 7, 7, 8, 8, 9, 9)
_DEFAULT_MAX = (12, 12, 10, 8, 6, 4, 2)

_KEYS = [(f"Pop{resource.name.capitalize()}:", resource) for resource in Resource] + [
    (f"Max{resource.name.capitalize()}:", resource) for resource in Resource
]


@dataclass
class RepopConfig:
    """Respawn delay and initial quantity of each resource."""

    time_repop: dict = field(default_factory=lambda: dict(zip(Resource, _DEFAULT_TIME)))
    max_repop: dict = field(default_factory=lambda: dict(zip(Resource, _DEFAULT_MAX)))


def parse_config(lines):
    """Build a configuration from ``Pop<Name>:`` and ``Max<Name>:`` lines."""
    config = RepopConfig()
    for line in lines:
        match = next(((key, res) for key, res in _KEYS if line.startswith(key)), None)
        if match is None:
            continue
        key, resource = match
        value = _atoi(line[len(key):])
        if line.startswith("Max"):
            config.max_repop[resource] = value
        else:
            config.time_repop[resource] = value
    return config


def load_config(path=".conf"):
    """Read the configuration file, falling back to defaults if unreadable."""
    try:
        with open(path, encoding="utf-8", errors="replace") as handle:
            return parse_config(handle)
    except OSError:
        return RepopConfig()


def populate(world, config, rng):
    """Scatter the configured quantity of each resource over random tiles."""
    for resource in Resource:
        for _ in range(config.max_repop[resource]):
            world.drop_random(resource, rng)