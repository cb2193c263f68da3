import json
from dataclasses import dataclass, fields
from pathlib import Path
from typing import Callable, Optional


@dataclass
class SchreierConfig():
    """Runtime options of the orbit builder and the stabilizer extractor.

    max_rounds
        Round budget used by ``build`` when the caller passes no bound.
        ``None`` means the loop-free word bound of the generating set.
    unique_generators
        Drop the identity and repeated Schreier generators in
        ``stabilizer_generators``.
    log_rounds
        Emit one debug record per round of the orbit builder.
    """
    max_rounds: Optional[int] = None
    unique_generators: bool = True
    log_rounds: bool = False

    @classmethod
    def fromdict(cls, dct: dict) -> 'SchreierConfig':
        names = {f.name for f in fields(cls)}
        for k in dct:
            if k not in names:
                raise KeyError(f"Unknown config key '{k}'.")
        return cls(**dct)

    @classmethod
    def fromfile(cls, path) -> 'SchreierConfig':
        with open(Path(path)) as f:
            return cls.fromdict(json.load(f))


__config_factory: Optional[Callable[[], SchreierConfig]] = None
__default_config = SchreierConfig()


def set_config_factory(factory: Optional[Callable[[], SchreierConfig]]):
    global __config_factory
    __config_factory = factory


def getConfig() -> SchreierConfig:
    if __config_factory is None:
        return __default_config
    else:
        return __config_factory()
