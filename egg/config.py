from __future__ import annotations
import os
from pathlib import Path
from typing import Iterable, List


# Resolve installation dir (egg package directory)
_EGG_DIR = Path(__file__).resolve().parent

# Defaults
_DEFAULT_EXAMPLES_DIRS = [_EGG_DIR / 'examples']


def paths_from_env(var: str, defaults: Iterable[Path]) -> List[Path]:
    raw = os.environ.get(var)
    if not raw:
        return [Path(p) for p in defaults]
    return [Path(p.strip()) for p in raw.split(os.pathsep) if p.strip()]


def get_examples_roots() -> List[Path]:
    return paths_from_env('EGG_EXAMPLES_PATH', _DEFAULT_EXAMPLES_DIRS)
