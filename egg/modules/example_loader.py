from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from egg.config import get_examples_roots

logger = logging.getLogger(__name__)

EXAMPLE_SUFFIX = '.eg'


# Map an example name to a .eg file underneath the configured roots

def resolve_example(name: str) -> Optional[Path]:
    rel = Path(name).with_suffix(EXAMPLE_SUFFIX)
    for root in get_examples_roots():
        candidate = root / rel
        if candidate.is_file():
            return candidate
    return None


def load_example(name: str) -> str:
    p = resolve_example(name)
    if p is None:
        raise FileNotFoundError(f"Cannot find example '{name}' in EGG_EXAMPLES_PATH")
    logger.debug("Loading example %s from %s", name, p)
    return p.read_text(encoding='utf-8')


def list_examples() -> list[str]:
    """Names of every example on the search path, first root wins."""
    names: list[str] = []
    for root in get_examples_roots():
        if not root.is_dir():
            continue
        for p in sorted(root.glob(f'*{EXAMPLE_SUFFIX}')):
            if p.stem not in names:
                names.append(p.stem)
    return names
