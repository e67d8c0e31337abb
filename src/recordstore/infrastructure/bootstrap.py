"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from recordstore.application.record_store import RecordStore
from recordstore.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from recordstore.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from recordstore.infrastructure.persistence.json_profile_repository import (
    JsonProfileRepository,
)
from recordstore.infrastructure.persistence.json_user_repository import (
    JsonUserRepository,
)

DATA_DIR_ENV = "RECORDSTORE_DATA_DIR"
LOG_LEVEL_ENV = "RECORDSTORE_LOG_LEVEL"

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def resolve_data_dir(override: str | Path | None = None) -> Path:
    """Pick the data directory: explicit override, then env var, then default."""
    if override:
        return Path(override)
    env = os.environ.get(DATA_DIR_ENV)
    if env:
        return Path(env)
    return _DEFAULT_DATA_DIR


def configure_logging(verbose: bool = False) -> None:
    """Configure root logging once for the CLI process."""
    level_name = os.environ.get(LOG_LEVEL_ENV)
    if verbose:
        level = logging.INFO
    elif level_name:
        level = getattr(logging, level_name.upper(), logging.WARNING)
    else:
        level = logging.WARNING
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


def record_store(data_dir: str | Path | None = None) -> RecordStore:
    """Build a store whose tables live as JSON files under *data_dir*."""
    root = resolve_data_dir(data_dir)
    logging.getLogger(__name__).debug("Using data directory %s", root)
    return RecordStore(
        user_repo=JsonUserRepository(root / "users.json"),
        product_repo=JsonProductRepository(root / "products.json"),
        order_repo=JsonOrderRepository(root / "orders.json"),
        profile_repo=JsonProfileRepository(root / "profiles.json"),
    )
