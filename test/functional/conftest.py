# test/functional/conftest.py
import gc

import jax
import pytest
from datetime import datetime
from pathlib import Path


@pytest.fixture(scope="session")
def artifact_dir(request):
    """Create an artifact directory for this pytest run (only if functional tests are selected)."""
    has_functional = any(item.get_closest_marker("functional") for item in request.session.items)
    if not has_functional:
        yield None
        return

    timestamp = datetime.now().strftime("%Y%m%d-%H%M%S")
    path = Path("artifacts") / "functional" / timestamp
    path.mkdir(parents=True, exist_ok=True)
    print(f"\n[functional setup] Created artifact dir: {path}")

    yield path

    print(f"[functional teardown] Finished functional tests in: {path}")


@pytest.fixture(autouse=True)
def clean_jax():
    yield
    gc.collect()
    jax.clear_caches()
