"""Test helpers for envtree users.

The pytest plugin in ``envtree.testing.pytest_fixtures`` provides isolated
Config/ConfigStore instances and a fake environment:

    # conftest.py
    pytest_plugins = ["envtree.testing.pytest_fixtures"]

Outside pytest, ``isolated_config`` builds the same thing directly.
"""

from typing import Any, Dict, Mapping, Optional, Tuple

from envtree.config import Config, ConfigStore

__all__ = ["isolated_config"]


def isolated_config(
    tree: Optional[Mapping[str, Any]] = None,
    environ: Optional[Dict[str, str]] = None,
) -> Tuple[Config, Dict[str, str]]:
    """Create a Config detached from the process-wide default and os.environ.

    Returns:
        ``(config, environ)``; mutate ``environ`` to simulate overrides.
    """
    env: Dict[str, str] = {} if environ is None else environ
    return Config(ConfigStore(tree, environ=env)), env
