from __future__ import generator_stop

import os.path
from copy import deepcopy
from importlib.util import find_spec
from typing import Any, Dict, Optional

import toml

DEFAULTS: Dict[str, Any] = {
    "repeat": 5,
    "number": 3,
    "selection": {
        "sizes": [1000, 10000],
    },
    "matrix": {
        "sizes": [16, 64],
        "parallel": False,
    },
}


def read_toml(path: str) -> Any:
    with open(path, encoding="utf-8") as fr:
        return toml.load(fr)


def _update(base: Dict[str, Any], other: Dict[str, Any]) -> None:
    for key, value in other.items():
        if isinstance(value, dict) and isinstance(base.get(key), dict):
            _update(base[key], value)
        else:
            base[key] = value


def load(name: str) -> Dict[str, Any]:

    """Loads the configuration file `<name>.toml`.
    The module directory of the package `name` is tried first, then the current working directory.
    """

    configfilename = name + ".toml"

    # try module directory
    try:
        spec = find_spec(name)

        if spec is None:
            raise ImportError(f"No module named '{name}'")

        if spec.has_location:
            assert spec.origin  # for mypy
            modpath = os.path.dirname(spec.origin)
        else:
            try:
                modpath = list(spec.submodule_search_locations)[0]  # type: ignore
            except (TypeError, IndexError):
                raise FileNotFoundError

        return read_toml(os.path.join(modpath, configfilename))
    except (ImportError, FileNotFoundError):
        pass

    # try working directory
    try:
        return read_toml(configfilename)
    except FileNotFoundError:
        raise FileNotFoundError(f"{configfilename} could not be found in module path or current directory")


def settings(path: Optional[str] = None) -> Dict[str, Any]:

    """Returns the benchmark settings. The defaults are updated with the `[benchmarks]` table
    of the configuration file at `path` or of the `dcalgos.toml` found by `load()`.
    """

    if path is None:
        try:
            obj = load("dcalgos")
        except FileNotFoundError:
            obj = {}
    else:
        obj = read_toml(path)

    out = deepcopy(DEFAULTS)
    _update(out, obj.get("benchmarks", {}))
    return out
