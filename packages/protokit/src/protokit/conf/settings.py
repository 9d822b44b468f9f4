"""Mapping-like configuration layered over :data:`DEFAULTS`."""

import importlib
import os
from collections import ChainMap
from contextlib import contextmanager
from typing import Any, Iterator, Mapping, MutableMapping

from protokit.exceptions import ConfigurationError

from .defaults import DEFAULTS
from .models import ProtokitConfig

ENVVAR = "PROTOKIT_CONFIG_MODULE"
NAMESPACE = "PROTOKIT"


class Settings(MutableMapping[str, Any]):
    """
    Layered settings: local writes, then any given layers, then defaults.

    Keys are upper-case setting names (``AUTO_CURRY``). Writes go to the
    local layer only and must name a known setting; constructor layers are
    taken as given and checked by :meth:`validated`. ``version`` increases on
    every write so readers can cache derived values.
    """

    def __init__(self, *layers: Mapping[str, Any]) -> None:
        self._storage = ChainMap({}, *(dict(layer) for layer in layers), dict(DEFAULTS))
        self.version = 0

    # Mapping protocol -------------------------------------------------
    def __getitem__(self, key: str) -> Any:
        return self._storage[_normalize(key)]

    def __setitem__(self, key: str, value: Any) -> None:
        self._local[_known(key)] = value
        self.version += 1

    def __delitem__(self, key: str) -> None:
        del self._local[_normalize(key)]
        self.version += 1

    def __iter__(self) -> Iterator[str]:
        return iter(self._storage)

    def __len__(self) -> int:
        return len(self._storage)

    @property
    def _local(self) -> dict[str, Any]:
        return self._storage.maps[0]

    # Loading ----------------------------------------------------------
    def update_from_object(self, obj: str, *, namespace: str | None = NAMESPACE) -> None:
        """Read the ``PROTOKIT_*`` attributes of the module named ``obj``."""
        module = importlib.import_module(obj)
        self.update_from_mapping(vars(module), namespace=namespace)

    def update_from_envvar(self, envvar: str = ENVVAR, *, namespace: str | None = NAMESPACE) -> None:
        module_name = os.environ.get(envvar)
        if not module_name:
            return
        self.update_from_object(module_name, namespace=namespace)

    def update_from_mapping(self, mapping: Mapping[str, Any], *, namespace: str | None = None) -> None:
        values = {_known(k): v for k, v in _filter_by_namespace(mapping, namespace).items()}
        self._local.update(values)
        self.version += 1

    # Local layer ------------------------------------------------------
    def reset(self) -> None:
        """Drop every local write, falling back to the lower layers."""
        self._local.clear()
        self.version += 1

    @contextmanager
    def overriding(self, **values: Any) -> Iterator["Settings"]:
        """Apply ``values`` for the duration of the block, then restore the local layer.

            with get_settings().overriding(AUTO_CURRY=False):
                ...
        """
        saved = dict(self._local)
        try:
            for key, value in values.items():
                self[key] = value
            yield self
        finally:
            self._local.clear()
            self._local.update(saved)
            self.version += 1

    def as_dict(self) -> dict[str, Any]:
        return dict(self._storage)

    def validated(self) -> ProtokitConfig:
        """Return the settings as a validated :class:`ProtokitConfig`."""
        return ProtokitConfig.from_settings(self)


def _normalize(key: str) -> str:
    return key.upper() if isinstance(key, str) else key


def _known(key: str) -> str:
    key = _normalize(key)
    if key not in DEFAULTS:
        raise ConfigurationError(f"Unknown protokit setting {key!r}; expected one of {', '.join(DEFAULTS)}")
    return key


def _filter_by_namespace(mapping: Mapping[str, Any], namespace: str | None) -> dict[str, Any]:
    if namespace is None:
        return {k: v for k, v in mapping.items() if k.isupper()}

    prefix = f"{namespace}_"
    return {key[len(prefix):]: value for key, value in mapping.items() if key.startswith(prefix)}
