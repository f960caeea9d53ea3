from __future__ import annotations

import copy

from libinsertpos.utils import ConfigError


class Configurable:
    """
    Mixin for objects configured through keyword arguments.

    Subclasses declare ``defaults`` as a list of ``(name, default,
    description)`` triples and call :meth:`add_defaults` from ``__init__``.
    Keyword arguments given by the user take precedence over the defaults,
    and attribute lookup falls back to them lazily.
    """

    global_defaults = {}  # type: dict
    defaults = []  # type: list[tuple[str, object, str]]

    def __init__(self, **config):
        self._variable_defaults = {}
        self._user_config = config

    def add_defaults(self, defaults):
        """Add defaults to this object, overwriting any which already exist"""
        # Values are shallow copied so that instances never share a mutable
        # default.
        self._variable_defaults.update((d[0], copy.copy(d[1])) for d in defaults)

    def check_options(self):
        """Raise ConfigError for keyword arguments no default declares"""
        unknown = sorted(set(self._user_config) - set(self._variable_defaults))
        if unknown:
            cname = self.__class__.__name__
            raise ConfigError(f"{cname} got unknown option(s): {', '.join(unknown)}")

    @classmethod
    def describe(cls) -> str:
        """Human readable list of the options of this class"""
        return "\n".join(
            f"{name} (default {default!r}): {doc}" for name, default, doc in cls.defaults
        )

    def __getattr__(self, name):
        if name in ("_variable_defaults", "_user_config"):
            raise AttributeError
        found, value = self._find_default(name)
        if found:
            setattr(self, name, value)
            return value
        else:
            cname = self.__class__.__name__
            raise AttributeError(f"{cname} has no attribute: {name}")

    def _find_default(self, name):
        """Returns a tuple (found, value)"""
        defaults = self._variable_defaults.copy()
        defaults.update(self.global_defaults)
        defaults.update(self._user_config)
        if name in defaults:
            return (True, defaults[name])
        else:
            return (False, None)
