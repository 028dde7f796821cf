"""
Observer hooks fired around user and comment writes.

Observers are plain callables invoked synchronously as
``callback(record, fields, generator)``:

    record     the User or Comment about to be (or just) written
    fields     the mapping of new values; pre-update observers may change it
    generator  the fake data generator used for the record

Usage:
    hooks = UpdateHooks()
    hooks.register('pre_update_user', lambda user, fields, gen: ...)

Registration functions can also be named in configuration as
'package.module:function'; load_hook_modules() imports them and calls each
with the registry.
"""

import importlib
import logging
from typing import Any, Callable, Dict, Iterable, List

logger = logging.getLogger(__name__)

PRE_UPDATE_USER = 'pre_update_user'
POST_UPDATE_USER = 'post_update_user'
PRE_UPDATE_COMMENT = 'pre_update_comment'
POST_UPDATE_COMMENT = 'post_update_comment'

HOOK_NAMES = (PRE_UPDATE_USER, POST_UPDATE_USER, PRE_UPDATE_COMMENT, POST_UPDATE_COMMENT)

Observer = Callable[[Any, Dict[str, Any], Any], None]


class UpdateHooks:
    """Named lists of observers; an unregistered hook is an empty list."""

    def __init__(self):
        self._observers: Dict[str, List[Observer]] = {name: [] for name in HOOK_NAMES}

    def _check_name(self, name: str):
        if name not in self._observers:
            raise KeyError(f"Unknown hook '{name}'. Available: {', '.join(HOOK_NAMES)}")

    def register(self, name: str, callback: Observer) -> Observer:
        self._check_name(name)
        self._observers[name].append(callback)
        return callback

    def observers(self, name: str) -> List[Observer]:
        self._check_name(name)
        return list(self._observers[name])

    def fire(self, name: str, record, fields: Dict[str, Any], generator) -> None:
        """Call every observer of name, in registration order."""
        for callback in self.observers(name):
            callback(record, fields, generator)

    def __len__(self):
        return sum(len(observers) for observers in self._observers.values())


def load_hook_modules(hooks: UpdateHooks, specs: Iterable[str]) -> UpdateHooks:
    """
    Import 'module:function' registration callables and run them.

    Args:
        hooks: Registry handed to every registration function
        specs: Import paths such as 'myplugin.hooks:register'

    Returns:
        UpdateHooks: The same registry

    Raises:
        ValueError: If a spec is not of the form 'module:function'
        ImportError, AttributeError: If the target cannot be imported
    """
    for spec in specs:
        module_name, _, func_name = spec.partition(':')
        if not module_name or not func_name:
            raise ValueError(f"Hook spec must look like 'module:function', got '{spec}'")
        module = importlib.import_module(module_name)
        register = getattr(module, func_name)
        register(hooks)
        logger.debug(f"Loaded hooks from {spec}")
    return hooks
