"""Registry of command handlers.

A handler is a plain function registered against a command name. It takes
the CLI Context and a mapping of parsed options and returns a result
summary.

Usage:
    @register_command('anonymize users')
    def anonymize_users(ctx, options):
        ...

    handler = get_command('anonymize users')
    summary = handler(ctx, {'keep': '1,2'})
"""

import logging
from typing import Any, Callable, Dict, List

logger = logging.getLogger(__name__)

Handler = Callable[..., Any]

_COMMANDS: Dict[str, Handler] = {}


def register_command(name: str) -> Callable[[Handler], Handler]:
    """Decorator registering a handler under name."""
    def decorator(func: Handler) -> Handler:
        if name in _COMMANDS and _COMMANDS[name] is not func:
            raise ValueError(f"Command '{name}' is already registered")
        _COMMANDS[name] = func
        logger.debug(f"Registered command '{name}' -> {func.__module__}.{func.__name__}")
        return func
    return decorator


def get_command(name: str) -> Handler:
    """
    Get a registered handler.

    Raises:
        KeyError: If no handler is registered under name
    """
    try:
        return _COMMANDS[name]
    except KeyError:
        available = ', '.join(sorted(_COMMANDS)) or 'none'
        raise KeyError(f"Unknown command '{name}'. Available: {available}") from None


def list_commands() -> List[str]:
    return sorted(_COMMANDS)
