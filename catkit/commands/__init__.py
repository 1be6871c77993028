"""
Command registry.

Command modules register their executor functions with @register_command;
load_all_commands() imports every module in this package so the registry
is populated before lookup.
"""

import importlib
import pkgutil
from typing import Callable, Dict, Optional

BUILTINS: Dict[str, Callable] = {}


def register_command(name: str):
    """
    Decorator that registers a command executor under name.

    Example:
        @register_command('cat')
        def cmd_cat(process):
            return 0
    """
    def decorator(func: Callable) -> Callable:
        BUILTINS[name] = func
        return func
    return decorator


def load_all_commands():
    """Import every command module in this package"""
    for module_info in pkgutil.iter_modules(__path__):
        if module_info.name == 'base':
            continue
        importlib.import_module(f'{__name__}.{module_info.name}')


def get_builtin(command: str) -> Optional[Callable]:
    """
    Get a command executor by name, loading the command modules first.

    Returns:
        The command function, or None if not found
    """
    if command not in BUILTINS:
        load_all_commands()
    return BUILTINS.get(command)


__all__ = ['BUILTINS', 'register_command', 'load_all_commands', 'get_builtin']
