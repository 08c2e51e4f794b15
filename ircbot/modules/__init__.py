"""Pluggable modules.

``MODULE_INITS`` is the ordered list of initializers run against the module
set at startup; each registers its module(s).
"""

from . import help as help_module
from . import url as url_module
from .base import Module, ModuleConfig
from .module_set import ModuleInit, ModuleSet

MODULE_INITS: list[ModuleInit] = [
    url_module.init,
    help_module.init,
]

__all__ = ["MODULE_INITS", "Module", "ModuleConfig", "ModuleInit", "ModuleSet"]
