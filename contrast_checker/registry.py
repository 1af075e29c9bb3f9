"""Check auto-discovery and registration.

Scans contrast_checker/checks/ for modules that define a `check` object
of type Check. Collects them into a dict keyed by name.
"""

import importlib
import pkgutil

from contrast_checker.core.types import Check

_registry: dict[str, Check] = {}


def discover() -> dict[str, Check]:
    """Import all check modules and return the registry."""
    if _registry:
        return _registry

    import contrast_checker.checks as pkg

    found_modules = [
        modname for _importer, modname, _ispkg in pkgutil.iter_modules(pkg.__path__) if not modname.startswith('_')
    ]
    for modname in found_modules:
        module = importlib.import_module(f'contrast_checker.checks.{modname}')
        chk = getattr(module, 'check', None)
        if isinstance(chk, Check):
            _registry[chk.name] = chk

    return _registry


def get(name: str) -> Check:
    """Get a check by name."""
    reg = discover()
    if name not in reg:
        raise KeyError(f'Unknown check: {name}. Available: {", ".join(sorted(reg))}')
    return reg[name]


def all_checks() -> dict[str, Check]:
    """Return all registered checks."""
    return discover()
