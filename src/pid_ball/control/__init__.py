# ──────────────────────────────────────────────────────────────────────
# PID Ball — Control Module
# © 1998–2026 Miroslav Šotek. All rights reserved.
# Contact: www.anulum.li | protoscience@anulum.li
# ORCID: https://orcid.org/0009-0009-3560-0851
# License: GNU AGPL v3 | Commercial licensing available
# ──────────────────────────────────────────────────────────────────────
from .inductor import Inductor
from .pid import PIDController
from .timing import StepScheduler

# Lazy imports to avoid circular dependency chains
# (core.simulation -> control.inductor -> control.__init__ -> driver -> core.simulation)
_LAZY_IMPORTS: dict[str, tuple[str, str]] = {
    "DriverInputs": (".driver", "DriverInputs"),
    "SimulationDriver": (".driver", "SimulationDriver"),
    "Tunable": (".driver", "Tunable"),
    "VirtualClock": (".driver", "VirtualClock"),
}


def __getattr__(name: str):
    if name in _LAZY_IMPORTS:
        module_path, attr = _LAZY_IMPORTS[name]
        import importlib
        mod = importlib.import_module(module_path, __name__)
        val = getattr(mod, attr)
        globals()[name] = val
        return val
    raise AttributeError(f"module {__name__!r} has no attribute {name!r}")


__all__ = [
    "DriverInputs",
    "Inductor",
    "PIDController",
    "SimulationDriver",
    "StepScheduler",
    "Tunable",
    "VirtualClock",
]
