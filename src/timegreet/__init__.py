"""Public package surface for timegreet.

Routes imports through the architectural layers:
- Domain exports: hour bucketing and greeting composition
- Application exports: the greeting use cases
- Composition exports: production and testing wiring
- Metadata: package information
"""

from __future__ import annotations

# Metadata
from .__init__conf__ import print_info

# Application exports
from .application.greeting import GreetingOrchestrator, TimeGreetingProvider

# Composition exports (wired adapters)
from .composition import build_production, build_testing

# Domain exports
from .domain.behaviors import combine_greeting, select_time_greeting

__all__ = [
    "GreetingOrchestrator",
    "TimeGreetingProvider",
    "build_production",
    "build_testing",
    "combine_greeting",
    "print_info",
    "select_time_greeting",
]
