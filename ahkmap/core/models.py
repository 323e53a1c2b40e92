# Module: hotkey data models and label text helpers.
# Main: Modifier, Binding, Bindings, modifier_code, binding_label.
# Example: from ahkmap.core.models import Binding, Modifier

from dataclasses import dataclass, field
from typing import Dict, List


@dataclass(frozen=True)
class Modifier:
    alt: bool = False
    shift: bool = False
    ctrl: bool = False


@dataclass(frozen=True)
class Binding:
    key: str
    mod: Modifier = field(default_factory=Modifier)
    description: str = ""


# normalized key name -> bindings in file order
Bindings = Dict[str, List[Binding]]


def modifier_code(mod: Modifier) -> str:
    """Short modifier code, always in Ctrl/Shift/Alt order (e.g. "CA")."""
    return ("C" if mod.ctrl else "") + ("S" if mod.shift else "") + ("A" if mod.alt else "")


def binding_label(binding: Binding) -> str:
    code = modifier_code(binding.mod)
    if not code:
        return binding.description
    return f"[{code}] {binding.description}"


def binding_count(bindings: Bindings) -> int:
    return sum(len(v) for v in bindings.values())
