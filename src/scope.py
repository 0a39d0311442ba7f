from dataclasses import dataclass
from typing import Dict, List, Optional

from my_types import Type


@dataclass
class Symbol:
    """A declared variable; only `initialized` changes after declaration"""
    name: str
    type_: Type
    initialized: bool = False


class ScopeManager:
    """Scope manager - a stack of name -> Symbol maps, index 0 is the global scope"""

    def __init__(self):
        self.scopes: List[Dict[str, Symbol]] = [{}]

    def enter_scope(self):
        """Enter a new, empty scope"""
        self.scopes.append({})

    def exit_scope(self):
        """Leave the innermost scope; the global scope is never popped"""
        if len(self.scopes) > 1:
            self.scopes.pop()

    def declare(self, name: str, t: Type, initialized: bool = False) -> bool:
        """Declare in the innermost scope; False if the name already lives there"""
        current = self.scopes[-1]
        if name in current:
            return False
        current[name] = Symbol(name, t, initialized)
        return True

    def resolve(self, name: str) -> Optional[Symbol]:
        """Look a name up from the innermost scope outwards"""
        for scope in reversed(self.scopes):
            if name in scope:
                return scope[name]
        return None

    def mark_initialized(self, name: str):
        symbol = self.resolve(name)
        if symbol is not None:
            symbol.initialized = True

    def depth(self) -> int:
        return len(self.scopes)

    def is_global(self) -> bool:
        """Check whether the global scope is the current one"""
        return len(self.scopes) == 1

    def current_names(self) -> List[str]:
        return list(self.scopes[-1])

    def __repr__(self):
        lines = []
        for level, scope in enumerate(self.scopes):
            entries = ', '.join(f"{s.name}: {s.type_}{'' if s.initialized else '?'}"
                                for s in scope.values())
            lines.append(f"  scope {level}: {{{entries}}}")
        return "ScopeManager(\n" + "\n".join(lines) + "\n)"
