from typing import List

from tac import TACInstr


class GeneratorContext:
    """All mutable state of one generation run"""

    def __init__(self):
        self.instructions: List[TACInstr] = []
        self.temp_counter = 0
        self.label_counter = 0

    def new_temp(self) -> str:
        """Allocate a temporary name: t0, t1, ..."""
        name = f"t{self.temp_counter}"
        self.temp_counter += 1
        return name

    def new_label(self) -> str:
        """Allocate a label name: L0, L1, ..."""
        name = f"L{self.label_counter}"
        self.label_counter += 1
        return name

    def emit(self, instr: TACInstr):
        self.instructions.append(instr)
