"""Flowchart blocks: their connections, anchor points and execution order."""

from __future__ import annotations

from typing import Callable, ClassVar, NamedTuple, Optional

from .constants import BlockType


class Point(NamedTuple):
    """A position on the editor canvas."""

    x: int
    y: int


class _Port:
    """A connection slot; writes are ignored on blocks that lack the slot."""

    def __set_name__(self, owner, name):
        self.name = name
        self.attr = "_" + name

    def __get__(self, obj, objtype=None):
        if obj is None:
            return self
        return obj.__dict__.get(self.attr)

    def __set__(self, obj, value):
        if self.name in type(obj).PORTS:
            obj.__dict__[self.attr] = value


class Block:
    """Common state of every block placed on the canvas."""

    BLOCK_TYPE: ClassVar[Optional[BlockType]] = None
    PORTS: ClassVar[frozenset] = frozenset()

    next1 = _Port()
    next2 = _Port()
    previous1 = _Port()
    previous2 = _Port()

    def __init__(self, x=0, y=0, width=0, height=0, block_id=0, name=""):
        self.x = x
        self.y = y
        self.width = width
        self.height = height
        self.id = block_id
        self.name = name
        self.selected = False
        self.dragging = False
        self.executing = False
        self.to_delete = False
        self.in1_selected = False
        self.in2_selected = False
        self.out1_selected = False
        self.out2_selected = False

    @property
    def type(self):
        return self.BLOCK_TYPE

    def __repr__(self):
        kind = self.BLOCK_TYPE.name if self.BLOCK_TYPE else "BLOCK"
        return f"<{type(self).__name__} {kind} id={self.id} at ({self.x}, {self.y})>"

    def _at(self, dx, dy):
        return Point(self.x + dx, self.y + dy)

    def point_in1(self):
        return None

    def point_in2(self):
        return None

    def point_out1(self):
        return None

    def point_out2(self):
        return None

    def executing_next(self):
        """Return the block that runs after this one, or None."""
        return self.next1

    def reset_loop_variables(self):
        """Restore loop counters before a new run; nothing to do by default."""


class StartBlock(Block):
    BLOCK_TYPE = BlockType.START
    PORTS = frozenset({"next1"})

    def point_out1(self):
        return self._at(44, 34)

    def executing_next(self):
        return self.next1


class EndBlock(Block):
    BLOCK_TYPE = BlockType.END
    PORTS = frozenset({"previous1"})

    def executing_next(self):
        return None


class ActionBlock(Block):
    BLOCK_TYPE = BlockType.ACTION
    PORTS = frozenset({"next1", "previous1"})

    def __init__(self, *args, function=0, **kwargs):
        super().__init__(*args, **kwargs)
        self.function = function


class ConditionalBlock(Block):
    """Branches to next1 when its condition holds, otherwise to next2."""

    BLOCK_TYPE = BlockType.CONDITIONAL
    PORTS = frozenset({"next1", "next2", "previous1"})

    def __init__(self, *args, type_of_sensor=0, condition: Optional[Callable[["ConditionalBlock"], bool]] = None, **kwargs):
        super().__init__(*args, **kwargs)
        self.type_of_sensor = type_of_sensor
        self.parameter1 = 0
        self.parameter2 = 0
        self.condition = condition

    def executing_next(self):
        if self.condition is None:
            raise RuntimeError("conditional block has no condition to evaluate")
        return self.next1 if self.condition(self) else self.next2


class MergeBlock(Block):
    BLOCK_TYPE = BlockType.MERGE
    PORTS = frozenset({"next1", "previous1", "previous2"})

    def point_in1(self):
        return self._at(2, 2)

    def point_in2(self):
        return self._at(29, 2)

    def point_out1(self):
        return self._at(15, 24)

    def executing_next(self):
        return self.next1


def _cdiv(a, b):
    q = abs(a) // abs(b)
    return q if (a >= 0) == (b > 0) else -q


def _cmod(a, b):
    return a - b * _cdiv(a, b)


class LoopBlock(Block):
    """Repeats the branch on next2 a set number of times, then leaves by next1.

    The counter is kept doubled, since the loop body passes through the
    block twice per repetition.
    """

    BLOCK_TYPE = BlockType.LOOP
    PORTS = frozenset({"next1", "next2", "previous1", "previous2"})

    def __init__(self, *args, limited_loop=False, **kwargs):
        super().__init__(*args, **kwargs)
        self.limited_loop = limited_loop
        self.number_of_loops = 1
        self._number_of_loops_initial = 0
        self.unit = 0
        self.ten = 0
        self._setting_unit = True

    def set_number_of_loops(self, n):
        self.number_of_loops = 2 * n
        self._number_of_loops_initial = 2 * n

    def _dec_number_of_loops(self):
        if self.limited_loop:
            self.number_of_loops -= 1
        half = _cdiv(self.number_of_loops, 2)
        self.ten = _cdiv(half, 10)
        self.unit = _cmod(half, 10) + 1

    def set_unit(self, u):
        self.unit = u
        self.set_number_of_loops(10 * self.ten + self.unit)

    def set_ten(self, t):
        self.ten = t
        self.set_number_of_loops(10 * self.ten + self.unit)

    def set_value(self, v):
        if self._setting_unit:
            self.set_unit(v)
        else:
            self.set_ten(v)
            self._setting_unit = True

    def point_in1(self):
        return self._at(42, 0)

    def point_in2(self):
        return self._at(79, 88)

    def point_out1(self):
        return self._at(42, 88)

    def point_out2(self):
        return self._at(79, 0)

    def executing_next(self):
        self._dec_number_of_loops()
        if self.number_of_loops < 0:
            return self.next1
        return self.next2

    def reset_loop_variables(self):
        self.set_unit(_cmod(_cdiv(self._number_of_loops_initial, 2), 10))