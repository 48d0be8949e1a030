"""Reading and writing flowcharts in the editor's line-based text format."""

from __future__ import annotations

import re
from pathlib import Path
from typing import Iterable, Iterator, List, Optional

from .blocks import (
    ActionBlock,
    Block,
    ConditionalBlock,
    EndBlock,
    LoopBlock,
    MergeBlock,
    StartBlock,
)
from .constants import BlockType

HEADER = "---*---STARTED THE PROCESS---*---"
BLOCK_END = "---block ended---"
CONNECTIONS_START = "---started the connections---"
CONNECTIONS_END = "---block connections ended---"
FOOTER = "---*---FINISHED THE PROCESS---*---"
NO_CONNECTION = -1

# Connection slots stored for each kind of block, in file order.
_PORT_ORDER = {
    BlockType.CONDITIONAL: ("previous1", "next1", "next2"),
    BlockType.ACTION: ("previous1", "next1"),
    BlockType.START: ("next1",),
    BlockType.END: ("previous1",),
    BlockType.MERGE: ("previous1", "previous2", "next1"),
    BlockType.LOOP: ("previous1", "previous2", "next1", "next2"),
}

_BLOCK_CLASSES = {
    BlockType.CONDITIONAL: (ConditionalBlock, "bloco condicional"),
    BlockType.ACTION: (ActionBlock, "bloco ação"),
    BlockType.START: (StartBlock, "bloco inicio"),
    BlockType.END: (EndBlock, "bloco fim"),
    BlockType.MERGE: (MergeBlock, "bloco junçao"),
    BlockType.LOOP: (LoopBlock, "bloco loop"),
}

_INT_PREFIX = re.compile(r"\s*([+-]?\d+)")


class FlowchartFormatError(ValueError):
    """Raised when text is not a well-formed flowchart file."""


def _atoi(line: str) -> int:
    """Parse a leading integer the lenient way; 0 when there is none."""
    match = _INT_PREFIX.match(line)
    return int(match.group(1)) if match else 0


def _extra_value(block: Block) -> Optional[int]:
    if block.type == BlockType.CONDITIONAL:
        return block.type_of_sensor
    if block.type == BlockType.ACTION:
        return block.function
    if block.type == BlockType.LOOP:
        return block.unit
    return None


def dumps(blocks: Iterable[Optional[Block]]) -> str:
    """Serialise blocks and their connections; None entries are skipped."""
    present = [block for block in blocks if block is not None]
    lines = [HEADER]
    for block in present:
        lines.extend(
            str(int(value))
            for value in (block.type, block.id, block.x, block.y, block.width, block.height)
        )
        extra = _extra_value(block)
        if extra is not None:
            lines.append(str(int(extra)))
        lines.append(BLOCK_END)
    lines.append(CONNECTIONS_START)
    for block in present:
        lines.append(str(block.id))
        for port in _PORT_ORDER.get(block.type, ()):
            target = getattr(block, port)
            lines.append(str(target.id if target is not None else NO_CONNECTION))
        lines.append(CONNECTIONS_END)
    lines.append(FOOTER)
    return "\n".join(lines)


class _LineReader:
    def __init__(self, text: str):
        self._lines: Iterator[str] = iter(text.splitlines())

    def __call__(self) -> str:
        try:
            return next(self._lines)
        except StopIteration:
            raise FlowchartFormatError("unexpected end of flowchart data") from None


def _read_block(read: _LineReader, kind: BlockType) -> Block:
    cls, name = _BLOCK_CLASSES[kind]
    block = cls()
    block.id = _atoi(read())
    block.x = _atoi(read())
    block.y = _atoi(read())
    block.width = _atoi(read())
    block.height = _atoi(read())
    block.selected = False
    block.dragging = False
    block.name = name
    if kind == BlockType.CONDITIONAL:
        block.type_of_sensor = _atoi(read())
    elif kind == BlockType.ACTION:
        block.function = _atoi(read())
    elif kind == BlockType.LOOP:
        block.limited_loop = True
        block.set_value(_atoi(read()))
    read()  # end-of-block marker
    return block


def loads(text: str) -> List[Block]:
    """Rebuild the blocks described by flowchart text, connections included."""
    read = _LineReader(text)
    if read() != HEADER:
        raise FlowchartFormatError("missing flowchart header")

    blocks: List[Block] = []
    line = read()
    while line != CONNECTIONS_START:
        if line == " ":
            raise FlowchartFormatError("blank line in block section")
        code = _atoi(line)
        try:
            kind = BlockType(code)
        except ValueError:
            raise FlowchartFormatError(f"unknown block type {line!r}") from None
        blocks.append(_read_block(read, kind))
        line = read()

    first_by_id = {}
    last_by_id = {}
    for block in blocks:
        first_by_id.setdefault(block.id, block)
        last_by_id[block.id] = block

    line = read()
    while line != FOOTER:
        if line == " ":
            raise FlowchartFormatError("blank line in connection section")
        owner = first_by_id.get(_atoi(line))
        if owner is None:
            raise FlowchartFormatError(f"connections for unknown block {line!r}")
        for port in _PORT_ORDER[owner.type]:
            target = last_by_id.get(_atoi(read()))
            if target is not None:
                setattr(owner, port, target)
        read()  # end-of-connections marker
        line = read()
    return blocks


def save_flowchart(blocks: Iterable[Optional[Block]], path) -> None:
    """Write blocks to a flowchart file."""
    Path(path).write_text(dumps(blocks), encoding="utf-8")


def load_flowchart(path) -> List[Block]:
    """Read blocks from a flowchart file."""
    return loads(Path(path).read_text(encoding="utf-8"))