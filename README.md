# fluxprog

Flowchart building blocks for teaching robot programming, together with the
plain-text file format that flowcharts are saved in and loaded from.

## Installation

    pip install .

To run the tests:

    pip install ".[test]"
    pytest

## The blocks

`fluxprog.blocks` provides the blocks a flowchart is built from. Every block
carries its canvas position and size (`x`, `y`, `width`, `height`), an `id`, a
`name` and editor flags such as `selected` and `dragging`. Connections are the
attributes `next1`, `next2`, `previous1` and `previous2`; a block only keeps
the connections it has, and assigning one it lacks is silently ignored.

- `StartBlock`: where execution begins; it has `next1` only.
- `EndBlock`: where execution stops; it has `previous1` only, and its
  `executing_next()` returns `None`.
- `ActionBlock`: holds an action code in `function`; it has `previous1` and
  `next1`.
- `ConditionalBlock`: holds the sensor it tests in `type_of_sensor`. Its
  `executing_next()` calls the `condition` callable given to it and returns
  `next1` when the result is true, `next2` otherwise; without a condition it
  raises `RuntimeError`.
- `MergeBlock`: joins `previous1` and `previous2` into `next1`.
- `LoopBlock`: repeats the branch on `next2` a set number of times, then leaves
  by `next1`. The count is set one digit at a time with `set_unit`, `set_ten`
  or `set_value`, or whole with `set_number_of_loops`; only a block with
  `limited_loop` set counts down. `reset_loop_variables()` restores the count
  before a new run.

Every block has an `executing_next()` method that returns the block to run
after it. Blocks with connection points on the canvas report them as `Point`
values from `point_in1()`, `point_in2()`, `point_out1()` and `point_out2()`;
a point a block does not have is `None`.

`fluxprog.constants` lists the codes the program uses, as the enumerations
`BlockType`, `MenuCommand`, `Sensor`, `RobotCommand` and `AbstractionLevel`,
together with plain values such as `MAX_BLOCKS`, `N_ULTRASONIC` and
`DISPLAY_WIDTH`.

## Flowchart files

`fluxprog.flowfile` reads and writes flowcharts. A file starts with a header
line, lists each block (type code, id, position, size and, for conditional,
action and loop blocks, one extra value), then lists each block's connections
by id, with `-1` for an empty slot.

```python
from fluxprog.blocks import StartBlock, EndBlock
from fluxprog.flowfile import save_flowchart, load_flowchart, dumps, loads

start = StartBlock(block_id=1)
end = EndBlock(block_id=2)
start.next1 = end
end.previous1 = start

save_flowchart([start, end], "program.flux")
blocks = load_flowchart("program.flux")

text = dumps(blocks)
assert dumps(loads(text)) == text
```

`dumps` skips `None` entries in the list it is given. Text that does not follow
the format (a missing header, an unknown block type, connections for an
unknown id, a line that is a single space, or data that ends early) raises
`FlowchartFormatError`, a subclass of `ValueError`.

## What this package does not do

It has no editor screen for drawing flowcharts, no runner that steps through
a flowchart on its own, and no link to a physical or simulated robot. Sensor
readings reach a `ConditionalBlock` only through the `condition` callable you
supply.