import pytest

from fluxprog.blocks import (
    ActionBlock,
    ConditionalBlock,
    EndBlock,
    LoopBlock,
    MergeBlock,
    Point,
    StartBlock,
)
from fluxprog.constants import BlockType


def test_block_types():
    assert StartBlock().type is BlockType.START
    assert LoopBlock().type is BlockType.LOOP
    assert MergeBlock().type is BlockType.MERGE


def test_start_block_ignores_missing_ports():
    start = StartBlock()
    other = EndBlock()
    start.previous1 = other
    start.next2 = other
    assert start.previous1 is None
    assert start.next2 is None
    start.next1 = other
    assert start.executing_next() is other


def test_end_block_has_no_successor():
    end = EndBlock()
    end.next1 = StartBlock()
    assert end.next1 is None
    assert end.executing_next() is None


def test_start_point_out_from_source_offsets():
    assert StartBlock().point_out1() == Point(44, 34)
    assert StartBlock().point_in1() is None


@pytest.mark.parametrize("cls", [MergeBlock, LoopBlock])
@pytest.mark.parametrize("x,y", [(10, 20), (300, 7)])
def test_points_follow_position(cls, x, y):
    origin = cls()
    moved = cls(x=x, y=y)
    for name in ("point_in1", "point_in2", "point_out1", "point_out2"):
        base = getattr(origin, name)()
        shifted = getattr(moved, name)()
        if base is None:
            assert shifted is None
        else:
            assert Point(shifted.x - base.x, shifted.y - base.y) == Point(x, y)


def test_merge_points():
    merge = MergeBlock()
    assert merge.point_in2() == Point(29, 2)
    assert merge.point_out2() is None


def test_merge_follows_next():
    merge = MergeBlock()
    end = EndBlock()
    merge.next1 = end
    merge.next2 = StartBlock()
    assert merge.executing_next() is end
    assert merge.next2 is None


def test_action_block_follows_next():
    action = ActionBlock(function=4)
    end = EndBlock()
    action.next1 = end
    assert action.executing_next() is end
    assert action.function == 4


def test_conditional_branches():
    yes, no = EndBlock(), EndBlock()
    cond = ConditionalBlock(type_of_sensor=3, condition=lambda b: b.type_of_sensor == 3)
    cond.next1, cond.next2 = yes, no
    assert cond.executing_next() is yes
    cond.type_of_sensor = 5
    assert cond.executing_next() is no


def test_conditional_without_condition_raises():
    with pytest.raises(RuntimeError):
        ConditionalBlock().executing_next()


def test_loop_number_is_doubled():
    loop = LoopBlock()
    loop.set_number_of_loops(3)
    assert loop.number_of_loops == 2 * 3


def test_loop_set_value_sets_unit():
    loop = LoopBlock()
    loop.set_value(7)
    assert loop.unit == 7
    assert loop.number_of_loops == 2 * 7


def _run(loop, limit=100):
    visits = 0
    for _ in range(limit):
        if loop.executing_next() is loop.next1:
            return visits
        visits += 1
    return None


def _make_loop(unit):
    loop = LoopBlock(limited_loop=True)
    loop.next1 = EndBlock()
    loop.next2 = ActionBlock()
    loop.set_unit(unit)
    return loop


def test_limited_loop_visits_body_then_exits():
    loop = _make_loop(2)
    assert _run(loop) == 4


def test_unlimited_loop_never_exits():
    loop = _make_loop(2)
    loop.limited_loop = False
    assert _run(loop) is None


def test_reset_restores_run():
    loop = _make_loop(3)
    first = _run(loop)
    loop.reset_loop_variables()
    assert _run(loop) == first
    assert first > 0


def test_more_repetitions_mean_more_visits():
    assert _run(_make_loop(1)) < _run(_make_loop(2)) < _run(_make_loop(5))