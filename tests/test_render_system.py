import pytest

from fleetfire.components.firing_result import FiringResult
from fleetfire.components.location import Location
from fleetfire.errors import OutOfBounds
from fleetfire.events.observers import FiredAt
from fleetfire.rendering.board_renderer import BoardRenderer
from fleetfire.rendering.context import build_render_context
from fleetfire.systems.render import RenderSystem
from tests.helpers import DummyWindow


def test_cells_start_unknown():
    render = RenderSystem(DummyWindow(), size=3)
    assert render.cell_state(Location(row=2, column=2, board_number=1)) == "unknown"


def test_fired_at_updates_only_that_cell():
    render = RenderSystem(DummyWindow(), size=3)
    target = Location(row=1, column=2, board_number=0)
    render.on_fired_at(FiredAt(location=target, firing_result=FiringResult.HIT))
    assert render.cell_state(target) == "hit"
    assert render.cell_state(Location(row=1, column=2, board_number=1)) == "unknown"


def test_no_outcome_leaves_cell_unchanged():
    render = RenderSystem(DummyWindow(), size=2)
    target = Location(row=0, column=0, board_number=0)
    render.render_cell_state(target, "miss")
    render.render_cell_state(target, None)
    assert render.cell_state(target) == "miss"


def test_unknown_location_raises():
    render = RenderSystem(DummyWindow(), size=2)
    with pytest.raises(OutOfBounds):
        render.render_cell_state(Location(row=5, column=0, board_number=0), FiringResult.MISS)
    with pytest.raises(OutOfBounds):
        render.cell_state(Location(row=0, column=0, board_number=2))


def test_render_context_cell_rects_tile_the_board():
    states = {Location(row=0, column=0, board_number=0): "hit"}
    ctx = build_render_context(960, 540, 4, states)
    left, right, bottom, top = ctx.cell_rect(Location(row=1, column=2, board_number=1))
    origin_left, origin_bottom = ctx.board_origins[1]
    assert left == origin_left + 2 * ctx.tile_size
    assert bottom == origin_bottom + ctx.tile_size
    assert right - left == top - bottom == ctx.tile_size
    assert ctx.board_span == 4 * ctx.tile_size


def test_point_lookup_matches_layout():
    window = DummyWindow()
    render = RenderSystem(window, size=4)
    ctx = build_render_context(window.width, window.height, 4, {})
    left, right, bottom, top = ctx.cell_rect(Location(row=3, column=1, board_number=0))
    assert render.get_cell_at_point((left + right) / 2, (bottom + top) / 2) == Location(row=3, column=1, board_number=0)


class _HeadlessArcade:
    def __getattr__(self, name):
        raise AssertionError(f"Unexpected draw call: {name}")


class _RecordingArcade:
    def __init__(self):
        self.calls = []

    def __getattr__(self, name):
        def record(*args, **kwargs):
            self.calls.append((name, args, kwargs))
        return record


@pytest.mark.parametrize("state", ["sunk", 42, "", "unknown"])
def test_render_cell_state_rejects_unknown_states(state):
    render = RenderSystem(DummyWindow(), size=2)
    target = Location(row=0, column=1, board_number=1)
    with pytest.raises(ValueError):
        render.render_cell_state(target, state)
    assert render.cell_state(target) == "unknown"


def test_render_cell_state_accepts_result_values():
    render = RenderSystem(DummyWindow(), size=2)
    hit = Location(row=0, column=0, board_number=0)
    miss = Location(row=1, column=1, board_number=1)
    render.render_cell_state(hit, "hit")
    render.render_cell_state(miss, FiringResult.MISS)
    assert render.cell_state(hit) == "hit"
    assert render.cell_state(miss) == "miss"


def test_process_headless_fills_layout_cache():
    window = DummyWindow()
    render = RenderSystem(window, size=3)
    target = Location(row=2, column=1, board_number=1)
    render.render_cell_state(target, "hit")

    render.process()

    assert len(render._last_cell_layout) == 2 * 3 * 3
    assert render.get_cell_layout(target)["state"] == "hit"
    assert render.get_cell_layout(Location(row=0, column=0, board_number=0))["state"] == "unknown"


def test_point_lookup_uses_drawn_layout():
    window = DummyWindow()
    render = RenderSystem(window, size=3)
    render.process()
    target = Location(row=1, column=2, board_number=0)
    left, right, bottom, top = render.get_cell_layout(target)["rect"]
    assert render.get_cell_at_point((left + right) / 2, (bottom + top) / 2) == target
    assert render.get_cell_at_point(0, 0) is None


def test_board_renderer_headless_makes_no_draw_calls():
    render = RenderSystem(DummyWindow(), size=2)
    ctx = build_render_context(960, 540, 2, {})
    BoardRenderer(render).render(_HeadlessArcade(), ctx, 0, headless=True)
    assert len(render._last_cell_layout) == 4
    assert all(loc.board_number == 0 for loc in render._last_cell_layout)


def test_board_renderer_draws_every_cell_and_labels_fired_ones():
    render = RenderSystem(DummyWindow(), size=2)
    states = {Location(row=0, column=0, board_number=1): "hit", Location(row=1, column=0, board_number=1): "miss"}
    ctx = build_render_context(960, 540, 2, states)
    arcade = _RecordingArcade()

    BoardRenderer(render).render(arcade, ctx, 1, headless=False)

    names = [name for name, _, _ in arcade.calls]
    assert names.count("draw_lrbt_rectangle_filled") == 4
    assert names.count("draw_lrbt_rectangle_outline") == 4
    labels = [args[0] for name, args, _ in arcade.calls if name == "draw_text"]
    assert sorted(labels) == ["hit", "miss"]
