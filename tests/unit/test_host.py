"""Render host tests."""

import pytest

from core.errors import MalformedPageModelError
from page_engine import (
    BlockState,
    InvalidTransition,
    PageModel,
    RenderErrorKind,
    RenderHost,
    create_default_registry,
    h,
)
from page_engine.host import BlockRun


def _block(block_id, component, **props):
    return {"id": block_id, "component": component, "props": props}


# ============================================================================
# Scenarios
# ============================================================================

@pytest.mark.unit
def test_render_all_blocks(host, page_dict):
    result = host.render(page_dict)

    assert [u.block_id for u in result.units] == ["b1", "b2", "b3"]
    assert all(u.state == BlockState.RENDERED for u in result.units)
    assert result.units[0].node.tag == "h1"
    assert result.units[0].node.text() == "Welcome"
    assert result.errors == []
    assert set(result.diagnostics) == {"b1", "b2", "b3"}


@pytest.mark.unit
def test_unregistered_component_placeholder(host, page_dict):
    """A missing component gets a placeholder; the rest render."""
    page_dict["blocks"].insert(1, _block("bx", "ui.doesNotExist"))
    result = host.render(page_dict)

    assert len(result.units) == 4
    missing = result.units[1]
    assert missing.placeholder
    assert missing.state == BlockState.NOT_FOUND
    assert "ui.doesNotExist" in missing.node.text()
    assert missing.node.attrs["data-block-id"] == "bx"

    errors = result.diagnostics["bx"].errors
    assert len(errors) == 1
    assert errors[0].kind == RenderErrorKind.COMPONENT_NOT_FOUND
    assert [u.state for i, u in enumerate(result.units) if i != 1] == [BlockState.RENDERED] * 3


@pytest.mark.unit
def test_raising_constructor_isolated():
    """A raising constructor only affects its own block."""
    registry = create_default_registry()

    def boom(props):
        raise Exception("boom")

    registry.register("Boom", boom)
    host = RenderHost(registry)
    result = host.render({"blocks": [_block("a", "ui.text", text="fine"), _block("b", "Boom"), _block("c", "ui.text")]})

    failed = result.units[1]
    assert failed.state == BlockState.FAILED
    assert failed.placeholder
    assert "boom" in failed.node.text()

    (error,) = result.diagnostics["b"].errors
    assert error.kind == RenderErrorKind.RENDER_FAILURE
    assert error.message == "boom"
    assert error.exception_type == "Exception"
    assert result.units[0].state == BlockState.RENDERED
    assert result.units[2].state == BlockState.RENDERED


@pytest.mark.unit
def test_failure_keeps_traceback_out_of_payload():
    """The formatted traceback stays on the error but is not serialized."""
    registry = create_default_registry()

    def boom(props):
        raise RuntimeError("boom")

    registry.register("Boom", boom)
    result = RenderHost(registry).render({"blocks": [_block("b", "Boom")]})

    (error,) = result.diagnostics["b"].errors
    assert "RuntimeError: boom" in error.traceback
    assert "in boom" in error.traceback
    assert "traceback" not in error.model_dump()
    assert "traceback" not in repr(error)


@pytest.mark.unit
def test_non_node_return_is_failure(empty_registry):
    empty_registry.register("ui.bad", lambda props: "<div/>")
    result = RenderHost(empty_registry).render({"blocks": [_block("a", "ui.bad")]})
    assert result.units[0].state == BlockState.FAILED
    assert result.diagnostics["a"].errors[0].exception_type == "TypeError"


@pytest.mark.unit
def test_builtin_validation_failure_isolated(host):
    """Built-ins that reject their props fail locally."""
    result = host.render({"blocks": [_block("p", "ui.progress", value=500), _block("q", "ui.divider")]})
    assert result.units[0].state == BlockState.FAILED
    assert result.diagnostics["p"].errors[0].exception_type == "ValueError"
    assert result.units[1].state == BlockState.RENDERED


@pytest.mark.unit
def test_empty_page(host):
    result = host.render({"blocks": []})
    assert result.units == []
    assert result.diagnostics == {}


# ============================================================================
# Malformed models
# ============================================================================

@pytest.mark.unit
def test_malformed_lists_every_block(empty_registry):
    """Nothing is rendered when any block lacks id or component."""
    calls = []
    empty_registry.register("ui.rec", lambda props: calls.append(1) or h("div"))
    host = RenderHost(empty_registry)

    with pytest.raises(MalformedPageModelError) as exc_info:
        host.render({"blocks": [
            _block("a", "ui.rec"),
            {"component": "ui.rec"},
            {"id": "c"},
            {"id": "", "component": "ui.rec"},
        ]})

    assert exc_info.value.block_indexes == [1, 2, 3]
    assert calls == []


@pytest.mark.unit
def test_duplicate_block_ids_rejected(empty_registry):
    """Two blocks sharing an id would share one diagnostics slot."""
    calls = []
    empty_registry.register("ui.rec", lambda props: calls.append(1) or h("div"))
    host = RenderHost(empty_registry)

    with pytest.raises(MalformedPageModelError) as exc_info:
        host.render({"blocks": [_block("b1", "ui.nope"), _block("b1", "ui.rec"), _block("b2", "ui.rec")]})

    (issue,) = exc_info.value.issues
    assert (issue.index, issue.field, issue.block_id) == (1, "id", "b1")
    assert calls == []


@pytest.mark.unit
@pytest.mark.parametrize("raw", [[], "page",{"blocks": "nope"}, {"title": "no blocks"}])
def test_not_a_page_model(host, raw):
    with pytest.raises(MalformedPageModelError):
        host.render(raw)


@pytest.mark.unit
def test_invalid_layout_reported_with_index(host):
    block = _block("a", "ui.text")
    block["layout"] = {"colStart": 20, "colSpan": 1, "row": 1}
    with pytest.raises(MalformedPageModelError) as exc_info:
        host.render({"blocks": [_block("ok", "ui.text"), block]})
    assert exc_info.value.block_indexes == [1]


# ============================================================================
# Diagnostics
# ============================================================================

@pytest.mark.unit
def test_confidence_and_duration_recorded(host, page_dict):
    result = host.render(page_dict)
    diag = result.diagnostics["b1"]
    assert diag.confidence == 0.95
    assert diag.component_name == "ui.heading"
    assert all(d.render_duration_ms >= 0 for d in result.diagnostics.values())
    assert result.diagnostics["b2"].confidence is None


@pytest.mark.unit
def test_diagnostics_replaced_each_pass(host, page_dict):
    host.render(page_dict)
    host.render({"blocks": [_block("z", "ui.nothing")]})
    assert set(host.diagnostics) == {"z"}
    assert host.diagnostics["z"].errors[0].kind == RenderErrorKind.COMPONENT_NOT_FOUND


@pytest.mark.unit
def test_accepts_page_model_instance(host, page_dict):
    model = PageModel.model_validate(page_dict)
    result = host.render(model)
    assert len(result.units) == 3


@pytest.mark.unit
def test_summary(host):
    result = host.render({"blocks": [
        _block("a", "ui.text"), _block("b", "ui.none"), _block("c", "ui.progress", value=-1),
    ]})
    summary = result.summary()
    assert summary["total_blocks"] == 3
    assert summary["rendered"] == 1
    assert summary["not_found"] == 1
    assert summary["failed"] == 1
    assert summary["errors_by_kind"] == {"ComponentNotFound": 1, "RenderFailure": 1}
    assert summary["slowest_block"] in {"a", "b", "c"}


# ============================================================================
# Parallel rendering & state machine
# ============================================================================

@pytest.mark.unit
def test_parallel_matches_sequential(registry):
    blocks = []
    for i in range(12):
        component = ["ui.text", "ui.missing", "ui.progress"][i % 3]
        blocks.append(_block(f"b{i}", component, text=f"t{i}", value=50 if i % 2 else 200))
    page = {"blocks": blocks}

    sequential = RenderHost(registry).render(page)
    parallel = RenderHost(registry, max_workers=4).render(page)

    assert [(u.block_id, u.state) for u in parallel.units] == [(u.block_id, u.state) for u in sequential.units]
    assert list(parallel.diagnostics) == list(sequential.diagnostics)
    assert [len(d.errors) for d in parallel.diagnostics.values()] == [
        len(d.errors) for d in sequential.diagnostics.values()
    ]


@pytest.mark.unit
def test_invalid_max_workers(registry):
    with pytest.raises(ValueError):
        RenderHost(registry, max_workers=0)


@pytest.mark.unit
def test_state_machine_rejects_illegal_edges():
    from page_engine import Block

    run = BlockRun(Block(id="a", component="ui.text"))
    with pytest.raises(InvalidTransition):
        run.advance(BlockState.RENDERED)

    run.advance(BlockState.RESOLVING)
    run.advance(BlockState.NOT_FOUND)
    with pytest.raises(InvalidTransition):
        run.advance(BlockState.RESOLVING)
