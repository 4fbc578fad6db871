from __future__ import annotations

from defgraph.graph import resolve_references
from defgraph.ir import IMPLEMENTED_BY, INHERITS, REFERENCES
from defgraph.parsing import DefIndex, DefRecord, parse_defs_markup


def _index(*documents: str) -> DefIndex:
    records: list[DefRecord] = []
    for document in documents:
        records.extend(parse_defs_markup(document))
    return DefIndex.build(records)


def _by_identity(index: DefIndex, identity: str) -> DefRecord:
    record = index.get_single(identity)
    assert record is not None, f"expected exactly one record named {identity}"
    return record


def test_self_references_are_excluded() -> None:
    index = _index(
        '<Defs><ThingDef Name="Foo"><defName>Foo</defName><thing>Foo</thing><Foo></Foo><x ref="Foo"></x></ThingDef></Defs>'
    )
    resolve_references(index)
    foo = _by_identity(index, "Foo")
    assert foo.references_out == []
    assert foo.references_in == []


def test_plain_data_tokens_are_filtered_out() -> None:
    index = _index(
        "<Defs>"
        "<ThingDef><defName>Steel</defName></ThingDef>"
        "<ThingDef><defName>Wall</defName><costList><Steel>5</Steel></costList><label>wall</label></ThingDef>"
        "</Defs>"
    )
    resolve_references(index)
    assert _by_identity(index, "Wall").references_out == ["Steel"]
    assert _by_identity(index, "Steel").references_in == ["Wall"]


def test_references_fan_out_to_every_record_sharing_an_identity() -> None:
    index = _index(
        "<Defs><ThingDef><defName>X</defName><label>original</label></ThingDef></Defs>",
        "<Defs><ThingDef><defName>X</defName><label>patched</label></ThingDef></Defs>",
        "<Defs><RecipeDef><defName>R</defName><products><X>1</X></products></RecipeDef></Defs>",
    )
    resolve_references(index)

    assert index.by_identity["X"] == [0, 1]
    for record in index.get("X"):
        assert record.references_in == ["R"]
    assert _by_identity(index, "R").references_out == ["X"]


def test_same_named_sources_each_contribute_a_back_edge() -> None:
    index = _index(
        "<Defs><ThingDef><defName>T</defName></ThingDef></Defs>",
        "<Defs><RecipeDef><defName>R</defName><li>T</li></RecipeDef></Defs>",
        "<Defs><RecipeDef><defName>R</defName><li>T</li></RecipeDef></Defs>",
    )
    resolve_references(index)
    assert _by_identity(index, "T").references_in == ["R", "R"]


def test_inheritance_back_edges_are_idempotent() -> None:
    index = _index(
        '<Defs><ThingDef Name="P" Abstract="True"><label>parent</label></ThingDef></Defs>',
        '<Defs><ThingDef ParentName="P"><defName>C1</defName><base>P</base></ThingDef></Defs>',
        '<Defs><ThingDef ParentName="P"><defName>C2</defName></ThingDef></Defs>',
    )
    resolve_references(index)

    parent = _by_identity(index, "P")
    assert sorted(parent.references_in) == ["C1", "C2"]
    assert parent.references_in.count("C1") == 1
    assert parent.references_in.count("C2") == 1
    assert parent.references_out == []
    assert _by_identity(index, "C2").references_out == []


def test_inheritance_to_unknown_parent_adds_nothing() -> None:
    index = _index('<Defs><ThingDef ParentName="Missing"><defName>Orphan</defName></ThingDef></Defs>')
    graph = resolve_references(index)
    assert graph.edges_with_label(INHERITS) == []
    assert _by_identity(index, "Orphan").references_in == []


def test_code_references_are_stored_unchanged() -> None:
    index = _index(
        '<Defs><ThingDef><defName>B</defName><comps>'
        '<li Class="Mod.Zeta"></li><li Class="Mod.Alpha"></li><li Class="Mod.Zeta"></li>'
        "</comps></ThingDef></Defs>"
    )
    graph = resolve_references(index)
    record = _by_identity(index, "B")
    assert record.code_references == ["Mod.Alpha", "Mod.Zeta"]
    assert record.references_out == []
    assert [e.target for e in graph.outgoing("B", IMPLEMENTED_BY)] == ["Mod.Alpha", "Mod.Zeta"]


def test_every_outgoing_edge_is_mirrored() -> None:
    index = _index(
        "<Defs>"
        "<ThingDef><defName>Steel</defName></ThingDef>"
        '<ThingDef Name="BaseWall"><costList><Steel>1</Steel></costList></ThingDef>'
        '<ThingDef ParentName="BaseWall"><defName>Wall</defName><stuff>Steel</stuff></ThingDef>'
        "<RecipeDef><defName>Make_Wall</defName><products><Wall>1</Wall></products><ingredient>Steel</ingredient></RecipeDef>"
        "</Defs>"
    )
    resolve_references(index)
    for record in index.records:
        for target in record.references_out:
            for target_record in index.get(target):
                assert record.identity in target_record.references_in


def test_graph_edges_carry_labels_and_sources() -> None:
    index = _index(
        '<Defs><ThingDef Name="Base"></ThingDef>'
        '<ThingDef ParentName="Base"><defName>Child</defName><li Class="Impl"></li><uses>Base</uses></ThingDef></Defs>'
    )
    graph = resolve_references(index)

    assert [(e.source, e.target) for e in graph.edges_with_label(REFERENCES)] == [("Child", "Base")]
    assert [(e.source, e.target) for e in graph.edges_with_label(INHERITS)] == [("Child", "Base")]
    assert [(e.source, e.target) for e in graph.edges_with_label(IMPLEMENTED_BY)] == [("Child", "Impl")]
    assert {e.label for e in graph.incoming("Base")} == {REFERENCES, INHERITS}
    assert all(e.source_index == 1 for e in graph.edges)
    assert len(graph) == 3
    assert _by_identity(index, "Base").references_in == ["Child"]


def test_resolving_twice_gives_the_same_result() -> None:
    index = _index(
        "<Defs><ThingDef><defName>T</defName></ThingDef><ThingDef><defName>U</defName><li>T</li></ThingDef></Defs>"
    )
    resolve_references(index)
    resolve_references(index)
    assert _by_identity(index, "T").references_in == ["U"]
    assert _by_identity(index, "U").references_out == ["T"]


def test_self_closing_class_elements_add_no_code_reference() -> None:
    index = _index(
        '<Defs><ThingDef Name="Ghost" Abstract="True"/>'
        '<ThingDef ParentName="Ghost"><defName>B</defName><comps>'
        '<li Class="Mod.Skipped"/><li Class="Mod.Kept"></li>'
        "</comps></ThingDef></Defs>"
    )
    graph = resolve_references(index)

    assert "Ghost" not in index.by_identity
    record = _by_identity(index, "B")
    assert record.code_references == ["Mod.Kept"]
    assert graph.edges_with_label(INHERITS) == []
