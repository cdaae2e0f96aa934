from console.services.plans.catalog import Catalog, ConfigSnapshot
from console.services.plans.dependency_resolver import resolve_assignable, unmet_dependencies
from factories import make_feature


def ids(features):
    return {f.feature_id for f in features}


def test_feature_without_dependencies_follows_its_own_flag():
    catalog = Catalog([make_feature("a"), make_feature("b"), make_feature("c")])
    snapshot = ConfigSnapshot({"a": True, "b": False})

    assert ids(resolve_assignable(catalog, snapshot)) == {"a", "c"}


def test_disabled_feature_is_excluded_whatever_its_dependencies():
    catalog = Catalog([make_feature("f1", config_key="c1", plan_key="k1", depends_on=("f2",)),
                       make_feature("f2", config_key="c2")])
    snapshot = ConfigSnapshot({"c1": False, "c2": True})

    assert "f1" not in ids(resolve_assignable(catalog, snapshot))


def test_dependency_missing_from_catalog_fails_closed():
    catalog = Catalog([make_feature("a", depends_on=("ghost",))])

    assert resolve_assignable(catalog, ConfigSnapshot.empty()) == frozenset()
    assert unmet_dependencies(catalog.get("a"), catalog, ConfigSnapshot.empty()) == ["ghost"]


def test_dependency_with_disabled_flag_blocks_feature():
    catalog = Catalog([
        make_feature("role_based_access", depends_on=("team_members",)),
        make_feature("team_members"),
    ])
    snapshot = ConfigSnapshot({"team_members": False})

    assert ids(resolve_assignable(catalog, snapshot)) == set()


def test_dependency_with_absent_flag_is_satisfied():
    catalog = Catalog([
        make_feature("role_based_access", depends_on=("team_members",)),
        make_feature("team_members"),
    ])

    assert ids(resolve_assignable(catalog, ConfigSnapshot.empty())) == {
        "role_based_access", "team_members",
    }


def test_only_direct_dependencies_are_checked():
    # A -> B -> C, C disabled: B is blocked by C, A only looks at B's own flag
    catalog = Catalog([
        make_feature("A", depends_on=("B",)),
        make_feature("B", depends_on=("C",)),
        make_feature("C"),
    ])
    snapshot = ConfigSnapshot({"A": True, "B": True, "C": False})

    assert ids(resolve_assignable(catalog, snapshot)) == {"A"}


def test_chain_with_all_flags_enabled():
    catalog = Catalog([
        make_feature("A", depends_on=("B",)),
        make_feature("B", depends_on=("C",)),
        make_feature("C"),
    ])

    assert ids(resolve_assignable(catalog, ConfigSnapshot({"C": True}))) == {"A", "B", "C"}


def test_every_dependency_must_hold():
    catalog = Catalog([
        make_feature("a", depends_on=("b", "c")),
        make_feature("b"),
        make_feature("c"),
    ])
    snapshot = ConfigSnapshot({"c": False})

    assert "a" not in ids(resolve_assignable(catalog, snapshot))
    assert unmet_dependencies(catalog.get("a"), catalog, snapshot) == ["c"]


def test_empty_catalog():
    assert resolve_assignable(Catalog.empty(), ConfigSnapshot({"x": True})) == frozenset()
