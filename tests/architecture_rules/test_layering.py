from pytest_archon import archrule


def test_core_is_storage_agnostic() -> None:
    """
    The core package must not depend on any storage adapter.
    Adapters depend on the core, never the other way round.
    """
    (
        archrule("core_is_storage_agnostic")
        .match("spec_query*")
        .should_not_import("spec_query_sqlalchemy*")
        .should_not_import("sqlalchemy*")
        .check("spec_query")
    )


def test_evaluators_do_not_depend_on_adapters() -> None:
    """
    Evaluators only talk to ports; they must not reach into the in-memory
    repository adapter.
    """
    (
        archrule("evaluators_use_ports_only")
        .match("spec_query.evaluators*")
        .should_not_import("spec_query.adapters*")
        .check("spec_query")
    )
