from core.models import GenerationStatus
from core.store import InnovationStore
from fakes import make_product


def test_products_are_appended_in_order():
    store = InnovationStore()
    store.add_generated_products([make_product("a"), make_product("b")])
    store.add_generated_products([make_product("c")])
    assert [p.id for p in store.generated_products] == ["a", "b", "c"]


def test_toggle_favorite():
    store = InnovationStore()
    store.toggle_favorite("a")
    store.toggle_favorite("b")
    assert store.favorites == ["a", "b"]
    assert store.is_favorite("a")

    store.toggle_favorite("a")
    assert store.favorites == ["b"]
    assert not store.is_favorite("a")


def test_favorite_products_only_lists_known_products():
    store = InnovationStore()
    store.add_generated_products([make_product("a"), make_product("b")])
    store.toggle_favorite("b")
    store.toggle_favorite("ghost")
    assert [p.id for p in store.favorite_products()] == ["b"]


def test_generate_requires_category():
    store = InnovationStore()
    assert store.can_generate is False
    assert store.begin_generation() is False
    assert store.status == GenerationStatus.IDLE


def test_generate_success_cycle():
    store = InnovationStore()
    store.set_selected_category("laundry")

    assert store.begin_generation() is True
    assert store.is_generating
    assert store.begin_generation() is False

    store.complete_generation([make_product("a")])
    assert store.status == GenerationStatus.IDLE
    assert [p.id for p in store.generated_products] == ["a"]


def test_generate_failure_keeps_no_partial_state():
    store = InnovationStore()
    store.set_selected_category("health")
    store.begin_generation()
    store.fail_generation("Cannot connect to the server.")

    assert store.status == GenerationStatus.ERROR
    assert store.error == "Cannot connect to the server."
    assert store.generated_products == []

    assert store.begin_generation() is True
    assert store.error is None


def test_session_ids_differ_between_stores():
    assert InnovationStore().session_id != InnovationStore().session_id
